from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import CheckInRecord


class CheckInRepository(Protocol):
    def add(self, record: CheckInRecord) -> None:
        raise NotImplementedError

    def find_for_student(self, *, session_id: str, student_id: str) -> Optional[CheckInRecord]:
        raise NotImplementedError

    def list_all(self) -> Sequence[CheckInRecord]:
        raise NotImplementedError

    def list_for_session(self, session_id: str) -> Sequence[CheckInRecord]:
        raise NotImplementedError


class InMemoryCheckInRepository:
    """Append-only store living for the process lifetime."""

    def __init__(self):
        self._records: list[CheckInRecord] = []
        self._by_session_student: dict[tuple[str, str], CheckInRecord] = {}

    def add(self, record: CheckInRecord) -> None:
        key = (record.session_id, record.student_id)
        if key in self._by_session_student:
            raise ValueError(f"duplicate check-in for {key}")
        self._records.append(record)
        self._by_session_student[key] = record

    def find_for_student(self, *, session_id: str, student_id: str) -> Optional[CheckInRecord]:
        return self._by_session_student.get((session_id, student_id))

    def list_all(self) -> Sequence[CheckInRecord]:
        return list(self._records)

    def list_for_session(self, session_id: str) -> Sequence[CheckInRecord]:
        return [r for r in self._records if r.session_id == session_id]
