from __future__ import annotations

import pytest

from beacon_attendance.container import build_container
from beacon_attendance.main import create_app


def test_health(client):
    assert client.get("/health").get_json() == {"status": "healthy"}


def test_status_before_any_session(client):
    resp = client.get("/api/attendance/status")

    assert resp.status_code == 200
    assert resp.get_json() == {"sessionId": None, "status": "not_started"}


def test_start_and_end_session(client, clock):
    resp = client.post("/api/attendance/start", json={"durationMinutes": 5, "classId": "CS101"})
    assert resp.status_code == 200
    body = resp.get_json()
    assert body["sessionId"] == "session-1"
    assert body["status"] == "open"
    assert body["classId"] == "CS101"
    assert body["autoCloseTime"] == "2026-02-01T08:05:00.000Z"
    assert "endTime" not in body

    clock.advance(minutes=2)
    resp = client.post("/api/attendance/end")
    assert resp.status_code == 200
    assert resp.get_json()["status"] == "closed_manual"
    assert resp.get_json()["endTime"] == "2026-02-01T08:02:00.000Z"


def test_start_accepts_empty_body_and_numeric_string(client):
    assert client.post("/api/attendance/start").status_code == 200
    client.post("/api/attendance/end")

    resp = client.post("/api/attendance/start", json={"durationMinutes": "10"})
    assert resp.get_json()["durationMinutes"] == 10


def test_start_while_open_is_400(client):
    client.post("/api/attendance/start", json={})

    resp = client.post("/api/attendance/start", json={"durationMinutes": 3})

    assert resp.status_code == 400
    assert resp.get_json()["message"] == "An attendance session is already open."
    assert "autoCloseTime" not in client.get("/api/attendance/status").get_json()


@pytest.mark.parametrize("duration", [-1, "abc", 2.5, True, 10**10, 7 * 24 * 60 + 1])
def test_start_rejects_invalid_duration(client, duration):
    resp = client.post("/api/attendance/start", json={"durationMinutes": duration})

    assert resp.status_code == 400
    assert client.get("/api/attendance/status").get_json()["status"] == "not_started"


def test_start_requires_class_id_when_configured(clock, scheduler):
    container = build_container(clock=clock, scheduler=scheduler, require_class_id=True)
    client = create_app(settings_module="beacon_attendance.settings.testing", container=container).test_client()

    assert client.post("/api/attendance/start", json={}).status_code == 400
    assert client.post("/api/attendance/start", json={"classId": "CS101"}).status_code == 200


def test_end_without_session_is_400(client):
    resp = client.post("/api/attendance/end")

    assert resp.status_code == 400
    assert resp.get_json()["message"] == "No attendance session is currently open to end."


def test_check_in_scenario_duplicate_then_closed(client):
    client.post("/api/attendance/start", json={})

    resp = client.post("/api/check-in", json={"studentId": "s1", "deviceId": "d1"})
    assert resp.status_code == 201
    body = resp.get_json()
    assert body["message"] == "Check-in successful!"
    assert body["checkIn"]["studentId"] == "s1"
    assert body["checkIn"]["deviceId"] == "d1"
    assert body["checkIn"]["sessionId"] == "session-1"

    resp = client.post("/api/check-in", json={"studentId": "s1", "deviceId": "d2"})
    assert resp.status_code == 409

    client.post("/api/attendance/end")
    resp = client.post("/api/check-in", json={"studentId": "s1", "deviceId": "d3"})
    assert resp.status_code == 403


def test_timed_session_scenario(client, clock):
    client.post("/api/attendance/start", json={"durationMinutes": 1})

    clock.advance(seconds=10)
    assert client.post("/api/check-in", json={"studentId": "s1", "deviceId": "d1"}).status_code == 201

    clock.advance(seconds=51)
    status = client.get("/api/attendance/status").get_json()
    assert status["status"] == "closed_timeout"
    assert status["endTime"] == "2026-02-01T08:01:00.000Z"


def test_check_in_accepts_bluetooth_mac_address_field(client):
    client.post("/api/attendance/start", json={})

    resp = client.post("/api/check-in", json={"studentId": "s1", "bluetoothMacAddress": "AA:BB"})

    assert resp.status_code == 201
    assert resp.get_json()["checkIn"]["deviceId"] == "AA:BB"


@pytest.mark.parametrize("payload", [{}, {"studentId": "s1"}, {"deviceId": "d1"}, {"studentId": "", "deviceId": "d1"}])
def test_check_in_missing_fields_is_400(client, payload):
    client.post("/api/attendance/start", json={})

    resp = client.post("/api/check-in", json=payload)

    assert resp.status_code == 400
    assert resp.get_json()["message"] == "Student ID and Bluetooth device ID are required."


def test_check_in_missing_fields_checked_before_session(client):
    assert client.post("/api/check-in", json={"studentId": "s1"}).status_code == 400


def test_malformed_body_is_500_without_state_change(client):
    client.post("/api/attendance/start", json={})

    resp = client.post("/api/check-in", data="{not json", content_type="application/json")

    assert resp.status_code == 500
    assert resp.get_json()["message"] == "Error processing check-in."
    assert "error" in resp.get_json()
    assert client.get("/api/list").get_json() == []


def test_non_object_body_is_400(client):
    client.post("/api/attendance/start", json={})

    resp = client.post("/api/manual-check-in", json=["s1"])

    assert resp.status_code == 400


def test_manual_check_in(client):
    assert client.post("/api/manual-check-in", json={"studentId": "s1"}).status_code == 403

    client.post("/api/attendance/start", json={})
    resp = client.post("/api/manual-check-in", json={"studentId": "s1"})
    assert resp.status_code == 201
    body = resp.get_json()
    assert body["message"] == "Student s1 manually checked in successfully!"
    assert body["checkIn"]["deviceId"] == "INSTRUCTOR_MANUAL_ENTRY"

    resp = client.post("/api/manual-check-in", json={"studentId": "s1"})
    assert resp.status_code == 409
    assert resp.get_json()["message"] == "Student s1 has already checked in for this session."

    assert client.post("/api/manual-check-in", json={}).status_code == 400


def test_list_filters_and_orders(client, clock):
    client.post("/api/attendance/start", json={})
    client.post("/api/check-in", json={"studentId": "s1", "deviceId": "d1"})
    client.post("/api/attendance/end")

    client.post("/api/attendance/start", json={})
    clock.advance(seconds=1)
    client.post("/api/check-in", json={"studentId": "s1", "deviceId": "d1"})
    clock.advance(seconds=1)
    client.post("/api/manual-check-in", json={"studentId": "s2"})

    everything = client.get("/api/list").get_json()
    assert [r["id"] for r in everything] == ["checkin-1", "checkin-2", "checkin-3"]

    current = client.get("/api/list?session=current&order=desc").get_json()
    assert [r["studentId"] for r in current] == ["s2", "s1"]
    assert {r["sessionId"] for r in current} == {"session-2"}

    history = client.get("/api/list?session=session-1").get_json()
    assert [r["id"] for r in history] == ["checkin-1"]


def test_list_current_without_session_is_empty(client):
    assert client.get("/api/list?session=current").get_json() == []


def test_start_after_unpolled_timeout_succeeds(client, clock):
    client.post("/api/attendance/start", json={"durationMinutes": 1})
    clock.advance(minutes=5)

    resp = client.post("/api/attendance/start", json={})

    assert resp.status_code == 200
    assert resp.get_json()["sessionId"] == "session-2"
