from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..common.http import message_response, read_json_body
from ..container import Container
from ..core.exceptions import DuplicateCheckInError, SessionNotOpenError, ValidationError

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    ledger = container.checkin_ledger
    sessions = container.session_manager

    def _text(value) -> str:
        return value.strip() if isinstance(value, str) else ""

    @app.route("/api/check-in", methods=["POST"], endpoint="check_in")
    def check_in():
        try:
            body = read_json_body()
            student_id = _text(body.get("studentId"))
            device_id = _text(body.get("deviceId") or body.get("bluetoothMacAddress"))
            if not student_id or not device_id:
                return message_response("Student ID and Bluetooth device ID are required.", 400)

            record = ledger.check_in(student_id, device_id)
            return message_response("Check-in successful!", 201, checkIn=record.to_dict())
        except ValidationError as e:
            return message_response(str(e), 400)
        except SessionNotOpenError as e:
            return message_response(str(e), 403)
        except DuplicateCheckInError as e:
            return message_response(str(e), 409)
        except Exception as e:
            logger.exception("Error processing check-in")
            return message_response("Error processing check-in.", 500, error=str(e))

    @app.route("/api/manual-check-in", methods=["POST"], endpoint="manual_check_in")
    def manual_check_in():
        try:
            body = read_json_body()
            student_id = _text(body.get("studentId"))
            if not student_id:
                return message_response("Student ID is required.", 400)

            record = ledger.manual_check_in(student_id)
            return message_response(
                f"Student {student_id} manually checked in successfully!", 201, checkIn=record.to_dict()
            )
        except ValidationError as e:
            return message_response(str(e), 400)
        except SessionNotOpenError as e:
            return message_response(str(e), 403)
        except DuplicateCheckInError as e:
            return message_response(str(e), 409)
        except Exception as e:
            logger.exception("Error processing manual check-in")
            return message_response("Error processing manual check-in.", 500, error=str(e))

    @app.route("/api/list", methods=["GET"], endpoint="list_check_ins")
    def list_check_ins():
        scope = request.args.get("session", "").strip()
        if scope == "current":
            records = ledger.list_for_session(sessions.get_status().session_id)
        elif scope:
            records = ledger.list_for_session(scope)
        else:
            records = ledger.list()

        if request.args.get("order", "").lower() == "desc":
            # ids are "checkin-<n>"; the numeric part breaks timestamp ties
            records = sorted(
                records,
                key=lambda r: (r.timestamp, int(r.id.rsplit("-", 1)[-1])),
                reverse=True,
            )

        return jsonify([r.to_dict() for r in records]), 200
