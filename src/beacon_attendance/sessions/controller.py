from __future__ import annotations

import logging

from flask import Flask, jsonify

from ..common.http import message_response, read_json_body
from ..common.validators import optional_positive_int
from ..container import Container
from ..core.constants import MAX_SESSION_DURATION_MINUTES
from ..core.exceptions import ConflictError, ValidationError

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    sessions = container.session_manager

    @app.route("/api/attendance/start", methods=["POST"], endpoint="attendance_start")
    def attendance_start():
        try:
            body = read_json_body()
            duration = optional_positive_int(
                body.get("durationMinutes"), "durationMinutes", maximum=MAX_SESSION_DURATION_MINUTES
            )

            class_id = body.get("classId")
            if class_id is not None and not isinstance(class_id, str):
                class_id = str(class_id)
            class_id = class_id.strip() if class_id else None
            if container.require_class_id and not class_id:
                raise ValidationError("Class ID is required to start a session.")

            session = sessions.start(duration_minutes=duration, class_id=class_id)
            return jsonify(session.to_dict()), 200
        except (ConflictError, ValidationError) as e:
            return message_response(str(e), 400)
        except Exception as e:
            logger.exception("Error starting attendance session")
            return message_response("Error starting attendance session", 500, error=str(e))

    @app.route("/api/attendance/end", methods=["POST"], endpoint="attendance_end")
    def attendance_end():
        try:
            session = sessions.end()
            return jsonify(session.to_dict()), 200
        except ConflictError as e:
            return message_response(str(e), 400)
        except Exception as e:
            logger.exception("Error ending attendance session")
            return message_response("Error ending attendance session", 500, error=str(e))

    @app.route("/api/attendance/status", methods=["GET"], endpoint="attendance_status")
    def attendance_status():
        return jsonify(sessions.get_status().to_dict()), 200
