from __future__ import annotations

import logging

from flask import Flask, jsonify, session

from ..common.http import message_response, read_json_body
from ..container import Container
from ..core.exceptions import AuthenticationError, ValidationError

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/auth/login", methods=["POST"], endpoint="login")
    def login():
        try:
            body = read_json_body()
            user = container.auth_service.authenticate(
                body.get("userId", ""),
                body.get("role", ""),
                body.get("password"),
            )
        except ValidationError as e:
            return message_response(str(e), 400)
        except AuthenticationError as e:
            return message_response(str(e), 401)
        except Exception as e:
            logger.exception("Error during login")
            return message_response("Error during login.", 500, error=str(e))

        session.clear()
        session["user_id"] = user.user_id
        session["role"] = user.role.value
        logger.info("%s %s logged in", user.role.value.capitalize(), user.user_id)
        return jsonify(user.to_dict()), 200

    @app.route("/api/auth/logout", methods=["POST"], endpoint="logout")
    def logout():
        session.clear()
        return message_response("Logged out.", 200)

    @app.route("/api/auth/me", methods=["GET"], endpoint="me")
    def me():
        if "user_id" not in session:
            return message_response("Not logged in.", 401)
        return jsonify({"id": session["user_id"], "role": session.get("role")}), 200
