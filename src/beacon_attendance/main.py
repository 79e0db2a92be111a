from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify

from .settings import get_settings_module

from .container import Container, build_container
from .checkins.controller import register as register_checkins
from .sessions.controller import register as register_sessions
from .users.controller import register as register_users

LOG_FORMAT = "[beacon-attendance] %(asctime)s %(levelname)s %(name)s: %(message)s"

logger = logging.getLogger(__name__)


def create_app(*, settings_module: Optional[str] = None, container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logging.basicConfig(level=getattr(settings, "LOG_LEVEL", "INFO"), format=LOG_FORMAT)
    logger.info("settings=%s", settings_module)

    if container is None:
        container = build_container(
            auto_close_timer=bool(getattr(settings, "AUTO_CLOSE_TIMER", True)),
            require_class_id=bool(getattr(settings, "REQUIRE_CLASS_ID", False)),
            manual_entry_device_id=getattr(settings, "MANUAL_ENTRY_DEVICE_ID", "INSTRUCTOR_MANUAL_ENTRY"),
            instructor_accounts=getattr(settings, "INSTRUCTOR_ACCOUNTS", {}),
        )

    @app.route("/health", methods=["GET"], endpoint="health")
    def health():
        return jsonify({"status": "healthy"}), 200

    register_users(app, container)
    register_sessions(app, container)
    register_checkins(app, container)

    return app


def run() -> None:
    app = create_app()
    app.run(debug=app.config["DEBUG"], use_reloader=False)


if __name__ == "__main__":
    run()
