from __future__ import annotations

import importlib
import logging
from typing import Any, Optional

from dotenv import load_dotenv
from flask import Flask, jsonify

from config import get_settings_module

from .container import Container, build_container
from .core.constants import STORAGE_KEY
from .dashboard.controller import register as register_dashboard
from .event_types.controller import register as register_event_types
from .logs.controller import register as register_logs
from .staff.controller import register as register_staff
from .storage.controller import register as register_storage

logger = logging.getLogger(__name__)


def create_app(settings: Any = None, *, container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = None
    if settings is None:
        settings_module = get_settings_module()
        settings = importlib.import_module(settings_module)

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    if container is None:
        container = build_container(
            storage_path=getattr(settings, "STORAGE_PATH"),
            storage_key=getattr(settings, "STORAGE_KEY", STORAGE_KEY),
            openai_api_key=getattr(settings, "OPENAI_API_KEY", ""),
            openai_model=getattr(settings, "OPENAI_MODEL", "gpt-4o-mini"),
        )
    app.extensions["stafftrack"] = container

    if app.config["DEBUG"]:
        logger.info("settings=%s key=%s", settings_module or type(settings).__name__, container.store.key)

    register_staff(app, container)
    register_event_types(app, container)
    register_logs(app, container)
    register_dashboard(app, container)
    register_storage(app, container)

    @app.get("/api/health")
    def health_check():
        return jsonify({"status": "ok"})

    return app
