from __future__ import annotations

import importlib
import logging
import weakref

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .container import build_container
from .database.bootstrap import list_tables

logger = logging.getLogger(__name__)


def _load_settings(overrides: dict | None) -> tuple[str, dict]:
    settings_module = get_settings_module()
    module = importlib.import_module(settings_module)
    settings = {k: getattr(module, k) for k in dir(module) if k.isupper()}
    settings.update(overrides or {})
    return settings_module, settings


def create_app(overrides: dict | None = None) -> Flask:
    load_dotenv(override=False)
    settings_module, settings = _load_settings(overrides)

    logging.basicConfig(
        level=str(settings.get("LOG_LEVEL", "INFO")).upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    app = Flask(__name__)
    app.secret_key = settings["SECRET_KEY"]
    app.config["DEBUG"] = bool(settings.get("DEBUG", False))
    app.config["TESTING"] = bool(settings.get("TESTING", False))
    app.config["EXPORT_DIR"] = str(settings["EXPORT_DIR"])
    db_config = dict(settings["DB_CONFIG"])

    # StorageInitError propagates: the app is unusable without its store.
    container = build_container(db_config=db_config, export_dir=app.config["EXPORT_DIR"])
    # Closed when the app is collected, or at interpreter exit at the latest.
    weakref.finalize(app, container.db.close)
    app.extensions["class_attendance"] = container

    if app.config["DEBUG"]:
        logger.info(
            "settings=%s db=%s tables=%d export_dir=%s",
            settings_module,
            db_config["path"],
            len(list_tables(container.db)),
            app.config["EXPORT_DIR"],
        )

    register_attendance(app, container)

    return app
