from __future__ import annotations

import importlib
import logging

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .bridge.controller import register as register_bridge
from .bridge.registry import build_bridge
from .container import build_container
from .seed.seeder import seed_database

logger = logging.getLogger(__name__)


def create_app() -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    database_path = getattr(settings, "DATABASE_PATH")
    logger.info("settings=%s db=%s", settings_module, database_path)

    container = build_container(
        database_path=database_path,
        init_schema=bool(getattr(settings, "AUTO_INIT_DB", True)),
        strict_schema=bool(getattr(settings, "STRICT_SCHEMA", False)),
    )
    if getattr(settings, "AUTO_SEED_DB", False):
        summary = seed_database(container.conn)
        logger.info("Demo seed ready: %s", summary)

    bridge = build_bridge(container)
    register_bridge(app, bridge)

    app.extensions["classroll.container"] = container
    app.extensions["classroll.bridge"] = bridge
    return app


def run() -> None:
    app = create_app()
    app.run(host="127.0.0.1", port=5000, debug=app.config["DEBUG"])


if __name__ == "__main__":
    run()
