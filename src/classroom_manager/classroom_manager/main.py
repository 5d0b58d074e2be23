from __future__ import annotations

import importlib
import logging
from pathlib import Path

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .assignments.controller import register as register_assignments
from .attendance.controller import register as register_attendance
from .classes.controller import register as register_classes
from .common.logging_utils import configure_logging
from .container import build_container
from .dashboard.controller import register as register_dashboard
from .quizzes.controller import register as register_quizzes
from .reports.controller import register as register_reports
from .schedules.controller import register as register_schedules
from .tuition.controller import register as register_tuition
from .users.controller import register as register_users
from .vocabulary.controller import register as register_vocabulary

logger = logging.getLogger(__name__)

DATABASE_DIR = Path(__file__).resolve().parents[3] / "database"


def create_app(settings_module: str | None = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    backend = str(getattr(settings, "BACKEND", "mysql")).lower()
    db_config = getattr(settings, "DB_CONFIG", None)

    logger.info(
        "settings=%s backend=%s db=%s@%s:%s/%s",
        settings_module,
        backend,
        (db_config or {}).get("user"),
        (db_config or {}).get("host"),
        (db_config or {}).get("port", 3306),
        (db_config or {}).get("database"),
    )

    if backend == "mysql":
        from .database.bootstrap import apply_schema, apply_seed_sql, ensure_demo_profiles, list_tables

        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(db_config, schema_path=DATABASE_DIR / "schema.sql")
            logger.info("schema ready (tables=%s)", len(list_tables(db_config)))
        if bool(getattr(settings, "AUTO_SEED_DB", False)):
            apply_seed_sql(db_config, seed_path=DATABASE_DIR / "seed.sql")
            ensure_demo_profiles(db_config)
            logger.info("demo seed ready")

    container = build_container(
        db_config=db_config,
        backend=backend,
        buffer_minutes=int(getattr(settings, "ATTENDANCE_BUFFER_MINUTES", 15)),
    )
    app.extensions["classroom_container"] = container

    register_users(app, container)
    register_classes(app, container)
    register_schedules(app, container)
    register_dashboard(app, container)
    register_attendance(app, container)
    register_tuition(app, container)
    register_reports(app, container)
    register_assignments(app, container)
    register_vocabulary(app, container)
    register_quizzes(app, container)

    return app
