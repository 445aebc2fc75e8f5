from __future__ import annotations

import importlib
import logging

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .container import build_container
from .core.constants import DEFAULT_CHART_RECENT_LIMIT, DEFAULT_CHURCH_NAME

logger = logging.getLogger(__name__)


def create_app() -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__, template_folder="../../../templates")

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["CHURCH_NAME"] = getattr(settings, "CHURCH_NAME", DEFAULT_CHURCH_NAME)
    app.config["CHART_RECENT_LIMIT"] = int(getattr(settings, "CHART_RECENT_LIMIT", DEFAULT_CHART_RECENT_LIMIT))

    zero_total_policy = getattr(settings, "ZERO_TOTAL_POLICY", "reject")
    seed_sample = bool(getattr(settings, "SEED_SAMPLE_DATA", False))

    container = build_container(zero_total_policy=zero_total_policy, seed_sample=seed_sample)
    logger.info(
        "settings=%s zero_total_policy=%s seeded=%d",
        settings_module,
        container.attendance_service.zero_total_policy.value,
        container.attendance_repo.count(),
    )

    app.extensions["church_attendance"] = container
    register_attendance(app, container)

    return app
