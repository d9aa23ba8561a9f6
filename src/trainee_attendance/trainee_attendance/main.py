from __future__ import annotations

import importlib
import logging

from dotenv import load_dotenv

from config import get_settings_module

from .container import Container, build_container

logger = logging.getLogger(__name__)


def create_services() -> Container:
    load_dotenv(override=False)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    logging.basicConfig(level=str(getattr(settings, "LOG_LEVEL", "INFO")).upper())

    container = build_container(settings=settings)

    if getattr(settings, "DEBUG", False):
        logger.info(
            "[trainee-attendance] settings=%s lookback=%s recent=%s calendar_months=%s",
            settings_module,
            container.lookback_days,
            container.recent_limit,
            container.calendar_months,
        )

    return container
