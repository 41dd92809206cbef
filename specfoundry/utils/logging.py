"""Structured logging setup for the calculator library."""

import json
import logging
import sys
from typing import Optional

from specfoundry.core.config import get_settings


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        data = {
            "level": record.levelname,
            "message": record.getMessage(),
            "logger": record.name,
        }
        # Structured fields emitted by the calculators
        for attr in [
            "calculator",
            "reason",
            "error_code",
            "profile_kind",
            "unit_system",
            "designation",
            "nominal_size",
        ]:
            if hasattr(record, attr):
                value = getattr(record, attr)
                data[attr] = value.value if hasattr(value, "value") else value
        return json.dumps(data, ensure_ascii=False)


def setup_logging(level: Optional[str] = None) -> None:
    settings = get_settings()
    root = logging.getLogger()
    root.setLevel((level or settings.LOG_LEVEL).upper())
    handler = logging.StreamHandler(sys.stdout)
    if settings.LOG_JSON:
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )
    root.handlers = [handler]
