"""Lightweight structured event logging."""
from __future__ import annotations

import json
import logging
from typing import Any

from src.config import settings

logger = logging.getLogger("observability")


def log_event(event: str, payload: dict[str, Any]) -> None:
    if not settings.log_events:
        return
    logger.info("event=%s payload=%s", event, json.dumps(payload, sort_keys=True))
