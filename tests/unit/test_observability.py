import logging

from src.config import settings
from src.engine.mana_base import get_mana_base
from src.engine.observability import log_event


def test_log_event_sorted_payload(caplog) -> None:
    with caplog.at_level(logging.INFO, logger="observability"):
        log_event("test.event", {"b": 2, "a": 1})

    assert 'event=test.event payload={"a": 1, "b": 2}' in caplog.text


def test_log_event_disabled(caplog, monkeypatch) -> None:
    monkeypatch.setattr(settings, "log_events", False)
    with caplog.at_level(logging.INFO, logger="observability"):
        log_event("test.event", {"a": 1})

    assert "test.event" not in caplog.text


def test_mana_base_emits_event(caplog) -> None:
    with caplog.at_level(logging.INFO, logger="observability"):
        get_mana_base(["U", "R"])

    assert "event=mana_base.computed" in caplog.text
    assert '"colors": "UR"' in caplog.text
    assert '"total": 39' in caplog.text
