import pytest

from thenette.config import settings


@pytest.fixture(autouse=True)
def _quiet_events(monkeypatch):
    # Environment must not switch the event bus on for unrelated tests.
    monkeypatch.setattr(settings, "emit_events", False)
