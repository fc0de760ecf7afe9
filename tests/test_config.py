from thenette.config import Settings


def test_defaults_from_empty_env():
    cfg = Settings.from_env({})
    assert cfg.log_level == "warning"
    assert cfg.emit_events is False


def test_env_overrides():
    cfg = Settings.from_env({"THENETTE_LOG_LEVEL": "DEBUG", "THENETTE_EVENTS": "true"})
    assert cfg.log_level == "debug"
    assert cfg.emit_events is True


def test_events_flag_falsy_values():
    for raw in ("0", "no", "off", ""):
        assert Settings.from_env({"THENETTE_EVENTS": raw}).emit_events is False
