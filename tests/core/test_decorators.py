from core.decorators.decorators import inject_logger, resolve_log_level


def test_resolve_log_level_prefers_env_override(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL_WIDGET", "debug")
    monkeypatch.setenv("APP_LOG_LEVEL", "ERROR")
    assert resolve_log_level("Widget", "INFO") == "DEBUG"


def test_resolve_log_level_falls_back(monkeypatch):
    monkeypatch.delenv("LOG_LEVEL_WIDGET", raising=False)
    monkeypatch.setenv("APP_LOG_LEVEL", "error")
    assert resolve_log_level("Widget", "INFO") == "INFO"
    assert resolve_log_level("Widget") == "ERROR"


def test_inject_logger_binds_before_init():
    @inject_logger()
    class Probe:
        log_level = "INFO"

        def __init__(self, value):
            self.value = value
            self.had_logger = hasattr(self, "logger")

    probe = Probe(3)
    assert probe.value == 3
    assert probe.had_logger
    assert probe.logger is not None
