from __future__ import annotations

import logging

# We use pytest fixtures (monkeypatch/tmp_path) to isolate env vars and config files per test.
import pytest

# We import the real loaders so tests exercise the packaged YAML files.
from geopoint.config.settings import get_logging_config, get_settings
from geopoint.core.logging import configure_logging


@pytest.fixture(autouse=True)
def _fresh_settings():
    # `get_settings` is lru_cached; clear it so each test sees its own environment.
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_default_settings_come_from_packaged_yaml(monkeypatch):
    # Make sure no developer-shell overrides leak into the default case.
    monkeypatch.delenv("GEOPOINT_CONFIG_PATH", raising=False)
    monkeypatch.delenv("GEOPOINT_LOG_LEVEL", raising=False)

    settings = get_settings()

    # Values must match `src/geopoint/config/defaults.yaml`.
    assert settings.app.name == "geopoint"
    assert settings.app.log_level == "INFO"


def test_env_overrides_log_level(monkeypatch):
    monkeypatch.delenv("GEOPOINT_CONFIG_PATH", raising=False)
    # Lower-case input is normalized by the settings validator.
    monkeypatch.setenv("GEOPOINT_LOG_LEVEL", "debug")

    assert get_settings().app.log_level == "DEBUG"


def test_external_config_path(monkeypatch, tmp_path):
    # An external YAML file replaces the packaged defaults entirely.
    cfg = tmp_path / "geopoint.yaml"
    cfg.write_text("app:\n  name: points-svc\n  log_level: warning\n", encoding="utf-8")
    monkeypatch.setenv("GEOPOINT_CONFIG_PATH", str(cfg))
    monkeypatch.delenv("GEOPOINT_LOG_LEVEL", raising=False)

    settings = get_settings()

    assert settings.app.name == "points-svc"
    assert settings.app.log_level == "WARNING"


def test_rejects_unknown_log_level(monkeypatch):
    monkeypatch.delenv("GEOPOINT_CONFIG_PATH", raising=False)
    monkeypatch.setenv("GEOPOINT_LOG_LEVEL", "chatty")

    # Pydantic's ValidationError is a ValueError, and it carries our validator's message.
    with pytest.raises(ValueError, match="Unknown log level"):
        get_settings()


def test_rejects_non_mapping_yaml(monkeypatch, tmp_path):
    # A YAML list at the root is not a settings payload.
    cfg = tmp_path / "bad.yaml"
    cfg.write_text("- just\n- a list\n", encoding="utf-8")
    monkeypatch.setenv("GEOPOINT_CONFIG_PATH", str(cfg))

    with pytest.raises(ValueError, match="expected a mapping"):
        get_settings()


def test_configure_logging_applies_settings_level(monkeypatch):
    monkeypatch.delenv("GEOPOINT_CONFIG_PATH", raising=False)
    monkeypatch.setenv("GEOPOINT_LOG_LEVEL", "DEBUG")

    # dictConfig changes process-global state; snapshot it so other tests are unaffected.
    root = logging.getLogger()
    package_logger = logging.getLogger("geopoint")
    saved_level, saved_handlers = root.level, list(root.handlers)
    saved_package_level = package_logger.level

    try:
        configure_logging()
        assert root.level == logging.DEBUG
        assert package_logger.level == logging.DEBUG
        # The cached packaged config stays untouched for the next caller.
        assert get_logging_config()["root"]["level"] == "INFO"
        assert "level" not in get_logging_config()["loggers"]["geopoint"]
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)
        package_logger.setLevel(saved_package_level)
