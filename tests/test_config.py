"""Tests for environment-driven configuration and logging setup."""

import logging

import pytest
import structlog

from treezor.config import PRODUCTION_BASE_URL, SANDBOX_BASE_URL, TreezorSettings, settings
from treezor.errors import ConfigurationError
from treezor.logging_config import bind_webhook_context, clear_webhook_context, configure_logging
from treezor.types import PARIS, get_zone


def test_defaults_to_sandbox(monkeypatch):
    monkeypatch.delenv("TREEZOR_PRODUCTION", raising=False)
    monkeypatch.delenv("TREEZOR_BASE_URL", raising=False)
    assert TreezorSettings(_env_file=None).effective_base_url == SANDBOX_BASE_URL


def test_production_from_env(monkeypatch):
    monkeypatch.setenv("TREEZOR_PRODUCTION", "1")
    monkeypatch.setenv("TREEZOR_WEBHOOK_SECRET", "s3cret")
    config = TreezorSettings(_env_file=None)
    assert config.effective_base_url == PRODUCTION_BASE_URL
    assert config.webhook_secret == "s3cret"


def test_base_url_override_gets_trailing_slash():
    config = TreezorSettings(_env_file=None, base_url="https://acme.sandbox.treezor.co/v1/index.php")
    assert config.effective_base_url == "https://acme.sandbox.treezor.co/v1/index.php/"


def test_get_zone():
    assert get_zone("Europe/Paris") is PARIS
    assert get_zone("America/New_York").key == "America/New_York"
    with pytest.raises(ConfigurationError):
        get_zone("Mars/Olympus_Mons")


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    structlog.reset_defaults()


def test_configure_logging(restore_root_logger):
    configure_logging("debug", json_output=True)
    root = logging.getLogger()
    assert root.level == logging.DEBUG
    assert isinstance(root.handlers[0].formatter, structlog.stdlib.ProcessorFormatter)


def test_configure_logging_defaults_from_settings(restore_root_logger, monkeypatch):
    monkeypatch.setattr(settings, "log_level", "warning")
    monkeypatch.setattr(settings, "json_logs", True)
    configure_logging()
    root = logging.getLogger()
    assert root.level == logging.WARNING
    formatter = root.handlers[0].formatter
    assert any(isinstance(p, structlog.processors.JSONRenderer) for p in formatter.processors)
    assert logging.getLogger("httpx").level == logging.WARNING


def test_unknown_level_falls_back_to_info(restore_root_logger):
    configure_logging("chatty", json_output=False)
    assert logging.getLogger().level == logging.INFO


def test_webhook_context_leaves_host_keys():
    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(trace_id="abc")
    tokens = bind_webhook_context("user.create", object_id="42")
    assert structlog.contextvars.get_contextvars() == {
        "trace_id": "abc",
        "event_type": "user.create",
        "object_id": "42",
    }
    clear_webhook_context(tokens)
    assert structlog.contextvars.get_contextvars() == {"trace_id": "abc"}
    structlog.contextvars.clear_contextvars()
