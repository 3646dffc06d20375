"""Unit tests for settings, JSON logging and the app factory wiring"""

import json
import logging
from fastapi.testclient import TestClient
from minibank.config import Settings
from minibank.api import main
from minibank.infrastructure.observability.logging import CustomJsonFormatter


def test_settings_defaults(monkeypatch):
    """Test defaults leave the registry unseeded"""
    monkeypatch.delenv("SEED_DEMO_ACCOUNTS", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)

    config = Settings(_env_file=None)

    assert config.service_name == "minibank"
    assert config.log_level == "INFO"
    assert config.seed_demo_accounts is False
    assert config.port == 8080


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("SEED_DEMO_ACCOUNTS", "true")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("PORT", "9000")

    config = Settings(_env_file=None)

    assert config.seed_demo_accounts is True
    assert config.log_level == "DEBUG"
    assert config.port == 9000


def test_json_formatter_adds_service_fields():
    """Test log records render as JSON with timestamp, level and service"""
    formatter = CustomJsonFormatter("%(timestamp)s %(level)s %(name)s %(message)s", service_name="minibank-test")
    record = logging.LogRecord(
        name="minibank.test",
        level=logging.WARNING,
        pathname=__file__,
        lineno=1,
        msg="Account with ID %s not found",
        args=(99,),
        exc_info=None,
    )
    record.request_id = "req-1"

    payload = json.loads(formatter.format(record))

    assert payload["message"] == "Account with ID 99 not found"
    assert payload["level"] == "WARNING"
    assert payload["service"] == "minibank-test"
    assert payload["request_id"] == "req-1"
    assert payload["timestamp"]


def test_create_app_starts_empty_by_default(monkeypatch):
    monkeypatch.setattr(main.settings, "seed_demo_accounts", False)

    client = TestClient(main.create_app())

    assert client.get("/accounts").json() == []


def test_create_app_seeds_demo_accounts_when_enabled(monkeypatch):
    """Test the startup seeding switch loads Alice and Bob"""
    monkeypatch.setattr(main.settings, "seed_demo_accounts", True)

    client = TestClient(main.create_app())

    assert client.get("/accounts/totalBalance").json() == 1500.0
    assert client.get("/accounts/owner/bob").json()[0]["id"] == 2
