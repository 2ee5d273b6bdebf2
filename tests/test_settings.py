import dataclasses

import pytest

from replitdb.errors import ConfigError
from replitdb.settings import Config


DB_URL = "https://kv.replit.com/v0/abc123"


def test_explicit_arguments():
    config = Config.resolve(url="http://localhost:8000/", token="tok", environ={})
    assert config.url == "http://localhost:8000"
    assert config.token == "tok"
    assert config.endpoint == "http://localhost:8000/tok"
    assert config.timeout is None


def test_environment_url_embeds_token():
    config = Config.resolve(environ={"REPLIT_DB_URL": DB_URL})
    assert config.url == "https://kv.replit.com/v0"
    assert config.token == "abc123"
    assert config.endpoint == DB_URL


def test_explicit_arguments_override_environment():
    environ = {"REPLIT_DB_URL": DB_URL, "REPLIT_DB_TIMEOUT": "3"}
    config = Config.resolve(url="http://127.0.0.1:9000", token="mine", timeout=1.5, environ=environ)
    assert config.endpoint == "http://127.0.0.1:9000/mine"
    assert config.timeout == 1.5


def test_explicit_token_replaces_embedded_token():
    config = Config.resolve(token="other", environ={"REPLIT_DB_URL": DB_URL})
    assert config.endpoint == "https://kv.replit.com/v0/other"


def test_timeout_from_environment():
    config = Config.resolve(environ={"REPLIT_DB_URL": DB_URL, "REPLIT_DB_TIMEOUT": "2.5"})
    assert config.timeout == 2.5


def test_reads_process_environment(monkeypatch):
    monkeypatch.setenv("REPLIT_DB_URL", DB_URL)
    monkeypatch.delenv("REPLIT_DB_TIMEOUT", raising=False)
    assert Config.resolve().token == "abc123"


@pytest.mark.parametrize(
    "kwargs",
    [
        {},
        {"url": ""},
        {"url": "kv.replit.com/v0/abc123"},
        {"url": "ftp://kv.replit.com/v0/abc123"},
        {"url": "http://localhost:8000", "token": "a/b"},
        {"url": "http://localhost:8000", "token": "tok?x=1"},
        {"url": "http://localhost:8000", "token": "tok#frag"},
        {"url": "http://localhost:8000", "token": "to k"},
        {"url": DB_URL, "timeout": "soon"},
        {"url": DB_URL, "timeout": float("nan")},
        {"url": DB_URL, "timeout": float("inf")},
        {"url": DB_URL, "timeout": 0},
        {"url": DB_URL, "timeout": -1},
    ],
)
def test_invalid_configuration(kwargs):
    with pytest.raises(ConfigError):
        Config.resolve(environ={}, **kwargs)


@pytest.mark.parametrize("timeout", ["soon", "nan", "inf", "-3", "0"])
def test_invalid_timeout_in_environment(timeout):
    with pytest.raises(ConfigError):
        Config.resolve(environ={"REPLIT_DB_URL": DB_URL, "REPLIT_DB_TIMEOUT": timeout})


def test_timeout_is_normalised_to_float():
    assert Config(url="http://localhost:8000", token="tok", timeout=3).timeout == 3.0
    assert Config.resolve(url=DB_URL, timeout="5", environ={}).timeout == 5.0


def test_missing_fields_on_direct_construction():
    with pytest.raises(ConfigError):
        Config(url="http://localhost:8000", token="")
    with pytest.raises(ConfigError):
        Config(url="", token="tok")


def test_config_error_is_value_error():
    with pytest.raises(ValueError):
        Config.resolve(environ={})


def test_config_is_immutable():
    config = Config.resolve(environ={"REPLIT_DB_URL": DB_URL})
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.token = "other"


def test_custom_url():
    config = Config.custom_url(DB_URL)
    assert config.endpoint == DB_URL


def test_custom_url_rejects_other_hosts():
    with pytest.raises(ConfigError):
        Config.custom_url("http://localhost:8000/abc123")
