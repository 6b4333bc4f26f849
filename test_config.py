"""Tests for environment-driven configuration."""

from dataclasses import fields

import pytest

from corpus_search.search.config import DEFAULT_ENDPOINT, DEFAULT_MODEL_ID, SearchServiceConfig
from corpus_search.search.exceptions import ConfigurationException

ENV_VARS = [
    "ENDPOINT",
    "OUSER",
    "PASSWORD",
    "SEARCH_VERIFY_CERTS",
    "SEARCH_TIMEOUT_SECONDS",
    "SEARCH_NEURAL_MODEL_ID",
    "SEARCH_FAIL_FAST",
    "SEARCH_LOG_LEVEL",
    "SEARCH_JSON_LOGS",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    config = SearchServiceConfig.from_environment(env_file=None)

    assert config.opensearch_config.endpoint == DEFAULT_ENDPOINT
    assert config.opensearch_config.username == "admin"
    assert config.opensearch_config.password == "admin"
    assert config.opensearch_config.verify_certs is False
    assert config.opensearch_config.timeout == 30
    assert config.model_id == DEFAULT_MODEL_ID
    assert config.fail_fast is True
    assert config.json_logs is True


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("ENDPOINT", "https://search.internal:9200")
    monkeypatch.setenv("OUSER", "reader")
    monkeypatch.setenv("PASSWORD", "secret")
    monkeypatch.setenv("SEARCH_VERIFY_CERTS", "true")
    monkeypatch.setenv("SEARCH_TIMEOUT_SECONDS", "5")
    monkeypatch.setenv("SEARCH_NEURAL_MODEL_ID", "model-x")
    monkeypatch.setenv("SEARCH_FAIL_FAST", "false")

    config = SearchServiceConfig.from_environment(env_file=None)

    assert config.opensearch_config.endpoint == "https://search.internal:9200"
    assert config.opensearch_config.username == "reader"
    assert config.opensearch_config.password == "secret"
    assert config.opensearch_config.verify_certs is True
    assert config.opensearch_config.timeout == 5
    assert config.model_id == "model-x"
    assert config.fail_fast is False


def test_env_file_is_read(tmp_path, monkeypatch):
    env_file = tmp_path / ".env"
    env_file.write_text("ENDPOINT=http://from-file:9200\nSEARCH_NEURAL_MODEL_ID=file-model\n")
    monkeypatch.setenv("SEARCH_NEURAL_MODEL_ID", "env-model")
    # Register ENDPOINT with monkeypatch so the value loaded from the file is undone.
    monkeypatch.setenv("ENDPOINT", "placeholder")
    monkeypatch.delenv("ENDPOINT")

    config = SearchServiceConfig.from_environment(env_file=str(env_file))

    assert config.opensearch_config.endpoint == "http://from-file:9200"
    assert config.model_id == "env-model"


def test_missing_env_file_is_fine(tmp_path):
    config = SearchServiceConfig.from_environment(env_file=str(tmp_path / "absent.env"))
    assert config.opensearch_config.endpoint == DEFAULT_ENDPOINT


@pytest.mark.parametrize("value", ["abc", "0", "-3"])
def test_invalid_timeout(monkeypatch, value):
    monkeypatch.setenv("SEARCH_TIMEOUT_SECONDS", value)
    with pytest.raises(ConfigurationException):
        SearchServiceConfig.from_environment(env_file=None)


def test_config_fields():
    """Only settings the service reads are part of the config."""
    assert [f.name for f in fields(SearchServiceConfig)] == [
        "opensearch_config",
        "model_id",
        "fail_fast",
        "log_level",
        "json_logs",
    ]
