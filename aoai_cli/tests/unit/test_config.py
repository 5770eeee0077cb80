import dataclasses

import pytest

from aoai_cli.config import CommandConfig, get_settings, normalize_endpoint


def test_settings_read_azure_environment(monkeypatch):
    monkeypatch.setenv("AZURE_OPENAI_ENDPOINT", "https://contoso.openai.azure.com")
    monkeypatch.setenv("AZURE_OPENAI_API_KEY", "env-key")
    monkeypatch.setenv("AZURE_OPENAI_DEPLOYMENT_NAME", "gpt-4o-mini")

    settings = get_settings()

    assert settings.azure_openai_api_key == "env-key"
    assert settings.azure_openai_deployment_name == "gpt-4o-mini"
    assert settings.azure_openai_api_version == "2024-12-01-preview"
    assert settings.ensure_endpoint() == "https://contoso.openai.azure.com/"


def test_settings_default_to_empty():
    settings = get_settings()

    assert settings.azure_openai_api_key is None
    assert settings.ensure_endpoint() == ""


@pytest.mark.parametrize(
    "raw, expected",
    [
        (None, ""),
        ("  ", ""),
        ("https://a.openai.azure.com", "https://a.openai.azure.com/"),
        (" https://a.openai.azure.com// ", "https://a.openai.azure.com/"),
    ],
)
def test_normalize_endpoint(raw, expected):
    assert normalize_endpoint(raw) == expected


def test_command_config_defaults_and_immutability():
    config = CommandConfig()

    assert config.model_deployment_id == "gpt-4o"
    assert config.message == "Hello, how are you?"
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.message = "changed"


def test_command_config_repr_hides_key():
    config = CommandConfig(endpoint="https://a.openai.azure.com", api_key="top-secret")

    assert "top-secret" not in repr(config)


def test_missing_fields():
    assert CommandConfig().missing_fields() == ["azureOpenAIEndpoint", "azureOpenAIKey"]
    assert CommandConfig(endpoint="https://a", use_default_credential=True).missing_fields() == []
    assert CommandConfig(endpoint="https://a", api_key="k", message=" ").missing_fields() == ["message"]
