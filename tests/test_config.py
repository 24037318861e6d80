# File: tests/test_config.py

import pytest

from onboard.core.config import ConfigurationError, Settings
from onboard.main import create_application


def test_cors_origins_from_comma_list():
    settings = Settings(cors_origins="http://a.test, http://b.test,")

    assert settings.cors_origins == ["http://a.test", "http://b.test"]


def test_development_allows_missing_secrets():
    settings = Settings(environment="development", jwt_secret=None, openai_api_key=None)

    settings.validate_for_startup()
    assert settings.signing_secret == "dev-secret-key"


def test_production_requires_secrets():
    settings = Settings(environment="production", jwt_secret=None, openai_api_key=None)

    with pytest.raises(ConfigurationError) as exc:
        settings.validate_for_startup()

    assert "JWT_SECRET" in str(exc.value)
    assert "OPENAI_API_KEY" in str(exc.value)


def test_production_startup_is_fatal_without_secret(tmp_path):
    settings = Settings(
        environment="production",
        database_url=f"sqlite:///{tmp_path / 'prod.db'}",
        jwt_secret=None,
        openai_api_key="sk-test",
    )

    with pytest.raises(ConfigurationError, match="JWT_SECRET"):
        create_application(settings)


def test_production_with_secrets(tmp_path):
    settings = Settings(
        environment="production",
        database_url=f"sqlite:///{tmp_path / 'prod.db'}",
        jwt_secret="prod-secret-prod-secret-prod-secret",
        openai_api_key="sk-test",
    )

    app = create_application(settings)

    assert app.state.settings.is_production
    assert app.state.completion_client.model == settings.openai_model
