"""
Configuration Tests

Tests for Settings validation and derived properties.
"""

import pytest
from pydantic import ValidationError

from app.config import Settings


def make_settings(**overrides) -> Settings:
    """Build settings without reading a .env file."""
    return Settings(_env_file=None, **overrides)


class TestSettings:
    """Tests for the Settings model."""

    def test_defaults(self):
        settings = make_settings(environment="development", graphql_ide="graphiql")

        assert settings.is_production is False
        assert settings.graphql_ide_enabled is True

    def test_environment_is_normalised(self):
        settings = make_settings(environment="PRODUCTION")

        assert settings.environment == "production"
        assert settings.is_production is True

    def test_unknown_environment(self):
        with pytest.raises(ValidationError):
            make_settings(environment="qa")

    def test_log_level_is_uppercased(self):
        assert make_settings(log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level(self):
        with pytest.raises(ValidationError):
            make_settings(log_level="verbose")

    def test_explorer_disabled_in_production(self):
        settings = make_settings(environment="production", graphql_ide="graphiql")

        assert settings.graphql_ide_enabled is False

    def test_explorer_can_be_disabled(self):
        settings = make_settings(environment="development", graphql_ide="")

        assert settings.graphql_ide_enabled is False

    def test_invalid_explorer(self):
        with pytest.raises(ValidationError):
            make_settings(graphql_ide="playground")

    def test_allowed_origins_list(self):
        settings = make_settings(allowed_origins="http://a.test, http://b.test,")

        assert settings.allowed_origins_list == ["http://a.test", "http://b.test"]
