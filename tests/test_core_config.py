import pytest
from pydantic import HttpUrl

from app.core.config import Settings, parse_comma_separated_origins


class TestSettings:
    def test_defaults(self):
        settings = Settings(
            DATABASE_URL="sqlite://", SECRET_KEY="k" * 32, ENVIRONMENT="development"
        )
        assert settings.ALGORITHM == "HS256"
        assert settings.ACCESS_TOKEN_EXPIRE_MINUTES == 60 * 24
        assert settings.OTEL_EXPORTER_OTLP_ENDPOINT is None
        assert settings.is_production is False

    def test_secret_is_masked(self):
        settings = Settings(DATABASE_URL="sqlite://", SECRET_KEY="super-secret")
        assert "super-secret" not in repr(settings)
        assert settings.SECRET_KEY.get_secret_value() == "super-secret"

    @pytest.mark.parametrize("environment", ["production", "Production", "PRODUCTION"])
    def test_is_production_ignores_case(self, environment):
        settings = Settings(
            DATABASE_URL="sqlite://", SECRET_KEY="k", ENVIRONMENT=environment
        )
        assert settings.is_production


class TestParseOrigins:
    def test_empty(self):
        assert parse_comma_separated_origins("") == []

    def test_multiple_with_spaces(self):
        origins = parse_comma_separated_origins(
            "http://localhost:3000, https://dashboard.example.org ,"
        )
        assert origins == [
            HttpUrl("http://localhost:3000"),
            HttpUrl("https://dashboard.example.org"),
        ]

    def test_invalid_origin(self):
        with pytest.raises(ValueError, match="Invalid CORS origin 'not a url'"):
            parse_comma_separated_origins("not a url")

    def test_cors_origins_drop_trailing_slash(self):
        settings = Settings(
            DATABASE_URL="sqlite://",
            SECRET_KEY="k",
            BACKEND_CORS_ORIGINS="http://localhost:3000/,https://dashboard.example.org",
        )
        assert settings.cors_origins == [
            "http://localhost:3000",
            "https://dashboard.example.org",
        ]
