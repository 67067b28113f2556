"""
Tests for application settings validation.
"""

import pytest
from pydantic import ValidationError

from clookbook.config import Settings

VALID_KEY = "k" * 40


class TestSecretKey:
    def test_short_secret_key_rejected(self):
        with pytest.raises(ValidationError, match="at least 32 characters"):
            Settings(secret_key="too-short")

    def test_placeholder_secret_key_rejected(self):
        with pytest.raises(ValidationError, match="placeholder"):
            Settings(secret_key="REPLACE_WITH_YOUR_GENERATED_SECRET_KEY_PLEASE")

    def test_jwt_secret_alias(self, monkeypatch):
        monkeypatch.delenv("SECRET_KEY", raising=False)
        monkeypatch.setenv("JWT_SECRET", VALID_KEY)

        assert Settings().secret_key == VALID_KEY


class TestSettingsValidators:
    @pytest.mark.parametrize(
        "value,expected",
        [("/api", "/api"), ("api", "/api"), ("/api/", "/api"), ("/", ""), ("v2/api", "/v2/api")],
    )
    def test_api_prefix_normalized(self, value, expected):
        assert Settings(secret_key=VALID_KEY, api_prefix=value).api_prefix == expected

    def test_log_level_uppercased(self):
        assert Settings(secret_key=VALID_KEY, log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level(self):
        with pytest.raises(ValidationError):
            Settings(secret_key=VALID_KEY, log_level="chatty")

    def test_invalid_environment(self):
        with pytest.raises(ValidationError):
            Settings(secret_key=VALID_KEY, environment="moon")

    def test_production_flag(self):
        assert Settings(secret_key=VALID_KEY, environment="Production").is_production is True

    def test_allowed_origins_list(self):
        settings = Settings(
            secret_key=VALID_KEY,
            allowed_origins="http://a.test, http://b.test,,",
        )

        assert settings.allowed_origins_list == ["http://a.test", "http://b.test"]

    def test_cookie_max_age_matches_token_lifetime(self):
        settings = Settings(secret_key=VALID_KEY, access_token_expire_days=7)

        assert settings.access_token_max_age == 7 * 24 * 60 * 60

    def test_sqlite_detection(self):
        assert Settings(secret_key=VALID_KEY, database_url="sqlite:///./dev.db").is_sqlite
        assert not Settings(
            secret_key=VALID_KEY,
            database_url="postgresql://u:p@localhost/db",
        ).is_sqlite
