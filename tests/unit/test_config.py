"""
Unit tests for Settings.
"""
import os
from unittest.mock import patch

from registration_service.core.config import Settings, get_settings, reset_settings


class TestSettings:
    """Tests for environment-driven Settings"""

    def test_defaults(self):
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings()
        assert settings.user_repository_backend == "mongo"
        assert settings.bcrypt_rounds == 12
        assert settings.smtp_configured is False

    def test_reads_environment(self, mock_env):
        settings = Settings()
        assert settings.user_repository_backend == "memory"
        assert settings.bcrypt_rounds == 4
        assert settings.smtp_host is None

    def test_cors_origins_split(self):
        with patch.dict(os.environ, {"CORS_ORIGINS": "http://a.test, http://b.test,"}):
            settings = Settings()
        assert settings.cors_origins == ["http://a.test", "http://b.test"]

    def test_smtp_configured(self):
        env = {"SMTP_HOST": "smtp.test", "SMTP_USER": "u", "SMTP_PASSWORD": "p", "SMTP_USE_TLS": "yes"}
        with patch.dict(os.environ, env):
            settings = Settings()
        assert settings.smtp_configured is True
        assert settings.smtp_use_tls is True

    def test_get_settings_is_cached_until_reset(self):
        reset_settings()
        first = get_settings()
        assert get_settings() is first
        reset_settings()
        assert get_settings() is not first
        reset_settings()
