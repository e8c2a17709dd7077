"""
Shared pytest fixtures for registration service tests.
"""
import os
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from registration_service.application.dto.auth_dto import UserRegistrationRequest
from registration_service.domain.services.notification_service import NotificationService
from registration_service.infrastructure.db.in_memory_user_repository import InMemoryUserRepository


@pytest.fixture
def mock_env():
    """Fixture to set common test environment variables."""
    env_vars = {
        "USER_REPOSITORY_BACKEND": "memory",
        "MONGO_URI": "mongodb://localhost:27017",
        "MONGO_DB_NAME": "test_registration_db",
        "JWT_SECRET_KEY": "test_secret_key_for_testing_only",
        "BCRYPT_ROUNDS": "4",
        "SMTP_HOST": "",
        "SMTP_USER": "",
        "SMTP_PASSWORD": "",
    }
    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars


@pytest.fixture
def mock_settings():
    """Fixture to mock get_settings for tests. Patches all modules that use it."""
    mock = MagicMock()
    mock.app_name = "Test Registration Service"
    mock.app_version = "0.0.1"
    mock.user_repository_backend = "memory"
    mock.jwt_secret_key = "test_jwt_secret"
    mock.jwt_algorithm = "HS256"
    mock.access_token_expire_minutes = 1440
    mock.bcrypt_rounds = 4
    mock.persistence_timeout_seconds = 5.0
    mock.notification_timeout_seconds = 5.0

    # Patch at source and at use sites (modules import get_settings at load time)
    with patch("registration_service.core.config.get_settings", return_value=mock), patch(
        "registration_service.core.security.get_settings", return_value=mock
    ):
        yield mock


@pytest.fixture
def user_repo():
    """Fresh in-memory user repository."""
    return InMemoryUserRepository()


@pytest.fixture
def notification_service():
    """Notification port double with an async send_welcome_email."""
    return AsyncMock(spec=NotificationService)


@pytest.fixture
def fake_hasher():
    """Deterministic, fast stand-in for bcrypt in orchestration tests."""
    return lambda password: f"hashed::{password}"


@pytest.fixture
def ada_request():
    return UserRegistrationRequest(name="Ada", email="ada@example.com", password="secret1")
