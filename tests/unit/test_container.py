"""
Unit tests for the DI container and providers.
"""
from unittest.mock import MagicMock, patch

import pytest

from registration_service.application.use_cases.auth.register_user import RegisterUserUseCase
from registration_service.application.use_cases.auth.login_user import LoginUserUseCase
from registration_service.di.base_container import BaseContainer
from registration_service.di.container import DIContainer
from registration_service.domain.repositories.user_repository import UserRepository
from registration_service.domain.services.notification_service import NotificationService
from registration_service.infrastructure.db.in_memory_user_repository import InMemoryUserRepository
from registration_service.infrastructure.db.mongo_user_repository import MongoUserRepository
from registration_service.infrastructure.notifications.smtp_notification_service import (
    SmtpNotificationService,
)


class TestBaseContainer:
    """Tests for BaseContainer"""

    def test_singleton_returns_same_instance(self):
        container = BaseContainer()
        instance = object()
        container.register_singleton("thing", instance)
        assert container.get("thing") is instance

    def test_factory_builds_new_instance_each_time(self):
        container = BaseContainer()
        container.register_factory("thing", object)
        assert container.get("thing") is not container.get("thing")

    def test_unknown_key_raises(self):
        with pytest.raises(KeyError, match="UserRepository"):
            BaseContainer().get(UserRepository)

    def test_reset_clears_registrations(self):
        container = BaseContainer()
        container.register_singleton("thing", 1)
        container.reset()
        assert container.has("thing") is False


class TestDIContainer:
    """Tests for DIContainer wiring"""

    def test_memory_backend_wiring(self, mock_settings):
        container = DIContainer(settings=mock_settings)

        assert isinstance(container.get(UserRepository), InMemoryUserRepository)
        assert isinstance(container.get(NotificationService), SmtpNotificationService)

        use_case = container.get(RegisterUserUseCase)
        assert use_case.user_repository is container.get(UserRepository)
        assert use_case.notification_service is container.get(NotificationService)
        assert use_case.persistence_timeout == 5.0
        assert isinstance(container.get(LoginUserUseCase), LoginUserUseCase)

    def test_use_cases_share_repository_singleton(self, mock_settings):
        container = DIContainer(settings=mock_settings)
        assert container.get(RegisterUserUseCase) is not container.get(RegisterUserUseCase)
        assert (
            container.get(RegisterUserUseCase).user_repository
            is container.get(LoginUserUseCase).user_repository
        )

    def test_mongo_backend_wiring(self, mock_settings):
        mock_settings.user_repository_backend = "mongo"
        collection = MagicMock()
        with patch(
            "registration_service.di.providers.database_provider.get_database",
            return_value=MagicMock(),
        ), patch(
            "registration_service.di.providers.database_provider.get_user_collection",
            return_value=collection,
        ):
            container = DIContainer(settings=mock_settings)

        repository = container.get(UserRepository)
        assert isinstance(repository, MongoUserRepository)
        assert repository.user_collection is collection

    def test_unknown_backend_raises(self, mock_settings):
        mock_settings.user_repository_backend = "cassandra"
        with pytest.raises(ValueError, match="cassandra"):
            DIContainer(settings=mock_settings)
