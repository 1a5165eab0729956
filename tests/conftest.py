"""
Shared pytest fixtures for users_api tests.
"""
import os
from typing import Any, Dict, List, Optional
from unittest.mock import MagicMock, patch

import pytest
from bson import ObjectId

from users_api.domain.models.user import User
from users_api.domain.constants import UserFields
from users_api.domain.repositories.user_repository import UserRepository


class InMemoryUserRepository(UserRepository):
    """Dict-backed UserRepository used to exercise use cases and routes end to end."""

    def __init__(self) -> None:
        self.documents: Dict[str, Dict[str, Any]] = {}

    async def find_all(self) -> List[User]:
        return [self._to_user(user_id, doc) for user_id, doc in self.documents.items()]

    async def find_by_id(self, user_id: str) -> Optional[User]:
        doc = self.documents.get(user_id)
        return self._to_user(user_id, doc) if doc is not None else None

    async def update_by_id(self, user_id: str, fields: Dict[str, Any]) -> Optional[User]:
        doc = self.documents.get(user_id)
        if doc is None:
            return None
        doc.update(fields)
        return self._to_user(user_id, doc)

    async def insert(self, user: User) -> User:
        user_id = str(ObjectId())
        self.documents[user_id] = {
            UserFields.FIRST_NAME: user.first_name,
            UserFields.EMAIL: user.email,
        }
        return User(id=user_id, first_name=user.first_name, email=user.email)

    @staticmethod
    def _to_user(user_id: str, doc: Dict[str, Any]) -> User:
        return User(
            id=user_id,
            first_name=doc.get(UserFields.FIRST_NAME),
            email=doc.get(UserFields.EMAIL),
        )


@pytest.fixture
def in_memory_repo():
    return InMemoryUserRepository()


@pytest.fixture
def mock_env():
    """Fixture to set common test environment variables."""
    env_vars = {
        "MONGO_URI": "mongodb://localhost:27017",
        "MONGO_DB_NAME": "test_users_db",
        "MONGO_USERS_COLLECTION": "test_users",
        "API_PREFIX": "",
        "CORS_ORIGINS": "http://localhost:3000",
        "LOG_LEVEL": "DEBUG",
    }
    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars


@pytest.fixture
def mock_settings():
    """Fixture to mock get_settings for tests. Patches all modules that use it."""
    mock = MagicMock()
    mock.mongo_uri = "mongodb://localhost:27017"
    mock.mongo_database_name = "test_db"
    mock.mongo_users_collection = "users"
    mock.api_prefix = ""
    mock.cors_origins = ["http://localhost:3000"]
    mock.log_level = "INFO"

    # Patch at source and at use sites (modules import get_settings at load time)
    with patch("users_api.core.config.get_settings", return_value=mock), patch(
        "users_api.infrastructure.db.mongo_connection.get_settings", return_value=mock
    ):
        yield mock
