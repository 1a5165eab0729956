"""
Unit tests for MongoUserRepository against a mocked Motor collection.
"""
from unittest.mock import AsyncMock, MagicMock

import pytest
from bson import ObjectId
from pymongo import ReturnDocument
from pymongo.errors import PyMongoError, WriteError

from users_api.domain.exceptions import UserRepositoryError
from users_api.domain.models.user import User
from users_api.infrastructure.db.mongo_user_repository import MongoUserRepository


class _AsyncCursor:
    """Stand-in for a Motor cursor supporting `async for`."""

    def __init__(self, documents, error=None):
        self._documents = list(documents)
        self._error = error

    def __aiter__(self):
        return self

    async def __anext__(self):
        if self._error is not None:
            raise self._error
        if not self._documents:
            raise StopAsyncIteration
        return self._documents.pop(0)


@pytest.fixture
def collection():
    coll = MagicMock()
    coll.find_one = AsyncMock()
    coll.find_one_and_update = AsyncMock()
    coll.insert_one = AsyncMock()
    return coll


@pytest.fixture
def repository(collection):
    return MongoUserRepository(user_collection=collection)


class TestFindAll:
    """Tests for MongoUserRepository.find_all"""

    @pytest.mark.asyncio
    async def test_projects_documents_and_strips_internal_fields(self, repository, collection):
        first_id, second_id = ObjectId(), ObjectId()
        collection.find.return_value = _AsyncCursor([
            {"_id": first_id, "firstName": "Ann", "email": "a@b.com", "__v": 0},
            {"_id": second_id, "email": "c@d.com"},
        ])

        users = await repository.find_all()

        collection.find.assert_called_once_with({})
        assert users == [
            User(id=str(first_id), first_name="Ann", email="a@b.com"),
            User(id=str(second_id), first_name=None, email="c@d.com"),
        ]

    @pytest.mark.asyncio
    async def test_empty_collection(self, repository, collection):
        collection.find.return_value = _AsyncCursor([])
        assert await repository.find_all() == []

    @pytest.mark.asyncio
    async def test_driver_error_is_wrapped(self, repository, collection):
        collection.find.return_value = _AsyncCursor([], error=PyMongoError("server down"))
        with pytest.raises(UserRepositoryError, match="server down"):
            await repository.find_all()


class TestFindById:
    """Tests for MongoUserRepository.find_by_id"""

    @pytest.mark.asyncio
    async def test_found(self, repository, collection):
        object_id = ObjectId()
        collection.find_one.return_value = {"_id": object_id, "firstName": "Ann", "email": "a@b.com"}

        user = await repository.find_by_id(str(object_id))

        collection.find_one.assert_awaited_once_with({"_id": object_id})
        assert user == User(id=str(object_id), first_name="Ann", email="a@b.com")

    @pytest.mark.asyncio
    async def test_missing_returns_none(self, repository, collection):
        collection.find_one.return_value = None
        assert await repository.find_by_id(str(ObjectId())) is None

    @pytest.mark.asyncio
    @pytest.mark.parametrize("user_id", ["", "not-an-object-id", "123"])
    async def test_malformed_id_is_a_miss(self, repository, collection, user_id):
        assert await repository.find_by_id(user_id) is None
        collection.find_one.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_driver_error_is_wrapped(self, repository, collection):
        collection.find_one.side_effect = PyMongoError("timed out")
        with pytest.raises(UserRepositoryError, match="timed out"):
            await repository.find_by_id(str(ObjectId()))


class TestUpdateById:
    """Tests for MongoUserRepository.update_by_id"""

    @pytest.mark.asyncio
    async def test_sets_fields_and_returns_updated_user(self, repository, collection):
        object_id = ObjectId()
        collection.find_one_and_update.return_value = {
            "_id": object_id, "firstName": "X", "email": "y@z.com",
        }

        user = await repository.update_by_id(str(object_id), {"firstName": "X", "email": "y@z.com"})

        collection.find_one_and_update.assert_awaited_once_with(
            {"_id": object_id},
            {"$set": {"firstName": "X", "email": "y@z.com"}},
            return_document=ReturnDocument.AFTER,
        )
        assert user == User(id=str(object_id), first_name="X", email="y@z.com")

    @pytest.mark.asyncio
    async def test_missing_returns_none(self, repository, collection):
        collection.find_one_and_update.return_value = None
        assert await repository.update_by_id(str(ObjectId()), {"email": "y@z.com"}) is None

    @pytest.mark.asyncio
    async def test_malformed_id_is_a_miss(self, repository, collection):
        assert await repository.update_by_id("bogus", {"email": "y@z.com"}) is None
        collection.find_one_and_update.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_empty_fields_falls_back_to_lookup(self, repository, collection):
        object_id = ObjectId()
        collection.find_one.return_value = {"_id": object_id, "firstName": "Ann", "email": None}

        user = await repository.update_by_id(str(object_id), {})

        collection.find_one_and_update.assert_not_awaited()
        assert user == User(id=str(object_id), first_name="Ann", email=None)

    @pytest.mark.asyncio
    async def test_driver_error_is_wrapped(self, repository, collection):
        collection.find_one_and_update.side_effect = PyMongoError("not primary")
        with pytest.raises(UserRepositoryError, match="not primary"):
            await repository.update_by_id(str(ObjectId()), {"email": "y@z.com"})


class TestInsert:
    """Tests for MongoUserRepository.insert"""

    @pytest.mark.asyncio
    async def test_inserts_without_id_and_returns_assigned_id(self, repository, collection):
        inserted_id = ObjectId()
        collection.insert_one.return_value = MagicMock(inserted_id=inserted_id)

        user = await repository.insert(User(id="ignored", first_name="Ann", email="a@b.com"))

        collection.insert_one.assert_awaited_once_with({"firstName": "Ann", "email": "a@b.com"})
        assert user == User(id=str(inserted_id), first_name="Ann", email="a@b.com")

    @pytest.mark.asyncio
    async def test_rejection_is_wrapped(self, repository, collection):
        collection.insert_one.side_effect = WriteError("Document failed validation", code=121)
        with pytest.raises(UserRepositoryError, match="Document failed validation"):
            await repository.insert(User(id=None, first_name="Ann"))
