"""
Unit tests for UserService registration and lookup
"""
import pytest
from sqlalchemy import select, func

from crud.user import UserRepository
from database_models import User
from models.user import RegisterRequest
from services.user_service import UserService, UserNotFoundError, UserAlreadyExistsError


@pytest.fixture
def user_service(test_db):
    return UserService(UserRepository(test_db))


def make_request(email="a@x.com"):
    return RegisterRequest(email=email, password="p", firstName="A", lastName="B")


async def count_users(db):
    return await db.scalar(select(func.count()).select_from(User))


async def test_register_returns_profile_without_password(user_service):
    response = await user_service.register(make_request())

    assert response.id
    assert response.email == "a@x.com"
    assert response.first_name == "A"
    assert response.last_name == "B"
    assert response.created_at is not None
    assert response.updated_at is not None
    assert "password" not in response.model_dump()


async def test_register_stores_password_as_submitted(user_service, test_db):
    response = await user_service.register(make_request())

    stored = await test_db.get(User, response.id)
    assert stored.password == "p"


async def test_register_then_get_user_round_trip(user_service):
    registered = await user_service.register(make_request())

    fetched = await user_service.get_user(registered.id)

    assert fetched == registered


async def test_register_duplicate_email_rejected(user_service, test_db):
    """
    Test that a second registration with the same email:
    - raises UserAlreadyExistsError
    - does not create a second record
    """
    await user_service.register(make_request())

    with pytest.raises(UserAlreadyExistsError) as exc_info:
        await user_service.register(make_request())

    assert exc_info.value.message == "Email already exists"
    assert exc_info.value.code == "EMAIL_ALREADY_EXISTS"
    assert await count_users(test_db) == 1


async def test_register_different_emails_both_succeed(user_service, test_db):
    first = await user_service.register(make_request("a@x.com"))
    second = await user_service.register(make_request("b@x.com"))

    assert first.id != second.id
    assert await count_users(test_db) == 2


async def test_register_race_lost_to_unique_constraint(user_service, test_db, monkeypatch):
    """
    Simulate a concurrent registration that slipped past the existence check:
    the insert hits the unique constraint and is reported as AlreadyExists.
    """
    await user_service.register(make_request())
    await test_db.commit()

    async def stale_exists_by_email(email):
        return False

    monkeypatch.setattr(user_service.user_repo, "exists_by_email", stale_exists_by_email)

    with pytest.raises(UserAlreadyExistsError):
        await user_service.register(make_request())

    assert await count_users(test_db) == 1


async def test_get_user_unknown_id(user_service):
    with pytest.raises(UserNotFoundError) as exc_info:
        await user_service.get_user("does-not-exist")

    assert exc_info.value.message == "User not found"
    assert exc_info.value.code == "USER_NOT_FOUND"
