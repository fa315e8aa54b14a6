import uuid
from datetime import datetime, timezone

import pytest
from sqlalchemy.exc import IntegrityError, OperationalError

from fakes import Dummy, FakeSession
from src.notethread.core.exceptions import (
    NotFound,
    PersistenceError,
    Unauthenticated,
    ValidationError,
)
from src.notethread.core.repositories.user_repository import UserRepository
from src.notethread.core.schemas.auth import LoginRequest, RegisterRequest
from src.notethread.core.services.auth_service import AuthService
from src.notethread.security.jwt import Identity, verify_access_token
from src.notethread.security.password import hash_password, verify_password


class FakeUserRepo:
    def __init__(self, users=()):
        self.users = {u.username: u for u in users}

    async def is_username_taken(self, username):
        return username in self.users

    async def create_user(self, data):
        user = Dummy(id=uuid.uuid4(), created_at=datetime.now(timezone.utc), **data)
        self.users[user.username] = user
        return user

    async def get_by_username(self, username):
        return self.users.get(username)

    async def get_by_id(self, user_id):
        return next((u for u in self.users.values() if u.id == user_id), None)


def _user(username="alice", password="password123"):
    return Dummy(
        id=uuid.uuid4(),
        username=username,
        email=f"{username}@example.com",
        password_hash=hash_password(password),
        created_at=datetime.now(timezone.utc),
    )


async def test_register_hashes_password_and_issues_token():
    repo = FakeUserRepo()
    svc = AuthService(FakeSession(), user_repo=repo)

    resp = await svc.register_user(
        RegisterRequest(username="alice", email="alice@example.com", password="password123")
    )

    stored = repo.users["alice"]
    assert stored.password_hash != "password123"
    assert verify_password("password123", stored.password_hash)
    assert resp.success is True
    assert resp.user.username == "alice"
    assert verify_access_token(resp.token) == Identity(user_id=stored.id, username="alice")
    assert svc.session.committed == 1


async def test_register_duplicate_username():
    svc = AuthService(FakeSession(), user_repo=FakeUserRepo([_user("alice")]))
    with pytest.raises(ValidationError) as exc:
        await svc.register_user(
            RegisterRequest(username="alice", email="other@example.com", password="password123")
        )
    assert exc.value.detail == "Username already taken"
    assert svc.session.committed == 0


class _RacingUserRepo(FakeUserRepo):
    """Existence check misses a user created concurrently; the insert then hits the constraint."""

    async def is_username_taken(self, username):
        return False

    async def create_user(self, data):
        raise IntegrityError(
            "INSERT INTO users ...", {}, Exception("UNIQUE constraint failed: users.username")
        )


async def test_register_lost_race_is_duplicate_username():
    svc = AuthService(FakeSession(), user_repo=_RacingUserRepo())
    with pytest.raises(ValidationError) as exc:
        await svc.register_user(
            RegisterRequest(username="alice", email="alice@example.com", password="password123")
        )
    assert exc.value.status_code == 400
    assert exc.value.detail == "Username already taken"
    assert svc.session.rolled_back == 1


async def test_register_lost_race_against_real_constraint(db_session, make_user):
    await make_user("alice")

    class SkipCheckRepo(UserRepository):
        async def is_username_taken(self, username):
            return False

    svc = AuthService(db_session, user_repo=SkipCheckRepo(db_session))
    with pytest.raises(ValidationError) as exc:
        await svc.register_user(
            RegisterRequest(username="alice", email="dup@example.com", password="password123")
        )
    assert exc.value.detail == "Username already taken"


async def test_other_store_failures_stay_persistence_errors():
    class BrokenRepo(FakeUserRepo):
        async def create_user(self, data):
            raise OperationalError("INSERT INTO users ...", {}, Exception("db at 10.0.0.5 down"))

    svc = AuthService(FakeSession(), user_repo=BrokenRepo())
    with pytest.raises(PersistenceError) as exc:
        await svc.register_user(
            RegisterRequest(username="alice", email="alice@example.com", password="password123")
        )
    assert exc.value.status_code == 500
    assert exc.value.detail == "Failed to register user"


async def test_login_success():
    user = _user()
    svc = AuthService(FakeSession(), user_repo=FakeUserRepo([user]))
    resp = await svc.authenticate_user(LoginRequest(username="alice", password="password123"))
    assert verify_access_token(resp.token).user_id == user.id
    assert resp.expires_in == svc.settings.access_token_expire_minutes * 60


@pytest.mark.parametrize("username,password", [("alice", "wrong-pass"), ("nobody", "password123")])
async def test_login_failures_share_one_message(username, password):
    svc = AuthService(FakeSession(), user_repo=FakeUserRepo([_user()]))
    with pytest.raises(Unauthenticated) as exc:
        await svc.authenticate_user(LoginRequest(username=username, password=password))
    assert exc.value.status_code == 401
    assert exc.value.detail == "Invalid credentials"


async def test_get_current_user():
    user = _user()
    svc = AuthService(FakeSession(), user_repo=FakeUserRepo([user]))
    me = await svc.get_current_user(Identity(user_id=user.id, username="alice"))
    assert me.id == user.id

    with pytest.raises(NotFound):
        await svc.get_current_user(Identity(user_id=uuid.uuid4(), username="ghost"))
