from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from staff_portal.core.config import settings
from staff_portal.core.ranks import rank_label
from staff_portal.core.security import sign_session_id
from staff_portal.db import get_session, make_engine
from staff_portal.main import app
from staff_portal.models import Base, User
from staff_portal.services.roblox_client import GroupRole, Lookup, RobloxUser, get_roblox_client
from staff_portal.services.session_store import SessionStore

T0 = datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc)


class FakeRobloxClient:
    """In-memory stand-in for RobloxClient."""

    def __init__(self):
        self.users: dict[str, RobloxUser] = {}
        self.profiles: dict[int, str] = {}
        self.roles: dict[int, GroupRole] = {}
        self.failing: set[str] = set()

    def add_user(self, username: str, user_id: int, role_id: int | None = 200, about: str = "") -> RobloxUser:
        user = RobloxUser(id=user_id, username=username, display_name=username)
        self.users[username] = user
        self.profiles[user_id] = about
        if role_id is not None:
            self.roles[user_id] = GroupRole(role_id=role_id, role_name=rank_label(role_id))
        else:
            self.roles.pop(user_id, None)
        return user

    def set_role(self, user_id: int, role_id: int | None) -> None:
        if role_id is None:
            self.roles.pop(user_id, None)
        else:
            self.roles[user_id] = GroupRole(role_id=role_id, role_name=rank_label(role_id))

    def lookup_user_by_name(self, name):
        if "user" in self.failing:
            return Lookup.failed()
        user = self.users.get(name)
        return Lookup.hit(user) if user else Lookup.miss()

    def fetch_profile_text(self, user_id):
        if "profile" in self.failing:
            return Lookup.failed()
        return Lookup.hit(self.profiles.get(user_id, ""))

    def fetch_group_role(self, user_id, group_id=None):
        if "group" in self.failing:
            return Lookup.failed()
        role = self.roles.get(user_id)
        return Lookup.hit(role) if role else Lookup.miss()


@pytest.fixture
def engine():
    engine = make_engine("sqlite://", poolclass=StaticPool)
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autoflush=False, expire_on_commit=False, future=True)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def roblox():
    return FakeRobloxClient()


@pytest.fixture
def api(session_factory, roblox):
    def _get_session():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_session] = _get_session
    app.dependency_overrides[get_roblox_client] = lambda: roblox
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def client(api):
    return TestClient(api)


@pytest.fixture
def make_user(db):
    counter = {"n": 0}

    def _make_user(username: str | None = None, role_id: int = 200, **fields) -> User:
        counter["n"] += 1
        n = counter["n"]
        user = User(
            roblox_username=username or f"staff{n}",
            roblox_user_id=1000 + n,
            rank=rank_label(role_id),
            rank_id=role_id,
            department=fields.pop("department", "HR"),
            sub_department=fields.pop("sub_department", "Recruitment"),
            **fields,
        )
        db.add(user)
        db.commit()
        db.refresh(user)
        return user

    return _make_user


@pytest.fixture
def client_for(api, db):
    """A TestClient carrying a live session cookie for the given user."""

    def _client_for(user: User) -> TestClient:
        sid = SessionStore(db).create(user.id)
        c = TestClient(api)
        c.cookies.set(settings.session_cookie_name, sign_session_id(sid))
        return c

    return _client_for
