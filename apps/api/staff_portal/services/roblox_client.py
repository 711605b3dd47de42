from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, Iterator, TypeVar
import logging

import requests

from ..core.config import settings

logger = logging.getLogger(__name__)

T = TypeVar("T")


class LookupStatus(str, Enum):
    FOUND = "found"
    NOT_FOUND = "not_found"
    FAILED = "failed"


@dataclass
class Lookup(Generic[T]):
    """Outcome of one external lookup.

    ``FAILED`` covers transport errors, non-2xx answers and bodies we could
    not parse. Callers decide whether that differs from ``NOT_FOUND``.
    """

    status: LookupStatus
    value: T | None = None

    @property
    def found(self) -> bool:
        return self.status == LookupStatus.FOUND

    @classmethod
    def hit(cls, value: T) -> "Lookup[T]":
        return cls(LookupStatus.FOUND, value)

    @classmethod
    def miss(cls) -> "Lookup[T]":
        return cls(LookupStatus.NOT_FOUND)

    @classmethod
    def failed(cls) -> "Lookup[T]":
        return cls(LookupStatus.FAILED)


@dataclass
class RobloxUser:
    id: int
    username: str
    display_name: str


@dataclass
class GroupRole:
    role_id: int
    role_name: str


class RobloxClient:
    """Thin adapter over the public Roblox users/groups APIs. No retries."""

    def __init__(
        self,
        users_api: str | None = None,
        groups_api: str | None = None,
        timeout: float | None = None,
        session: requests.Session | None = None,
    ):
        self.users_api = (users_api or settings.roblox_users_api).rstrip("/")
        self.groups_api = (groups_api or settings.roblox_groups_api).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.roblox_http_timeout_seconds
        self.http = session or requests.Session()
        self.http.headers.update({"Accept": "application/json"})

    def _get_json(self, method: str, url: str, **kwargs: Any) -> dict | None:
        try:
            resp = self.http.request(method, url, timeout=self.timeout, **kwargs)
            resp.raise_for_status()
            body = resp.json()
        except (requests.RequestException, ValueError) as exc:
            logger.warning("roblox lookup failed: %s %s (%s)", method, url, exc)
            return None
        if not isinstance(body, dict):
            logger.warning("roblox lookup returned unexpected body: %s %s", method, url)
            return None
        return body

    def lookup_user_by_name(self, name: str) -> Lookup[RobloxUser]:
        body = self._get_json(
            "POST",
            f"{self.users_api}/usernames/users",
            json={"usernames": [name], "excludeBannedUsers": True},
        )
        if body is None:
            return Lookup.failed()
        data = body.get("data") or []
        if not data:
            return Lookup.miss()
        try:
            user = data[0]
            return Lookup.hit(
                RobloxUser(
                    id=int(user["id"]),
                    username=str(user["name"]),
                    display_name=str(user.get("displayName") or user["name"]),
                )
            )
        except (KeyError, TypeError, ValueError):
            logger.warning("roblox user payload malformed for %r", name)
            return Lookup.failed()

    def fetch_profile_text(self, user_id: int) -> Lookup[str]:
        body = self._get_json("GET", f"{self.users_api}/users/{user_id}")
        if body is None:
            return Lookup.failed()
        return Lookup.hit(str(body.get("description") or ""))

    def fetch_group_role(self, user_id: int, group_id: int | None = None) -> Lookup[GroupRole]:
        group_id = group_id if group_id is not None else settings.roblox_group_id
        body = self._get_json("GET", f"{self.groups_api}/users/{user_id}/groups/roles")
        if body is None:
            return Lookup.failed()
        memberships = body.get("data") or []
        logger.info("roblox user %s is in %d groups", user_id, len(memberships))
        for membership in memberships:
            try:
                membership_group = int(membership["group"]["id"])
            except (KeyError, TypeError, ValueError):
                logger.debug("skipping unreadable group entry for user %s", user_id)
                continue
            if membership_group != group_id:
                continue
            try:
                role = membership["role"]
                return Lookup.hit(GroupRole(role_id=int(role["rank"]), role_name=str(role.get("name") or "")))
            except (AttributeError, KeyError, TypeError, ValueError):
                logger.warning("roblox role payload malformed for user %s in group %s", user_id, group_id)
                return Lookup.failed()
        logger.info("roblox user %s is not in group %s", user_id, group_id)
        return Lookup.miss()

    def close(self) -> None:
        self.http.close()


def get_roblox_client() -> Iterator[RobloxClient]:
    # One client per request: requests.Session is not safe to share across threads.
    client = RobloxClient()
    try:
        yield client
    finally:
        client.close()
