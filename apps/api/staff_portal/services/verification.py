"""Two-step Roblox ownership check.

1. ``issue_code``: the caller must exist on Roblox and already hold an eligible
   rank in the group; only then is a short-lived one-time code stored.
2. ``verify_user``: the latest unused code for that username must still be
   live and appear in the user's "About Me" text. The rank is checked again,
   since it may have changed between the two steps. On success the code is
   burnt and the local account is created or refreshed.

Gateway failures are treated like "not found" / empty profile text.
"""
from __future__ import annotations

from datetime import datetime, timedelta
import logging

from sqlalchemy import desc, select
from sqlalchemy.orm import Session

from ..core.clock import as_utc, utcnow
from ..core.config import settings
from ..core.departments import DEFAULT_DEPARTMENT, DEFAULT_SUB_DEPARTMENT
from ..core.errors import CodeExpired, CodeNotInProfile, Ineligible, NoCodeFound, UserNotFound
from ..core.ranks import is_eligible, rank_label
from ..core.security import generate_verification_code
from ..models.user import User
from ..models.verification_code import VerificationCode
from .roblox_client import GroupRole, LookupStatus, RobloxClient, RobloxUser

logger = logging.getLogger(__name__)


def _resolve_user(client: RobloxClient, username: str) -> RobloxUser:
    lookup = client.lookup_user_by_name(username)
    if lookup.status == LookupStatus.FAILED:
        logger.warning("treating failed user lookup as not found: %r", username)
    if not lookup.found:
        raise UserNotFound()
    return lookup.value


def _eligible_role(client: RobloxClient, roblox_user: RobloxUser) -> GroupRole:
    lookup = client.fetch_group_role(roblox_user.id, settings.roblox_group_id)
    if lookup.status == LookupStatus.FAILED:
        logger.warning("treating failed group lookup as non-member: user_id=%s", roblox_user.id)
    role_id = lookup.value.role_id if lookup.found else None
    if not is_eligible(role_id):
        logger.info("user %s (%s) is ineligible; role_id=%s", roblox_user.username, roblox_user.id, role_id)
        raise Ineligible()
    return lookup.value


def _release_username(db: Session, roblox_user: RobloxUser) -> None:
    """Move a stale local row off a username Roblox has since reassigned."""
    stale = db.scalar(
        select(User)
        .where(User.roblox_username == roblox_user.username)
        .where(User.roblox_user_id != roblox_user.id)
    )
    if not stale:
        return
    old_name = stale.roblox_username
    stale.roblox_username = f"{old_name}#{stale.roblox_user_id}"
    db.flush()
    logger.info("username %r now belongs to user_id=%s; renamed stale account %s", old_name, roblox_user.id, stale.id)


def latest_unused_code(db: Session, username: str) -> VerificationCode | None:
    stmt = (
        select(VerificationCode)
        .where(VerificationCode.username == username)
        .where(VerificationCode.used.is_(False))
        .order_by(desc(VerificationCode.created_at), desc(VerificationCode.id))
        .limit(1)
    )
    return db.scalar(stmt)


def issue_code(
    db: Session,
    client: RobloxClient,
    username: str,
    now: datetime | None = None,
) -> VerificationCode:
    now = now or utcnow()
    roblox_user = _resolve_user(client, username)
    _eligible_role(client, roblox_user)

    row = VerificationCode(
        username=username,
        code=generate_verification_code(),
        created_at=now,
        expires_at=now + timedelta(minutes=settings.verification_code_ttl_minutes),
        used=False,
    )
    db.add(row)
    db.commit()
    db.refresh(row)
    logger.info("verification code issued for %r (expires %s)", username, row.expires_at)
    return row


def verify_user(
    db: Session,
    client: RobloxClient,
    username: str,
    now: datetime | None = None,
) -> User:
    now = now or utcnow()
    roblox_user = _resolve_user(client, username)

    code = latest_unused_code(db, username)
    if not code:
        raise NoCodeFound()
    if now > as_utc(code.expires_at):
        raise CodeExpired()

    profile = client.fetch_profile_text(roblox_user.id)
    if profile.status == LookupStatus.FAILED:
        logger.warning("treating failed profile lookup as empty text: user_id=%s", roblox_user.id)
    about_me = profile.value if profile.found else ""
    if code.code not in about_me:
        raise CodeNotInProfile()

    role = _eligible_role(client, roblox_user)

    label = rank_label(role.role_id)
    user = db.scalar(select(User).where(User.roblox_user_id == roblox_user.id))
    _release_username(db, roblox_user)
    if user:
        user.roblox_username = roblox_user.username
        user.rank = label
        user.rank_id = role.role_id
        user.last_login = now
    else:
        user = User(
            roblox_username=roblox_user.username,
            roblox_user_id=roblox_user.id,
            rank=label,
            rank_id=role.role_id,
            department=DEFAULT_DEPARTMENT,
            sub_department=DEFAULT_SUB_DEPARTMENT,
            verified_at=now,
            last_login=now,
        )
        db.add(user)

    # Burn the code with the account write so a failed upsert leaves it usable.
    code.used = True
    db.commit()
    db.refresh(user)
    logger.info("user %s verified as %s (role_id=%s)", user.roblox_username, label, role.role_id)
    return user
