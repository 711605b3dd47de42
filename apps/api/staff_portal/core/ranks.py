"""Group role id -> portal rank label.

The ladder is checked top-down: the first threshold the role id reaches wins.
"""

RANK_LADDER: tuple[tuple[int, str], ...] = (
    (255, "Proprietor"),
    (254, "Executive Board"),
    (253, "Board of Directors"),
    (252, "Chief Staff Officer"),
    (240, "Marketing Department"),
    (235, "Chief Administrative Officer"),
    (225, "Public Relations Officer"),
    (222, "Senior Management"),
    (220, "General Manager"),
    (205, "Assistant Manager"),
    (200, "Supervisor"),
)
DEFAULT_RANK = "Staff"

# Most junior first.
SENIORITY_ORDER: tuple[str, ...] = (DEFAULT_RANK,) + tuple(label for _, label in reversed(RANK_LADDER))

# Minimum group role id allowed to use the portal (Supervisor).
MIN_ELIGIBLE_ROLE_ID = 200

PRIVILEGED_RANKS = frozenset({"Board of Directors", "Executive Board"})


def rank_label(role_id: int) -> str:
    for threshold, label in RANK_LADDER:
        if role_id >= threshold:
            return label
    return DEFAULT_RANK


def is_eligible(role_id: int | None) -> bool:
    # None means the user is not a member of the group.
    if role_id is None:
        return False
    return role_id >= MIN_ELIGIBLE_ROLE_ID


def is_privileged(label: str | None) -> bool:
    return label in PRIVILEGED_RANKS
