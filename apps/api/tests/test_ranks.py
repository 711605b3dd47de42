import pytest

from staff_portal.core.ranks import (
    DEFAULT_RANK,
    RANK_LADDER,
    SENIORITY_ORDER,
    is_eligible,
    is_privileged,
    rank_label,
)


@pytest.mark.parametrize(
    "role_id,label",
    [
        (0, "Staff"),
        (1, "Staff"),
        (199, "Staff"),
        (200, "Supervisor"),
        (204, "Supervisor"),
        (205, "Assistant Manager"),
        (220, "General Manager"),
        (222, "Senior Management"),
        (225, "Public Relations Officer"),
        (235, "Chief Administrative Officer"),
        (240, "Marketing Department"),
        (251, "Marketing Department"),
        (252, "Chief Staff Officer"),
        (253, "Board of Directors"),
        (254, "Executive Board"),
        (255, "Proprietor"),
    ],
)
def test_rank_label_thresholds(role_id, label):
    assert rank_label(role_id) == label


def test_every_role_id_maps_to_a_known_label():
    labels = {rank_label(role_id) for role_id in range(0, 256)}
    assert labels <= set(SENIORITY_ORDER)
    assert len(SENIORITY_ORDER) == 12
    assert len(labels) == 12


def test_labels_never_get_more_junior_as_role_id_grows():
    positions = [SENIORITY_ORDER.index(rank_label(role_id)) for role_id in range(0, 256)]
    assert positions == sorted(positions)


def test_ladder_is_ordered_highest_first():
    thresholds = [threshold for threshold, _ in RANK_LADDER]
    assert thresholds == sorted(thresholds, reverse=True)
    assert SENIORITY_ORDER[0] == DEFAULT_RANK


@pytest.mark.parametrize("role_id,expected", [(None, False), (0, False), (199, False), (200, True), (255, True)])
def test_is_eligible(role_id, expected):
    assert is_eligible(role_id) is expected


def test_privileged_ranks():
    assert is_privileged("Board of Directors")
    assert is_privileged("Executive Board")
    assert not is_privileged("Proprietor")
    assert not is_privileged("Chief Staff Officer")
    assert not is_privileged(None)
