import pytest

from apps.goals.domain.entities import GoalEntity, GoalUnit, parse_amount
from apps.goals.domain.services import (
    build_goal,
    cell_count,
    compute_scale,
    redefine_goal,
    total_cell_count,
)


@pytest.mark.parametrize("total, expected", [
    (0, 1),
    (1, 1),
    (10_000, 1),
    (10_001, 10),
    (100_000, 10),
    (100_001, 100),
    (1_000_000, 100),
    (1_000_001, 1_000),
    (10_000_000, 1_000),
    (10_000_001, 10_000),
    (5_000_000_000, 10_000),
])
def test_compute_scale_tiers(total, expected):
    assert compute_scale(total) == expected


def test_compute_scale_is_monotonic():
    totals = [0, 5, 9_999, 10_000, 10_001, 50_000, 100_000, 100_001, 999_999,
              1_000_000, 1_000_001, 10_000_000, 10_000_001, 10 ** 12]
    scales = [compute_scale(t) for t in totals]
    assert scales == sorted(scales)


@pytest.mark.parametrize("text, expected", [
    ("25", 25),
    (" 300 ", 300),
    ("", 0),
    (None, 0),
    ("abc", 0),
    ("12.5", 0),
    ("-4", 0),
    (7, 7),
])
def test_parse_amount_coerces_bad_input_to_zero(text, expected):
    assert parse_amount(text) == expected


def test_cell_count_for_large_total():
    goal = build_goal("Save up", "20000", GoalUnit.EURO)
    assert goal.scale == 10
    assert cell_count(goal) == 2000


def test_cell_count_rounds_up():
    goal = GoalEntity(text="Run", total_number="10001", remaining_number="10001", scale=10)
    assert cell_count(goal) == 1001


@pytest.mark.parametrize("total_number", ["0", "", "lots"])
def test_cell_count_of_empty_or_non_numeric_total_is_zero(total_number):
    goal = GoalEntity(text="x", total_number=total_number, remaining_number=total_number)
    assert cell_count(goal) == 0


def test_total_cell_count_sums_goals():
    goals = [build_goal("a", "100"), build_goal("b", "20000"), build_goal("c", "oops")]
    assert total_cell_count(goals) == 100 + 2000 + 0


def test_build_goal_starts_with_everything_remaining():
    goal = build_goal("Read", "300", GoalUnit.PIECES)
    assert goal.total_number == "300"
    assert goal.remaining_number == "300"
    assert goal.is_completed is False
    assert goal.progress_label == "0/300шт"


def test_redefine_goal_resets_progress_but_keeps_id():
    goal = build_goal("Save", "500", GoalUnit.DOLLAR)
    goal.remaining_number = "100"

    updated = redefine_goal(goal, "Save more", "200000", GoalUnit.EURO)

    assert updated.id == goal.id
    assert updated.text == "Save more"
    assert updated.remaining_number == "200000"
    assert updated.scale == 100
    assert updated.unit is GoalUnit.EURO


def test_progress_label():
    goal = GoalEntity(text="Save", total_number="500", remaining_number="125", unit=GoalUnit.DOLLAR)
    assert goal.progress_label == "375/500$"
