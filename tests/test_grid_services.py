import random

import pytest

from apps.goals.domain.entities import GoalEntity
from apps.goals.domain.services import build_goal, cell_count
from apps.projects.domain.entities import CellEntity
from apps.projects.domain.services import (
    apply_progress,
    cell_coordinates,
    cells_to_fill,
    colored_count,
    grid_dimensions,
    mark_goal_complete,
    rebuild_grid,
)


def make_cells(total, colored=()):
    colored = set(colored)
    return [CellEntity(position=p, is_colored=p in colored) for p in range(total)]


def test_rebuild_grid_size_matches_goal_cells():
    goals = [build_goal("a", "100"), build_goal("b", "20000"), build_goal("c", "7")]
    cells = rebuild_grid(goals, [])
    assert len(cells) == sum(cell_count(g) for g in goals) == 2107
    assert [c.position for c in cells] == list(range(2107))
    assert colored_count(cells) == 0


def test_rebuild_grid_keeps_colored_positions():
    previous = make_cells(10, colored=[0, 3, 9])
    cells = rebuild_grid([build_goal("a", "12")], previous)
    assert len(cells) == 12
    assert {c.position for c in cells if c.is_colored} == {0, 3, 9}


def test_rebuild_grid_drops_positions_past_new_size():
    previous = make_cells(10, colored=[2, 8])
    cells = rebuild_grid([build_goal("a", "5")], previous)
    assert len(cells) == 5
    assert {c.position for c in cells if c.is_colored} == {2}


def test_rebuild_grid_is_idempotent():
    goals = [build_goal("a", "30")]
    previous = make_cells(20, colored=[1, 5, 19])
    assert rebuild_grid(goals, previous) == rebuild_grid(goals, previous)
    assert rebuild_grid(goals, rebuild_grid(goals, previous)) == rebuild_grid(goals, previous)


def test_rebuild_grid_with_no_goals_is_empty():
    assert rebuild_grid([], make_cells(4, colored=[1])) == []


def test_apply_progress_quarter_of_goal(rng):
    goal = GoalEntity(text="Save", total_number="100", remaining_number="100", scale=1)
    cells = make_cells(100)

    new_cells, new_goal = apply_progress(goal, 25, cells, rng=rng)

    assert colored_count(new_cells) == 25
    assert len(new_cells) == 100
    assert new_goal.remaining_number == "75"
    assert new_goal.is_completed is False
    # inputs untouched
    assert colored_count(cells) == 0
    assert goal.remaining_number == "100"


def test_apply_progress_only_colors_uncolored_cells(rng):
    goal = GoalEntity(text="Save", total_number="10", remaining_number="10", scale=1)
    cells = make_cells(10, colored=[0, 1, 2])

    new_cells, _ = apply_progress(goal, 4, cells, rng=rng)

    assert colored_count(new_cells) == 7
    assert all(new_cells[p].is_colored for p in (0, 1, 2))


def test_apply_progress_fills_what_is_left_when_short_of_cells(rng):
    goal = GoalEntity(text="Run", total_number="8", remaining_number="8", scale=1)
    cells = make_cells(10, colored=range(5))  # 5 uncolored left, 8 requested

    new_cells, new_goal = apply_progress(goal, 8, cells, rng=rng)

    assert colored_count(new_cells) == 10
    assert new_goal.remaining_number == "0"
    assert new_goal.is_completed is True


@pytest.mark.parametrize("amount", [0, -5, 101])
def test_apply_progress_out_of_range_is_noop(amount, rng):
    goal = GoalEntity(text="Save", total_number="100", remaining_number="100", scale=1)
    cells = make_cells(100)

    new_cells, new_goal = apply_progress(goal, amount, cells, rng=rng)

    assert new_cells == cells
    assert new_goal is goal


def test_apply_progress_with_zero_total_is_noop(rng):
    goal = GoalEntity(text="?", total_number="abc", remaining_number="abc")
    new_cells, new_goal = apply_progress(goal, 1, make_cells(3), rng=rng)
    assert colored_count(new_cells) == 0
    assert new_goal is goal


def test_apply_progress_never_exceeds_requested_share():
    goal = GoalEntity(text="Big", total_number="20000", remaining_number="20000", scale=10)
    cells = make_cells(2000)
    rng = random.Random(7)

    for amount in (1, 15, 333, 4000):
        before = colored_count(cells)
        limit = min(cells_to_fill(goal, amount), len(cells) - before)
        cells, goal = apply_progress(goal, amount, cells, rng=rng)
        assert colored_count(cells) - before <= limit

    assert goal.remaining_number == str(20000 - 1 - 15 - 333 - 4000)


def test_cells_to_fill_rounds_up_for_scaled_goals():
    goal = GoalEntity(text="Big", total_number="20000", remaining_number="20000", scale=10)
    assert cells_to_fill(goal, 1) == 1
    assert cells_to_fill(goal, 25) == 3
    assert cells_to_fill(goal, 20000) == 2000


def test_apply_progress_is_reproducible_with_seed():
    goal = GoalEntity(text="Save", total_number="50", remaining_number="50", scale=1)
    cells = make_cells(50)
    first, _ = apply_progress(goal, 10, cells, rng=random.Random(99))
    second, _ = apply_progress(goal, 10, cells, rng=random.Random(99))
    assert first == second


def test_completion_flag_follows_remaining(rng):
    goal = GoalEntity(text="Save", total_number="10", remaining_number="10", scale=1)
    cells = make_cells(10)

    cells, goal = apply_progress(goal, 6, cells, rng=rng)
    assert goal.is_completed is False
    cells, goal = apply_progress(goal, 4, cells, rng=rng)
    assert goal.is_completed is True
    assert goal.remaining == 0


def test_mark_goal_complete_credits_the_rest(rng):
    goals = [
        GoalEntity(text="a", total_number="30", remaining_number="12", scale=1),
        GoalEntity(text="b", total_number="10", remaining_number="10", scale=1),
    ]
    cells = make_cells(40, colored=range(18))

    new_cells, new_goal = mark_goal_complete(goals[0], cells, rng=rng)

    assert new_goal.remaining_number == "0"
    assert new_goal.is_completed is True
    # ceil(30 * 12 / 30) = 12 more cells
    assert colored_count(new_cells) == 30


@pytest.mark.parametrize("total, expected", [
    (0, (0, 0)),
    (1, (1, 1)),
    (10, (3, 4)),
    (100, (10, 10)),
    (101, (10, 11)),
    (2000, (45, 45)),
])
def test_grid_dimensions(total, expected):
    rows, columns = grid_dimensions(total)
    assert (rows, columns) == expected
    if total:
        assert rows * columns >= total


def test_cell_coordinates_are_row_major():
    assert cell_coordinates(0, 4) == (0, 0)
    assert cell_coordinates(5, 4) == (1, 1)
    assert cell_coordinates(11, 4) == (2, 3)
