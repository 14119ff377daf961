import pytest

from apps.goals.domain.entities import GoalUnit
from apps.goals.domain.services import build_goal
from apps.goals.models import Goal
from apps.projects.domain.entities import CellEntity, ProjectEntity
from apps.projects.models import Cell, Project

pytestmark = pytest.mark.django_db


def test_new_project_requires_owner(repo, png_bytes):
    with pytest.raises(ValueError):
        repo.save(ProjectEntity(id=None, image_data=png_bytes))


def test_save_and_load_project(repo, saved_project):
    loaded = repo.get_by_id(saved_project.id)

    assert loaded.project_name == "Holiday"
    assert [g.text for g in loaded.goals] == ["Save money", "Read pages"]
    assert loaded.goals[0].unit is GoalUnit.DOLLAR
    assert len(loaded.cells) == 120
    assert loaded.show_grid is True
    assert loaded.image_data == saved_project.image_data


def test_project_of_another_user_is_invisible(repo, saved_project, other_user, user):
    assert repo.get_by_id(saved_project.id, user_id=other_user.id) is None
    assert repo.get_by_id(saved_project.id, user_id=user.id) is not None
    assert repo.delete(saved_project.id, user_id=other_user.id) is False


def test_resave_updates_in_place(repo, saved_project):
    saved_project.project_name = "Summer holiday"
    saved_project.cells = [CellEntity(position=c.position, is_colored=c.position < 10) for c in saved_project.cells]
    saved_project.goals = saved_project.goals[:1]

    repo.save(saved_project)

    assert Project.objects.count() == 1
    assert Goal.objects.count() == 1
    loaded = repo.get_by_id(saved_project.id)
    assert loaded.project_name == "Summer holiday"
    assert loaded.colored_count == 10


def test_empty_name_falls_back_to_first_goal(repo, user, png_bytes):
    project = repo.save(
        ProjectEntity(id=None, image_data=png_bytes, goals=[build_goal("Run 100 km", "100")]),
        user_id=user.id
    )
    assert project.project_name == "Run 100 km"

    untitled = repo.save(ProjectEntity(id=None, image_data=png_bytes), user_id=user.id)
    assert untitled.project_name == "Untitled"


def test_list_summaries(repo, saved_project, user):
    saved_project.cells = [CellEntity(position=c.position, is_colored=c.position % 4 == 0) for c in saved_project.cells]
    repo.save(saved_project)

    [summary] = repo.list_summaries(user.id)

    assert summary.id == saved_project.id
    assert summary.goal_count == 2
    assert summary.total_cells == 120
    assert summary.colored_cells == 30


def test_delete_cascades(repo, saved_project, user):
    assert repo.delete(saved_project.id, user_id=user.id) is True
    assert repo.get_by_id(saved_project.id) is None
    assert Cell.objects.count() == 0
    assert Goal.objects.count() == 0


def test_goal_lookup(repo, saved_project):
    goal_id = saved_project.goals[1].id
    assert repo.get_project_id_for_goal(goal_id) == saved_project.id


def test_save_refuses_project_id_of_another_user(repo, saved_project, other_user, user, png_bytes):
    intruder = ProjectEntity(id=saved_project.id, project_name="Hijacked", image_data=png_bytes)

    with pytest.raises(ValueError):
        repo.save(intruder, user_id=other_user.id)

    kept = repo.get_by_id(saved_project.id, user_id=user.id)
    assert kept.project_name == "Holiday"
    assert len(kept.goals) == 2
    assert len(kept.cells) == 120


def test_save_refuses_goal_ids_of_another_project(repo, saved_project, other_user, png_bytes):
    stolen_goal = saved_project.goals[0]
    intruder = ProjectEntity(id=None, image_data=png_bytes, goals=[stolen_goal])

    with pytest.raises(ValueError):
        repo.save(intruder, user_id=other_user.id)

    assert repo.list_summaries(other_user.id) == []
    assert repo.get_project_id_for_goal(stolen_goal.id) == saved_project.id
