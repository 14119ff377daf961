import io
import random

import pytest
from PIL import Image

from apps.goals.domain.services import build_goal
from apps.goals.domain.entities import GoalUnit
from apps.projects.adapters.orm_repositories import DjangoProjectRepository
from apps.projects.domain.entities import ProjectEntity
from apps.projects.domain.services import rebuild_grid


def make_png(width=64, height=48, color=(200, 60, 60)):
    buffer = io.BytesIO()
    Image.new('RGB', (width, height), color).save(buffer, format='PNG')
    return buffer.getvalue()


@pytest.fixture
def png_bytes():
    return make_png(640, 480)


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def user(django_user_model):
    return django_user_model.objects.create_user(username='anna', password='secret')


@pytest.fixture
def other_user(django_user_model):
    return django_user_model.objects.create_user(username='bob', password='secret')


@pytest.fixture
def auth_client(client, user):
    client.force_login(user)
    return client


@pytest.fixture
def repo():
    return DjangoProjectRepository()


@pytest.fixture
def saved_project(repo, user, png_bytes):
    """A stored project with two goals and a visible, empty grid (100 + 20 cells)."""
    goals = [
        build_goal("Save money", "100", GoalUnit.DOLLAR),
        build_goal("Read pages", "20", GoalUnit.PIECES),
    ]
    project = ProjectEntity(
        id=None,
        project_name="Holiday",
        image_data=png_bytes,
        goals=goals,
        cells=rebuild_grid(goals, []),
        show_grid=True,
    )
    return repo.save(project, user_id=user.id)
