# tests/test_ownership.py

"""Um usuário nunca enxerga nem altera dados de outro"""

import pytest

from apps.core.exceptions import NotFound
from apps.core.models import Project, Task

pytestmark = pytest.mark.django_db


@pytest.fixture
def bob_token(bob):
    return bob[1]


def test_foreign_project_looks_absent(api, alice_project, bob_token):
    foreign = api.get(f'/projects/{alice_project.id}', token=bob_token)
    missing = api.get('/projects/999999', token=bob_token)

    assert foreign.status_code == missing.status_code == 404
    assert foreign.json() == missing.json()


def test_foreign_project_cannot_be_deleted(api, alice_project, bob_token):
    response = api.delete(f'/projects/{alice_project.id}', token=bob_token)

    assert response.status_code == 404
    assert Project.objects.filter(pk=alice_project.id).exists()


def test_foreign_project_cannot_receive_tasks(api, alice_project, bob_token):
    response = api.post(f'/projects/{alice_project.id}/tasks', {'title': 'Sneaky'}, token=bob_token)

    assert response.status_code == 404
    assert not alice_project.tasks.exists()


def test_foreign_project_cannot_be_scheduled(api, alice_project, alice_task, bob_token):
    response = api.post(f'/projects/{alice_project.id}/schedule', {'daysPerTask': 1}, token=bob_token)

    assert response.status_code == 404


def test_foreign_task_cannot_be_changed(api, alice_task, bob_token):
    update = api.put(f'/tasks/{alice_task.id}', {'title': 'Hijacked', 'isCompleted': True}, token=bob_token)
    toggle = api.put(f'/tasks/{alice_task.id}/toggle', token=bob_token)
    delete = api.delete(f'/tasks/{alice_task.id}', token=bob_token)

    assert update.status_code == toggle.status_code == delete.status_code == 404
    alice_task.refresh_from_db()
    assert alice_task.title == 'Write docs'
    assert alice_task.is_completed is False


def test_foreign_projects_are_not_listed(api, alice_project, bob_token):
    assert api.get('/projects', token=bob_token).json() == []


def test_find_owned_filters_by_owner(alice_project, alice_task, bob):
    bob_user, _ = bob

    assert Project.objects.find_owned(alice_project.id, alice_project.owner_id) == alice_project
    assert Task.objects.find_owned(alice_task.id, alice_project.owner_id) == alice_task

    with pytest.raises(NotFound):
        Project.objects.find_owned(alice_project.id, bob_user.id)
    with pytest.raises(NotFound):
        Task.objects.find_owned(alice_task.id, bob_user.id)
