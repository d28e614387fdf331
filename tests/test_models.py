# tests/test_models.py

from __future__ import annotations

from app.models import Included, Lookups, Project, TasksPage, User


def test_included_accepts_id_keyed_mapping_and_list() -> None:
    included = Included.from_dict(
        {
            "users": {"1": {"id": 1, "firstName": "A", "lastName": "One"}},
            "projects": [{"id": 100, "name": "Website"}],
        }
    )
    assert included.users == [User(id=1, first_name="A", last_name="One")]
    assert included.projects == [Project(id=100, name="Website")]
    assert included.tasklists == []


def test_missing_included_is_empty() -> None:
    for raw in (None, {}, {"users": None}):
        included = Included.from_dict(raw)
        assert (included.users, included.projects, included.tasklists) == ([], [], [])


def test_lookups_merge_last_write_wins() -> None:
    lookups = Lookups()
    lookups.merge(Included(projects=[Project(id=1, name="Old")]))
    lookups.merge(Included(projects=[Project(id=1, name="New"), Project(id=2, name="Other")]))

    assert lookups.projects[1].name == "New"
    assert set(lookups.projects) == {1, 2}


def test_tasks_page_parsing() -> None:
    page = TasksPage.from_dict(
        {
            "tasks": [
                {"id": 5, "name": "Ship it", "dueDate": "2024-01-01", "tasklistId": 10, "assigneeUserIds": [1]},
                {"id": 6, "name": "No assignees"},
            ],
            "meta": {"page": {"hasMore": True}},
        }
    )
    assert page.has_more is True
    assert page.tasks[0].assignee_user_ids == [1]
    assert page.tasks[1].due_date is None
    assert page.tasks[1].assignee_user_ids == []


def test_missing_meta_means_no_more_pages() -> None:
    assert TasksPage.from_dict({"tasks": []}).has_more is False
    assert TasksPage.from_dict({"tasks": [], "meta": {"page": None}}).has_more is False
