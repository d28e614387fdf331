"""
Teamwork API records used by the overdue report.

Only the fields the report reads are modelled; everything else in the
upstream payload is ignored.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional


@dataclass(frozen=True)
class Task:
    id: Optional[int]
    name: str
    due_date: Optional[str]
    tasklist_id: Optional[int]
    assignee_user_ids: List[int] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Task":
        return cls(
            id=data.get("id"),
            name=data.get("name", ""),
            due_date=data.get("dueDate"),
            tasklist_id=data.get("tasklistId"),
            assignee_user_ids=list(data.get("assigneeUserIds") or []),
        )


@dataclass(frozen=True)
class Tasklist:
    id: int
    project_id: Optional[int]

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Tasklist":
        return cls(id=data["id"], project_id=data.get("projectId"))


@dataclass(frozen=True)
class Project:
    id: int
    name: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Project":
        return cls(id=data["id"], name=data.get("name", ""))


@dataclass(frozen=True)
class User:
    id: int
    first_name: str
    last_name: str

    @property
    def display_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "User":
        return cls(
            id=data["id"],
            first_name=data.get("firstName", ""),
            last_name=data.get("lastName", ""),
        )


def _records(collection) -> Iterable[Dict[str, Any]]:
    # Teamwork sends included records keyed by id; accept a plain list too
    if not collection:
        return []
    if isinstance(collection, dict):
        return collection.values()
    return collection


@dataclass
class Included:
    """The optional `included` block of a tasks page."""

    users: List[User] = field(default_factory=list)
    projects: List[Project] = field(default_factory=list)
    tasklists: List[Tasklist] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "Included":
        data = data or {}
        return cls(
            users=[User.from_dict(u) for u in _records(data.get("users"))],
            projects=[Project.from_dict(p) for p in _records(data.get("projects"))],
            tasklists=[
                Tasklist.from_dict(t) for t in _records(data.get("tasklists"))
            ],
        )


@dataclass
class Lookups:
    """Id-keyed tables accumulated across every fetched page."""

    projects: Dict[int, Project] = field(default_factory=dict)
    tasklists: Dict[int, Tasklist] = field(default_factory=dict)
    users: Dict[int, User] = field(default_factory=dict)

    def merge(self, included: Included) -> None:
        # last write wins on duplicate ids
        for user in included.users:
            self.users[user.id] = user
        for project in included.projects:
            self.projects[project.id] = project
        for tasklist in included.tasklists:
            self.tasklists[tasklist.id] = tasklist


@dataclass
class TasksPage:
    tasks: List[Task]
    included: Included
    has_more: bool

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TasksPage":
        page_meta = (data.get("meta") or {}).get("page") or {}
        return cls(
            tasks=[Task.from_dict(t) for t in data.get("tasks") or []],
            included=Included.from_dict(data.get("included")),
            has_more=bool(page_meta.get("hasMore")),
        )
