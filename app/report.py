"""
Overdue report formatting - joins tasks against the lookup tables
"""

from datetime import datetime, timezone
from typing import Dict, List, Optional

from app.models import Lookups, Task

PROJECT_NOT_FOUND = "Project Not Found"
UNKNOWN_USER = "Unknown User"
UNASSIGNED = "Unassigned"


def _parse_due_date(value) -> Optional[datetime]:
    if not isinstance(value, str):
        return None
    try:
        dt = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None
    return dt if dt.tzinfo else dt.replace(tzinfo=timezone.utc)


def _due_date_key(row: Dict):
    # unparseable dates go last; sorted() keeps input order among equals
    dt = _parse_due_date(row["DueDate"])
    return (dt is None, dt or datetime.min.replace(tzinfo=timezone.utc))


def project_name(task: Task, lookups: Lookups) -> str:
    tasklist = lookups.tasklists.get(task.tasklist_id)
    project = lookups.projects.get(tasklist.project_id) if tasklist else None
    return project.name if project else PROJECT_NOT_FOUND


def assignee_names(task: Task, lookups: Lookups) -> str:
    if not task.assignee_user_ids:
        return UNASSIGNED
    names = []
    for user_id in task.assignee_user_ids:
        user = lookups.users.get(user_id)
        names.append(user.display_name if user else UNKNOWN_USER)
    return ", ".join(names)


def task_url(base_url: str, task_id) -> str:
    return f"{base_url}/app/tasks/{task_id}"


def format_tasks(tasks: List[Task], lookups: Lookups, base_url: str) -> List[Dict]:
    """
    Build report rows, earliest due date first.

    Tasks sharing a due date stay in the order they were fetched.
    """
    rows = [
        {
            "TaskID": task.id,
            "Project": project_name(task, lookups),
            "Task": task.name,
            "AssignedTo": assignee_names(task, lookups),
            "DueDate": task.due_date,
            "URL": task_url(base_url, task.id),
        }
        for task in tasks
    ]
    return sorted(rows, key=_due_date_key)
