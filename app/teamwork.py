"""
Teamwork API client - overdue task fetching
"""

import base64
import logging
from typing import Dict, Iterator, List, Optional

import requests

from app.config import PAGE_SIZE, TeamworkConfig
from app.models import Lookups, Task, TasksPage
from app.report import format_tasks

logger = logging.getLogger(__name__)

TASKS_ENDPOINT = "/projects/api/v3/tasks.json"


class TeamworkAPIError(RuntimeError):
    def __init__(self, status_code: int):
        super().__init__(f"Teamwork API request failed with status {status_code}")
        self.status_code = status_code


def build_auth_header(api_key: str) -> str:
    """Teamwork basic auth: the API key as username, any password."""
    encoded = base64.b64encode(f"{api_key}:X".encode("utf-8")).decode("ascii")
    return f"Basic {encoded}"


# =================================================
# CLIENT
# =================================================
class TeamworkClient:
    def __init__(self, config: TeamworkConfig, session: Optional[requests.Session] = None):
        self.base_url = config.base_url
        self.session = session or requests.Session()
        self.session.headers.update({"Authorization": build_auth_header(config.api_key)})

    def _get(self, endpoint: str, params: Optional[dict] = None) -> dict:
        resp = self.session.get(f"{self.base_url}{endpoint}", params=params)
        if not resp.ok:
            raise TeamworkAPIError(resp.status_code)
        return resp.json()

    def get_tasks_page(self, page: int) -> TasksPage:
        params = {
            "filter[completed]": "false",
            "filter[dueDate][lt]": "now",
            "page": page,
            "pageSize": PAGE_SIZE,
            "include": "projects,tasklists,users",
        }
        logger.debug(f"Fetching overdue tasks page {page}")
        return TasksPage.from_dict(self._get(TASKS_ENDPOINT, params))

    def iter_task_pages(self) -> Iterator[TasksPage]:
        """Yield pages in order until the API reports no more."""
        page = 1
        while True:
            data = self.get_tasks_page(page)
            yield data
            # an empty page does not end pagination, only hasMore does
            if not data.has_more:
                return
            page += 1


# =================================================
# PUBLIC API (USED BY main)
# =================================================
def fetch_all_overdue_tasks(
    config: TeamworkConfig,
    session: Optional[requests.Session] = None,
) -> List[Dict]:
    client = TeamworkClient(config, session)
    lookups = Lookups()
    tasks: List[Task] = []
    pages = 0

    for data in client.iter_task_pages():
        pages += 1
        lookups.merge(data.included)
        tasks.extend(t for t in data.tasks if t.due_date)

    logger.info(f"Fetched {len(tasks)} overdue tasks across {pages} page(s)")
    return format_tasks(tasks, lookups, config.base_url)
