"""
FastAPI Application - Teamwork Overdue Tasks Report
"""

import logging
from contextlib import asynccontextmanager

import requests
import uvicorn
from fastapi import Depends, FastAPI
from fastapi.responses import JSONResponse

from app.config import HOST, PORT, TeamworkConfig, load_config
from app.logging_config import setup_logging
from app.teamwork import fetch_all_overdue_tasks

logger = logging.getLogger(__name__)

CONFIG_ERROR = "Server configuration error: API key or Base URL not set."
FETCH_ERROR = "Failed to fetch tasks from Teamwork API."


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    yield


app = FastAPI(title="Teamwork Overdue Tasks", lifespan=lifespan)


# -------------------------------------------------
# Dependencies
# -------------------------------------------------
def get_config() -> TeamworkConfig:
    return load_config()


def get_session():
    session = requests.Session()
    try:
        yield session
    finally:
        session.close()


# -------------------------------------------------
# Overdue Tasks
# -------------------------------------------------
@app.api_route("/api/GetOverdueTasks", methods=["GET", "POST"], tags=["Tasks"])
def get_overdue_tasks(
    config: TeamworkConfig = Depends(get_config),
    session: requests.Session = Depends(get_session),
):
    """All overdue, incomplete tasks sorted by due date."""
    if not config.is_complete:
        logger.error(f"Missing configuration: {', '.join(config.missing)}")
        return JSONResponse(status_code=500, content={"error": CONFIG_ERROR})

    try:
        rows = fetch_all_overdue_tasks(config, session)
    except Exception as e:
        logger.error("Error fetching tasks", exc_info=True)
        return JSONResponse(
            status_code=500,
            content={"error": FETCH_ERROR, "details": str(e)},
        )

    return JSONResponse(status_code=200, content=rows)


if __name__ == "__main__":
    uvicorn.run(app, host=HOST, port=PORT)
