# tests/conftest.py

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from app.config import TeamworkConfig
from app.main import app, get_config, get_session

from tests.fakes import FakeSession

BASE_URL = "https://acme.teamwork.com"


@pytest.fixture()
def config() -> TeamworkConfig:
    return TeamworkConfig(api_key="secret", base_url=BASE_URL)


@pytest.fixture()
def session() -> FakeSession:
    return FakeSession()


@pytest.fixture()
def client(config: TeamworkConfig, session: FakeSession):
    """
    TestClient with config and upstream session injected.

    Tests tweak `config` via app.dependency_overrides or queue responses on
    `session` before calling the endpoint. Not entered as a context manager,
    so the lifespan (and its logging setup) does not run.
    """
    app.dependency_overrides[get_config] = lambda: config
    app.dependency_overrides[get_session] = lambda: session
    yield TestClient(app)
    app.dependency_overrides.clear()
