"""Shared fixtures: a fresh SQLite database and services per test."""

import asyncio

import pytest

from app.database.db import init_db
from app.database.store import ProjectStore
from app.models import ProjectCreate
from app.services.entities import EntityService
from app.services.ids import IdGenerator
from app.services.projects import ProjectService
from app.services.timeline import TimelineService

OWNER = "user-alice"
INTRUDER = "user-mallory"


class SequentialIds(IdGenerator):
    """Predictable ids so assertions can name them."""

    def __init__(self):
        self.counter = 0

    def new_id(self) -> str:
        self.counter += 1
        return f"id{self.counter:04d}"


def run(coro):
    return asyncio.run(coro)


@pytest.fixture
def db_path(tmp_path):
    path = tmp_path / "aetherquill.db"
    run(init_db(path))
    return str(path)


@pytest.fixture
def store(db_path):
    return ProjectStore(db_path)


@pytest.fixture
def ids():
    return SequentialIds()


@pytest.fixture
def projects(store, ids):
    return ProjectService(store, ids)


@pytest.fixture
def entities(store, ids):
    return EntityService(store, ids)


@pytest.fixture
def timeline(store, ids):
    return TimelineService(store, ids)


@pytest.fixture
def project(projects):
    """A project owned by OWNER."""
    return run(projects.create_project(ProjectCreate(name="The Sunstone Chronicle"), OWNER))
