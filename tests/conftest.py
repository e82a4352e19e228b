# tests/conftest.py

from __future__ import annotations

from datetime import date
from types import SimpleNamespace

import pytest

from tasklist.core.state import Session
from tasklist.tasks.task_store import ProjectRegistry

from .fakes import CollectingSink, FakeClock


@pytest.fixture()
def settings() -> SimpleNamespace:
    """
    Minimal settings object compatible with Session and the console loop.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment and any local .env.
    """
    return SimpleNamespace(
        app_name="tasklist-test",
        prompt="> ",
        quit_command="quit",
        reset_existing_projects=False,
    )


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock(date(2024, 1, 15))


@pytest.fixture()
def session(settings: SimpleNamespace, clock: FakeClock) -> Session:
    return Session(settings=settings, registry=ProjectRegistry(), clock=clock)


@pytest.fixture()
def out() -> CollectingSink:
    return CollectingSink()
