# -*- coding: utf-8 -*-
"""Shared pytest fixtures for the TeamCity client."""

from __future__ import annotations

import sys
import threading
from collections.abc import Sequence
from datetime import datetime
from pathlib import Path
from typing import Any

import pytest


SRC_DIR = Path(__file__).resolve().parents[1] / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from teamcity_client.core.model import TeamCityModel  # noqa: E402
from teamcity_client.core.repositories import InMemoryBuildsRepository, InMemoryLoginRepository  # noqa: E402
from teamcity_client.core.state import AppState  # noqa: E402
from teamcity_client.core.task_runner import TaskRunner  # noqa: E402
from teamcity_client.integrations.teamcity_api import TeamCityApi  # noqa: E402
from teamcity_client.models.build import Build, BuildType  # noqa: E402
from teamcity_client.models.change import Change  # noqa: E402
from teamcity_client.models.project import Project  # noqa: E402


TEAMCITY_ADDRESS = "http://teamcity:8111"
CREDENTIALS = "user:pass"
WAIT_TIMEOUT = 5.0


def create_build(
    id: int = 1,
    number: str = "",
    web_url: str = "",
    project_name: str = "Project",
    state: str = "finished",
) -> Build:
    return Build(
        id=id,
        number=number or str(id),
        status="SUCCESS",
        state=state,
        status_text="Tests passed: 10",
        web_url=web_url or f"http://teamcity:8111/viewLog.html?buildId={id}",
        start_date=datetime(2026, 10, 3, 10, 15, 0),
        build_type=BuildType(id=f"bt{id}", name="Build", project_id=project_name, project_name=project_name),
    )


def create_project(id: str = "Project", name: str = "") -> Project:
    return Project(id=id, name=name or id)


def create_change(comment: str = "Changes", username: str = "user") -> Change:
    return Change(comment=comment, username=username)


class Gate:
    """Response that blocks the calling worker until ``open()``."""

    def __init__(self, result: Any = None) -> None:
        self.result = result
        self._event = threading.Event()

    def open(self) -> None:
        self._event.set()

    def wait(self) -> Any:
        self._event.wait(WAIT_TIMEOUT)
        if isinstance(self.result, BaseException):
            raise self.result
        return self.result


class FakeTeamCityApi(TeamCityApi):
    """Scriptable API. Unstubbed calls stay in flight until ``release()``."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._called = threading.Condition(self._lock)
        self._never = threading.Event()
        self._responses: dict[str, list[Any]] = {}
        self.calls: list[tuple[str, tuple]] = []
        self.address: str | None = None
        self.credentials_value: str | None = None

    def stub(self, name: str, *responses: Any) -> None:
        """Queue responses for ``name``; the last one is repeated."""
        with self._lock:
            self._responses[name] = list(responses)

    def release(self) -> None:
        self._never.set()

    def wait_for_calls(self, name: str, count: int = 1) -> bool:
        with self._called:
            return self._called.wait_for(
                lambda: sum(1 for call_name, _args in self.calls if call_name == name) >= count,
                timeout=WAIT_TIMEOUT,
            )

    def call_names(self) -> list[str]:
        with self._lock:
            return [name for name, _args in self.calls]

    def set_address(self, address: str) -> None:
        self._record("set_address", address)
        self.address = address

    def _set_credentials(self, value: str) -> None:
        self._record("credentials", value)
        self.credentials_value = value

    def get_projects(self) -> list[Project]:
        return self._respond("get_projects")

    def get_builds(self) -> list[Build]:
        return self._respond("get_builds")

    def get_queued_builds(self) -> list[Build]:
        return self._respond("get_queued_builds")

    def get_builds_for_projects(self, project_ids: Sequence[str]) -> list[Build]:
        return self._respond("get_builds_for_projects", list(project_ids))

    def get_changes(self, build_id: int) -> list[Change]:
        return self._respond("get_changes", build_id)

    def _record(self, name: str, *args: Any) -> None:
        with self._called:
            self.calls.append((name, args))
            self._called.notify_all()

    def _respond(self, name: str, *args: Any) -> Any:
        with self._called:
            self.calls.append((name, args))
            self._called.notify_all()
            queue = self._responses.get(name)
            if not queue:
                response = None
            elif len(queue) > 1:
                response = queue.pop(0)
            else:
                response = queue[0]
        if response is None:
            self._never.wait(WAIT_TIMEOUT)
            return []
        if isinstance(response, Gate):
            return response.wait()
        if isinstance(response, BaseException):
            raise response
        return list(response)


class StateRecorder:
    """Thread-safe observer collecting every emitted state."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._values: list[AppState] = []

    def __call__(self, state: AppState) -> None:
        with self._lock:
            self._values.append(state)

    @property
    def values(self) -> list[AppState]:
        with self._lock:
            return list(self._values)

    @property
    def last(self) -> AppState:
        return self.values[-1]


@pytest.fixture
def api() -> FakeTeamCityApi:
    fake = FakeTeamCityApi()
    yield fake
    fake.release()


@pytest.fixture
def login_repository() -> InMemoryLoginRepository:
    return InMemoryLoginRepository()


@pytest.fixture
def builds_repository() -> InMemoryBuildsRepository:
    return InMemoryBuildsRepository()


@pytest.fixture
def model(api, login_repository, builds_repository) -> TeamCityModel:
    instance = TeamCityModel(api, login_repository, builds_repository, runner=TaskRunner(max_workers=4))
    yield instance
    api.release()
    instance.close()


@pytest.fixture
def observer(model: TeamCityModel) -> StateRecorder:
    recorder = StateRecorder()
    model.state.subscribe(recorder)
    return recorder


@pytest.fixture
def default_config() -> dict:
    from teamcity_client.config import get_default_config

    return get_default_config()


@pytest.fixture
def qt_app():
    pytest.importorskip("PyQt6")
    from PyQt6.QtCore import QCoreApplication

    app = QCoreApplication.instance() or QCoreApplication([])
    yield app
