# -*- coding: utf-8 -*-
"""Persistence contracts for login data and the project filter."""

from __future__ import annotations

import threading
from abc import ABC, abstractmethod
from collections.abc import Sequence

from teamcity_client.models.auth_data import AuthData
from teamcity_client.models.project import Project


class LoginRepository(ABC):
    """Holds at most one ``AuthData``; assigning ``None`` clears it."""

    @property
    @abstractmethod
    def auth_data(self) -> AuthData | None:
        ...

    @auth_data.setter
    @abstractmethod
    def auth_data(self, value: AuthData | None) -> None:
        ...


class BuildsRepository(ABC):
    """Holds the selected project filter; assigning ``[]`` clears it."""

    @property
    @abstractmethod
    def selected_projects(self) -> list[Project]:
        ...

    @selected_projects.setter
    @abstractmethod
    def selected_projects(self, value: Sequence[Project]) -> None:
        ...


class InMemoryLoginRepository(LoginRepository):
    """Process-local login repository."""

    def __init__(self, auth_data: AuthData | None = None) -> None:
        self._lock = threading.Lock()
        self._auth_data = auth_data

    @property
    def auth_data(self) -> AuthData | None:
        with self._lock:
            return self._auth_data

    @auth_data.setter
    def auth_data(self, value: AuthData | None) -> None:
        with self._lock:
            self._auth_data = value


class InMemoryBuildsRepository(BuildsRepository):
    """Process-local project filter; returns copies of the stored list."""

    def __init__(self, selected_projects: Sequence[Project] = ()) -> None:
        self._lock = threading.Lock()
        self._selected: list[Project] = list(selected_projects)

    @property
    def selected_projects(self) -> list[Project]:
        with self._lock:
            return list(self._selected)

    @selected_projects.setter
    def selected_projects(self, value: Sequence[Project]) -> None:
        with self._lock:
            self._selected = list(value)
