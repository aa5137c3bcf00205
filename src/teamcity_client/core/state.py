# -*- coding: utf-8 -*-
"""Application states emitted by the model.

Exactly one state is current at a time and each emission fully replaces the
previous one:

- InitialState: nothing performed yet
- LoadingBuildsState: build list request in flight
- LoginState: credentials form, optionally with an error
- BuildsState: build list plus all known projects
- SelectProjectsDialogState: project filter dialog
- LoadingDetailsState / DetailsState: build details and its changes
- WebBrowserState: open a URL outside the app
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum

from teamcity_client.models.build import Build
from teamcity_client.models.change import Change
from teamcity_client.models.project import Project, SelectableProject


class LoginError(Enum):
    """Failures surfaced on the login screen."""

    UNKNOWN_HOST = "Unknown host"
    INVALID_CREDENTIALS = "Invalid credentials"
    NETWORK_PROBLEM = "Network problem"

    @property
    def message(self) -> str:
        return self.value


class AppState:
    """Base class of every state variant."""

    __slots__ = ()


@dataclass(frozen=True)
class InitialState(AppState):
    pass


@dataclass(frozen=True)
class LoadingBuildsState(AppState):
    pass


@dataclass(frozen=True)
class LoginState(AppState):
    host: str = ""
    user: str = ""
    password: str = ""
    error: LoginError | None = None

    def without_error(self) -> LoginState:
        return replace(self, error=None)


@dataclass(frozen=True)
class BuildsState(AppState):
    builds: tuple[Build, ...] = ()
    projects: tuple[Project, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "builds", tuple(self.builds))
        object.__setattr__(self, "projects", tuple(self.projects))


@dataclass(frozen=True)
class SelectProjectsDialogState(AppState):
    projects: tuple[SelectableProject, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "projects", tuple(self.projects))


@dataclass(frozen=True)
class LoadingDetailsState(AppState):
    build: Build


@dataclass(frozen=True)
class DetailsState(AppState):
    build: Build
    changes: tuple[Change, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "changes", tuple(self.changes))


@dataclass(frozen=True)
class WebBrowserState(AppState):
    url: str


INITIAL_STATE = InitialState()
LOADING_BUILDS_STATE = LoadingBuildsState()
