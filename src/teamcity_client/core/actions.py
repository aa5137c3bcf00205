# -*- coding: utf-8 -*-
"""Inputs accepted by ``TeamCityModel.perform``."""

from __future__ import annotations

from dataclasses import dataclass

from teamcity_client.models.build import Build
from teamcity_client.models.project import Project


class Action:
    """Base class of every action variant."""

    __slots__ = ()


@dataclass(frozen=True)
class StartApp(Action):
    pass


@dataclass(frozen=True)
class SubmitCredentials(Action):
    address: str
    credentials: str


@dataclass(frozen=True)
class RefreshList(Action):
    pass


@dataclass(frozen=True)
class SelectProjects(Action):
    pass


@dataclass(frozen=True)
class SubmitProjects(Action):
    selected: tuple[Project, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "selected", tuple(self.selected))


@dataclass(frozen=True)
class SelectBuild(Action):
    build: Build


@dataclass(frozen=True)
class OpenInWebBrowser(Action):
    pass


@dataclass(frozen=True)
class ReturnToList(Action):
    pass


@dataclass(frozen=True)
class Logout(Action):
    pass


@dataclass(frozen=True)
class AcceptLoginError(Action):
    pass


START_APP = StartApp()
REFRESH_LIST = RefreshList()
SELECT_PROJECTS = SelectProjects()
OPEN_IN_WEB_BROWSER = OpenInWebBrowser()
RETURN_TO_LIST = ReturnToList()
LOGOUT = Logout()
ACCEPT_LOGIN_ERROR = AcceptLoginError()
