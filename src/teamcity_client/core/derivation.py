# -*- coding: utf-8 -*-
"""Pure helpers used by the model to derive states."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from teamcity_client.constants import BASIC_AUTH_PREFIX
from teamcity_client.core.state import LoginError
from teamcity_client.integrations.teamcity_api import InvalidCredentialsError, UnknownHostError
from teamcity_client.models.build import Build
from teamcity_client.models.project import Project, SelectableProject


def combine_builds(queued: Iterable[Build], started: Iterable[Build]) -> list[Build]:
    """Queued builds first, then started ones, each group in API order."""
    return [*queued, *started]


def selected_project_ids(projects: Iterable[Project]) -> list[str]:
    return [project.id for project in projects]


def to_selectable_projects(
    projects: Sequence[Project],
    selected: Iterable[Project],
) -> list[SelectableProject]:
    selected_ids = set(selected_project_ids(selected))
    return [SelectableProject(project, project.id in selected_ids) for project in projects]


def classify_error(exc: BaseException) -> LoginError:
    if isinstance(exc, UnknownHostError):
        return LoginError.UNKNOWN_HOST
    if isinstance(exc, InvalidCredentialsError):
        return LoginError.INVALID_CREDENTIALS
    return LoginError.NETWORK_PROBLEM


def clears_session(error: LoginError) -> bool:
    """Host and credential errors invalidate the stored login."""
    return error in {LoginError.UNKNOWN_HOST, LoginError.INVALID_CREDENTIALS}


def basic_credentials(credentials: str) -> str:
    # Encoding, if any, belongs to the API client.
    return f"{BASIC_AUTH_PREFIX}{credentials}"
