# -*- coding: utf-8 -*-
"""Contract of the TeamCity REST client consumed by the model.

The transport lives outside this package. Implementations block while the
request is in flight; the model always calls them from worker threads.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence

from teamcity_client.models.build import Build
from teamcity_client.models.change import Change
from teamcity_client.models.project import Project


class TeamCityApiError(Exception):
    """Base class for typed API failures."""


class UnknownHostError(TeamCityApiError):
    """Raised when the server address cannot be resolved or reached."""


class InvalidCredentialsError(TeamCityApiError):
    """Raised when the server rejects the credentials (HTTP 401)."""


class TeamCityApi(ABC):
    """Blocking TeamCity client with mutable address and credentials."""

    @abstractmethod
    def set_address(self, address: str) -> None:
        ...

    @property
    def credentials(self) -> str:
        raise AttributeError("credentials are write-only")

    @credentials.setter
    def credentials(self, value: str) -> None:
        self._set_credentials(value)

    @abstractmethod
    def _set_credentials(self, value: str) -> None:
        """Store the ``Authorization`` header value used for later requests."""

    @abstractmethod
    def get_projects(self) -> list[Project]:
        ...

    @abstractmethod
    def get_builds(self) -> list[Build]:
        ...

    @abstractmethod
    def get_queued_builds(self) -> list[Build]:
        ...

    @abstractmethod
    def get_builds_for_projects(self, project_ids: Sequence[str]) -> list[Build]:
        ...

    @abstractmethod
    def get_changes(self, build_id: int) -> list[Change]:
        ...
