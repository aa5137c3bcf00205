# -*- coding: utf-8 -*-
"""Build data model."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from teamcity_client.constants import STARTED_AT_FORMAT


@dataclass(frozen=True)
class BuildType:
    """Build configuration a build belongs to."""

    id: str = ""
    name: str = ""
    project_id: str = ""
    project_name: str = ""


@dataclass(frozen=True)
class Build:
    """Immutable build value fetched from the API."""

    id: int
    number: str = ""
    status: str = "UNKNOWN"
    state: str = "finished"
    status_text: str = ""
    web_url: str = ""
    start_date: datetime | None = None
    build_type: BuildType = field(default_factory=BuildType)

    @property
    def project_name(self) -> str:
        return self.build_type.project_name

    def started_at_text(self) -> str:
        """Caption shown on the details screen, e.g. ``Started at: 3 Oct 26 10:15:00``."""
        if self.start_date is None:
            return ""
        return f"Started at: {self.start_date.day} {self.start_date.strftime(STARTED_AT_FORMAT)}"
