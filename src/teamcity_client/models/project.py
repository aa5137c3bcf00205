# -*- coding: utf-8 -*-
"""Project data models."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Project:
    """A TeamCity project as returned by the API."""

    id: str
    name: str = ""


@dataclass(frozen=True)
class SelectableProject:
    """Project annotated with its selection flag for the filter dialog."""

    project: Project
    is_selected: bool = False
