# -*- coding: utf-8 -*-
"""VCS change data model."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Change:
    """Single VCS change included in a build."""

    comment: str
    username: str
    id: int | None = None
    version: str = ""
