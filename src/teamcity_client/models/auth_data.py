# -*- coding: utf-8 -*-
"""Persisted login data."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class AuthData:
    """Server address and raw ``user:password`` credentials."""

    address: str
    credentials: str

    @property
    def user(self) -> str:
        return self.credentials.split(":", 1)[0]
