# -*- coding: utf-8 -*-
"""Tests for domain value types and in-memory repositories."""

from __future__ import annotations

from datetime import datetime

from conftest import create_build, create_project
from teamcity_client.core.repositories import InMemoryBuildsRepository, InMemoryLoginRepository
from teamcity_client.models.auth_data import AuthData
from teamcity_client.models.build import Build, BuildType


def test_build_started_at_caption() -> None:
    build = Build(id=1, start_date=datetime(2026, 3, 7, 9, 5, 1))
    assert build.started_at_text() == "Started at: 7 Mar 26 09:05:01"


def test_build_without_start_date_has_empty_caption() -> None:
    assert Build(id=1).started_at_text() == ""


def test_build_project_name_from_build_type() -> None:
    build = Build(id=1, build_type=BuildType(id="bt1", name="Tests", project_id="P1", project_name="Backend"))
    assert build.project_name == "Backend"


def test_builds_compare_by_value() -> None:
    assert create_build(id=5) == create_build(id=5)
    assert create_build(id=5) != create_build(id=6)


def test_auth_data_user() -> None:
    assert AuthData("http://tc", "alice:p:w").user == "alice"


def test_login_repository_set_and_clear() -> None:
    repository = InMemoryLoginRepository()
    assert repository.auth_data is None
    repository.auth_data = AuthData("http://tc", "user:pass")
    assert repository.auth_data == AuthData("http://tc", "user:pass")
    repository.auth_data = None
    assert repository.auth_data is None


def test_builds_repository_returns_copies() -> None:
    repository = InMemoryBuildsRepository([create_project(id="P1")])
    projects = repository.selected_projects
    projects.append(create_project(id="P2"))
    assert repository.selected_projects == [create_project(id="P1")]
    repository.selected_projects = []
    assert repository.selected_projects == []
