# -*- coding: utf-8 -*-
"""Composition root: wires config, logging and the model together."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from teamcity_client.config import load_config, validate_config
from teamcity_client.constants import APP_NAME, APP_VERSION
from teamcity_client.core.model import TeamCityModel
from teamcity_client.core.repositories import (
    BuildsRepository,
    InMemoryBuildsRepository,
    InMemoryLoginRepository,
    LoginRepository,
)
from teamcity_client.core.task_runner import TaskRunner
from teamcity_client.integrations.teamcity_api import TeamCityApi
from teamcity_client.utils.logger import setup_session_logging

logger = logging.getLogger(__name__)


def bootstrap_logging(config: dict[str, Any], base_dir: str | Path | None = None) -> Path | None:
    """Set up root logging as described by the ``logging`` section."""
    logging_config = config.get("logging", {})
    log_dir = Path(logging_config.get("log_dir", "logs"))
    if base_dir is not None and not log_dir.is_absolute():
        log_dir = Path(base_dir) / log_dir
    session_log = setup_session_logging(
        log_dir,
        APP_NAME,
        level=str(logging_config.get("level", "INFO")),
        session_file=bool(logging_config.get("session_file", True)),
    )
    logger.info("%s %s logging initialized", APP_NAME, APP_VERSION)
    return session_log


def create_model(
    api: TeamCityApi,
    login_repository: LoginRepository | None = None,
    builds_repository: BuildsRepository | None = None,
    config: dict[str, Any] | None = None,
    settings_path: str | Path | None = None,
) -> TeamCityModel:
    """
    Build a ``TeamCityModel`` sized by ``config``.

    Without ``config`` the settings file at ``settings_path`` (default
    ``settings.json`` in the working directory) and its ``.env`` are loaded.
    Repositories default to in-memory ones.
    """
    settings = config if config is not None else load_config(settings_path)
    validate_config(settings)
    max_workers = int(settings["workers"]["max_workers"])
    model = TeamCityModel(
        api,
        login_repository if login_repository is not None else InMemoryLoginRepository(),
        builds_repository if builds_repository is not None else InMemoryBuildsRepository(),
        runner=TaskRunner(max_workers=max_workers),
        idle_timeout=float(settings["timeouts"]["idle_wait_seconds"]),
    )
    logger.info("Model created with %d workers", max_workers)
    return model
