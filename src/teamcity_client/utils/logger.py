# -*- coding: utf-8 -*-
"""Root logging setup for console + session file logging."""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path

LOG_FORMAT = "%(asctime)s [%(threadName)s] %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"


def resolve_level(level: str) -> int:
    numeric_level = logging.getLevelName(str(level).upper())
    if not isinstance(numeric_level, int):
        return logging.INFO
    return numeric_level


def setup_session_logging(
    log_dir: str | Path,
    app_name: str,
    level: str = "INFO",
    session_file: bool = True,
) -> Path | None:
    """Configure root logging once per process and return the session log path."""
    root = logging.getLogger()
    if getattr(root, "_teamcity_logging_configured", False):
        return getattr(root, "_teamcity_session_log", None)

    numeric_level = resolve_level(level)
    root.setLevel(numeric_level)
    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers: list[logging.Handler] = []
    if not any(type(handler) is logging.StreamHandler for handler in root.handlers):
        stream_handler = logging.StreamHandler()
        stream_handler.setLevel(numeric_level)
        stream_handler.setFormatter(formatter)
        root.addHandler(stream_handler)
        handlers.append(stream_handler)

    session_log_path: Path | None = None
    if session_file:
        logs_dir = Path(log_dir)
        logs_dir.mkdir(parents=True, exist_ok=True)
        safe_app_name = app_name.lower().replace(" ", "-")
        timestamp = datetime.now().strftime("%Y%m%d-%H%M%S")
        session_log_path = logs_dir / f"{safe_app_name}-{timestamp}.log"
        try:
            file_handler = logging.FileHandler(session_log_path, encoding="utf-8")
        except OSError as exc:
            root.error("Failed to open session log file %s: %s", session_log_path, exc)
            session_log_path = None
        else:
            file_handler.setLevel(numeric_level)
            file_handler.setFormatter(formatter)
            root.addHandler(file_handler)
            handlers.append(file_handler)
            root.info("Session log file established: %s", session_log_path)

    root._teamcity_logging_configured = True  # type: ignore[attr-defined]
    root._teamcity_session_log = session_log_path  # type: ignore[attr-defined]
    root._teamcity_handlers = handlers  # type: ignore[attr-defined]
    return session_log_path


def reset_session_logging() -> None:
    """Detach the handlers added by ``setup_session_logging``."""
    root = logging.getLogger()
    for handler in getattr(root, "_teamcity_handlers", []):
        root.removeHandler(handler)
        handler.close()
    root._teamcity_logging_configured = False  # type: ignore[attr-defined]
    root._teamcity_session_log = None  # type: ignore[attr-defined]
    root._teamcity_handlers = []  # type: ignore[attr-defined]
