# -*- coding: utf-8 -*-
"""Settings file access. All files are UTF-8."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any


def read_json_object(path: str | Path) -> dict[str, Any]:
    """Parse a JSON file whose top level must be an object."""
    file_path = Path(path)
    try:
        data = json.loads(file_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ValueError(f"{file_path} is not valid JSON (line {exc.lineno}: {exc.msg})") from exc
    if not isinstance(data, dict):
        raise ValueError(f"Expected JSON object in {file_path}")
    return data


def write_json_object(path: str | Path, data: dict[str, Any]) -> Path:
    """Write ``data`` next to ``path`` first, then move it into place."""
    file_path = Path(path)
    file_path.parent.mkdir(parents=True, exist_ok=True)
    staging_path = file_path.with_name(f"{file_path.name}.tmp")
    staging_path.write_text(json.dumps(data, indent=2, sort_keys=True) + "\n", encoding="utf-8")
    staging_path.replace(file_path)
    return file_path


def read_env_file(path: str | Path) -> dict[str, str]:
    """Parse a simple ``KEY=VALUE`` .env file. Missing files yield ``{}``."""
    env_path = Path(path)
    values: dict[str, str] = {}
    if not env_path.exists():
        return values

    for raw_line in env_path.read_text(encoding="utf-8").splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip()
        if not key:
            continue
        if (value.startswith('"') and value.endswith('"')) or (
            value.startswith("'") and value.endswith("'")
        ):
            value = value[1:-1]
        values[key] = value
    return values
