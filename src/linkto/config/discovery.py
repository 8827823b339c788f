"""Config file discovery and loading.

Settings live in ``linkto.toml`` or under ``[tool.linkto]`` in a
``pyproject.toml``. Discovery walks up from the working directory and
stops at the first directory holding either; ``linkto.toml`` wins when a
directory has both. ``LINKTO_CONFIG`` names a file explicitly.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

from linkto.config.models import LinkConfig

CONFIG_FILENAME = "linkto.toml"
PYPROJECT_FILENAME = "pyproject.toml"
CONFIG_ENV_VAR = "LINKTO_CONFIG"


def _pyproject_has_section(path: Path) -> bool:
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError:
        return False
    return "linkto" in data.get("tool", {})


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file governing *start* (default: cwd), or None."""
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        return p if p.is_file() else None

    directory = (start or Path.cwd()).resolve()
    for candidate_dir in (directory, *directory.parents):
        dedicated = candidate_dir / CONFIG_FILENAME
        if dedicated.is_file():
            return dedicated
        pyproject = candidate_dir / PYPROJECT_FILENAME
        if pyproject.is_file() and _pyproject_has_section(pyproject):
            return pyproject
    return None


def read_config_data(path: Path) -> dict[str, Any]:
    """Parse *path* and return the linkto table it holds.

    Raises:
        tomllib.TOMLDecodeError: The file is not valid TOML.
    """
    data: dict[str, Any] = tomllib.loads(path.read_text(encoding="utf-8"))
    if path.name == PYPROJECT_FILENAME:
        return dict(data.get("tool", {}).get("linkto", {}))
    return data


def load_config(path: Path | None = None, cwd: Path | None = None) -> LinkConfig:
    """Load and validate config, falling back to defaults when none exists."""
    if path is None:
        path = find_config(cwd)
    if path is None:
        return LinkConfig()
    return LinkConfig.model_validate(read_config_data(path))
