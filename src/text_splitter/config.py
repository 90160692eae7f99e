"""Runtime settings for text-splitter.

Settings are layered, later sources winning:

    1. Built-in defaults
    2. The ``text_splitter`` section of ``config/config.yaml`` in the project root
    3. Environment variables (``TEXT_SPLITTER_*``), including a ``.env`` file
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

from dotenv import load_dotenv
from pydantic import BaseModel

from .models import ErrorMode
from .patterns import DEFAULT_TIMEOUT

logger = logging.getLogger(__name__)

ENV_PREFIX = "TEXT_SPLITTER_"
CONFIG_SECTION = "text_splitter"


class RuntimeSettings(BaseModel):
    regex_timeout: float | None = DEFAULT_TIMEOUT
    on_error: ErrorMode = "abort"
    log_level: str = "WARNING"
    json_logs: bool = False


def _find_project_root(start: Path) -> Path:
    """Walk up from ``start`` to the first directory holding pyproject.toml.

    Returns ``start`` itself when no parent has one.
    """
    for path in [start, *start.parents]:
        if (path / "pyproject.toml").exists():
            return path
    return start


def _load_yaml_section(config_path: Path) -> dict[str, Any]:
    import yaml

    if not config_path.exists():
        return {}
    try:
        document = yaml.safe_load(config_path.read_text()) or {}
    except (OSError, yaml.YAMLError) as exc:
        logger.warning("Ignoring unreadable config file %s: %s", config_path, exc)
        return {}
    section = document.get(CONFIG_SECTION, {}) if isinstance(document, dict) else {}
    return section if isinstance(section, dict) else {}


def _env_overrides() -> dict[str, Any]:
    overrides: dict[str, Any] = {}
    for name in RuntimeSettings.model_fields:
        value = os.environ.get(f"{ENV_PREFIX}{name.upper()}")
        if value is not None and value != "":
            overrides[name] = value
    timeout = overrides.get("regex_timeout")
    if isinstance(timeout, str) and timeout.lower() in {"none", "off", "0"}:
        overrides["regex_timeout"] = None
    return overrides


def load_settings(
    *,
    env_file: Path | None = None,
    config_path: Path | None = None,
) -> RuntimeSettings:
    """Load runtime settings from config file and environment.

    Args:
        env_file: Optional ``.env`` file. Defaults to ``.env`` in the project
            root (the directory containing pyproject.toml) or the current
            working directory. Variables already set in the environment win.
        config_path: Optional YAML file. Defaults to ``config/config.yaml``
            in the project root.

    Returns:
        The merged settings.

    Raises:
        pydantic.ValidationError: If a configured value has the wrong type.

    Example:
        >>> settings = load_settings()
        >>> settings.on_error
        'abort'
    """
    project_root = _find_project_root(Path.cwd())
    load_dotenv(env_file or project_root / ".env", override=False)

    if config_path is None:
        config_path = project_root / "config" / "config.yaml"

    values: dict[str, Any] = {}
    values.update(_load_yaml_section(config_path))
    values.update(_env_overrides())
    return RuntimeSettings.model_validate(values)


__all__ = ["RuntimeSettings", "load_settings"]
