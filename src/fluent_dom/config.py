"""Project-level configuration loaded from ``pyproject.toml``.

Settings live under the ``[tool.fluent-dom]`` table::

    [tool.fluent-dom]
    fail-fast = true
    ignore-comments = false
    element-identifier = "component"
"""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path

from pydantic import BaseModel, ConfigDict, ValidationError

from fluent_dom.errors import ConfigError

logger = logging.getLogger(__name__)

PYPROJECT = "pyproject.toml"
TOOL_TABLE = "fluent-dom"


def _kebab(name: str) -> str:
    return name.replace("_", "-")


class FluentDomConfig(BaseModel):
    """Runtime settings.

    Attributes:
        fail_fast: Raise on the first failed assertion even inside an
            assertion scope.
        ignore_comments: Skip HTML comments when comparing markup.
        element_identifier: Name used for the subject in element failure
            messages when no scope or explicit identifier provides one.
    """

    model_config = ConfigDict(
        alias_generator=_kebab,
        populate_by_name=True,
        extra="forbid",
        frozen=True,
    )

    fail_fast: bool = False
    ignore_comments: bool = True
    element_identifier: str = "element"


def find_pyproject(start: Path | None = None) -> Path | None:
    """Return the nearest ``pyproject.toml`` at or above ``start``."""
    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / PYPROJECT
        if candidate.is_file():
            return candidate
    return None


def load_config(start: Path | None = None) -> FluentDomConfig:
    """Load configuration from the nearest ``pyproject.toml``.

    Missing files or a missing ``[tool.fluent-dom]`` table yield defaults.

    Raises:
        ConfigError: If the file is not valid TOML or the table does not
            validate.
    """
    path = find_pyproject(start)
    if path is None:
        return FluentDomConfig()

    try:
        with path.open("rb") as fh:
            data = tomllib.load(fh)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(path, exc) from exc

    table = data.get("tool", {}).get(TOOL_TABLE)
    if table is None:
        return FluentDomConfig()

    try:
        config = FluentDomConfig.model_validate(table)
    except ValidationError as exc:
        raise ConfigError(path, exc) from exc

    logger.debug("Loaded fluent-dom config from %s: %s", path, config)
    return config


_config: FluentDomConfig | None = None


def get_config() -> FluentDomConfig:
    """Return the process-wide configuration, loading it on first use."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def set_config(config: FluentDomConfig | None) -> None:
    """Replace the process-wide configuration (``None`` reloads lazily)."""
    global _config
    _config = config


__all__ = ["FluentDomConfig", "find_pyproject", "get_config", "load_config", "set_config"]
