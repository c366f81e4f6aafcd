"""ConfigManager — layered runtime settings and logging setup.

Settings are flat string values merged from, in increasing priority:

1. built-in defaults
2. the environment profile selected by ``INDOORNAV_ENV``
3. ``<project>/.indoornav/config.json``
4. ``<project>/.env``
5. process environment variables
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path

from indoornav import config as constants

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConfigKey:
    name: str
    default: str
    description: str


CONFIG_KEYS: tuple[ConfigKey, ...] = (
    ConfigKey("INDOORNAV_ENV", "development", "Environment profile (development, production, testing)"),
    ConfigKey("INDOORNAV_LOG_LEVEL", "INFO", "Level of the indoornav logger"),
    ConfigKey("INDOORNAV_FLOOR_PLAN", "", "Floor plan JSON file, relative to the project (empty = bundled sample)"),
    ConfigKey(
        "INDOORNAV_WALKING_SPEED",
        str(constants.WALKING_SPEED_UNITS_PER_MINUTE),
        "Walking speed in floor-plan distance units per minute",
    ),
    ConfigKey("INDOORNAV_TIME_FILTERED_ROUTING", "false", "Apply gate and path time rules to every route query"),
)

PROFILES: dict[str, dict[str, str]] = {
    "development": {"INDOORNAV_LOG_LEVEL": "DEBUG"},
    "production": {"INDOORNAV_LOG_LEVEL": "WARNING"},
    "testing": {"INDOORNAV_LOG_LEVEL": "DEBUG", "INDOORNAV_FLOOR_PLAN": ""},
}

_TRUE_VALUES = {"1", "true", "yes", "on"}


def _read_env_file(path: Path) -> dict[str, str]:
    """Parse ``KEY=VALUE`` lines, skipping blanks and ``#`` comments."""
    values: dict[str, str] = {}
    for raw in path.read_text(encoding="utf-8").splitlines():
        line = raw.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, value = line.split("=", 1)
        values[key.strip()] = value.strip()
    return values


class ConfigManager:
    """Resolve indoornav settings for a project directory."""

    def generate_env_template(self, project_path: str | Path) -> Path:
        """Write ``.env.example`` listing every key with its default."""
        target = Path(project_path) / ".env.example"
        blocks = ["# indoornav settings; copy to .env and edit"]
        blocks.extend(f"# {key.description}\n{key.name}={key.default}" for key in CONFIG_KEYS)
        target.write_text("\n\n".join(blocks) + "\n", encoding="utf-8")
        return target

    def load_config(self, project_path: str | Path) -> dict[str, str]:
        """Return the merged settings for *project_path* as a flat dict."""
        root = Path(project_path)
        settings = {key.name: key.default for key in CONFIG_KEYS}

        profile = os.environ.get("INDOORNAV_ENV", settings["INDOORNAV_ENV"])
        settings["INDOORNAV_ENV"] = profile
        settings.update(PROFILES.get(profile, {}))

        settings.update(self._json_layer(root / ".indoornav" / "config.json"))
        settings.update(self._env_file_layer(root / ".env"))

        for key in CONFIG_KEYS:
            if key.name in os.environ:
                settings[key.name] = os.environ[key.name]

        logger.debug("Loaded settings for %s (profile %s)", root, profile)
        return settings

    def _json_layer(self, path: Path) -> dict[str, str]:
        if not path.is_file():
            return {}
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, OSError):
            logger.warning("Ignoring unreadable settings file %s", path, exc_info=True)
            return {}
        return {str(k): str(v) for k, v in data.items()}

    def _env_file_layer(self, path: Path) -> dict[str, str]:
        if not path.is_file():
            return {}
        try:
            return _read_env_file(path)
        except OSError:
            logger.warning("Ignoring unreadable env file %s", path, exc_info=True)
            return {}


def walking_speed(settings: dict[str, str]) -> float:
    """Configured walking speed; the default replaces bad or non-positive values."""
    raw = settings.get("INDOORNAV_WALKING_SPEED", "")
    try:
        value = float(raw)
    except ValueError:
        value = 0.0
    if value <= 0:
        logger.warning("Invalid INDOORNAV_WALKING_SPEED %r, using default", raw)
        return constants.WALKING_SPEED_UNITS_PER_MINUTE
    return value


def time_filtered_routing(settings: dict[str, str]) -> bool:
    return settings.get("INDOORNAV_TIME_FILTERED_ROUTING", "").strip().lower() in _TRUE_VALUES


def configure_logging(level: str | int = "INFO") -> None:
    """Set the level of the package logger; handlers are left to the application."""
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        level = resolved if isinstance(resolved, int) else logging.INFO
    logging.getLogger("indoornav").setLevel(level)
