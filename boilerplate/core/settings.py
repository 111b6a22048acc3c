"""
Application settings: appsettings.json beside the application.

Rules:
- file absent → defaults, silently (None)
- file present but empty → ConfigurationError, before any generation
- appsettings.json parsed with json, appsettings.yaml with yaml.safe_load
"""

import json
import logging
import os
from pathlib import Path
from typing import Any

import yaml

from boilerplate.domain.constants import (
    DEFAULT_TEMPLATES_DIRNAME,
    HOME_ENV_VAR,
    SETTINGS_FILENAMES,
)
from boilerplate.domain.errors import ConfigurationError, ErrorCodes
from boilerplate.domain.schemas import ApplicationSettings

logger = logging.getLogger(__name__)

# boilerplate/ package directory
PACKAGE_DIR = Path(__file__).resolve().parent.parent


def default_base_dir() -> Path:
    """
    Application base directory.

    Priority: $BOILERPLATE_HOME > package directory
    """
    home = os.environ.get(HOME_ENV_VAR)
    if home:
        return Path(home).expanduser().resolve()
    return PACKAGE_DIR


def find_settings_file(base_dir: Path) -> Path | None:
    """First existing settings file in base_dir, or None."""
    for name in SETTINGS_FILENAMES:
        candidate = base_dir / name
        if candidate.is_file():
            return candidate
    return None


def _parse_settings(config_path: Path, text: str) -> Any:
    """.json → json, .yaml → yaml.safe_load."""
    if config_path.suffix == ".json":
        return json.loads(text)
    return yaml.safe_load(text)


def load_application_settings(base_dir: Path | None = None) -> ApplicationSettings | None:
    """
    Load application settings.

    Args:
        base_dir: directory holding the settings file (default: default_base_dir())

    Returns:
        ApplicationSettings, or None when no settings file exists

    Raises:
        ConfigurationError: CONFIG_EMPTY / CONFIG_INVALID
    """
    if base_dir is None:
        base_dir = default_base_dir()

    config_path = find_settings_file(base_dir)
    if config_path is None:
        logger.info("No appsettings.json found. Using defaults.")
        return None

    try:
        text = config_path.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigurationError(
            ErrorCodes.CONFIG_INVALID,
            f"Configuration file is unreadable: {e}",
            path=str(config_path),
        ) from e

    if not text.strip():
        raise ConfigurationError(
            ErrorCodes.CONFIG_EMPTY,
            "Configuration file is empty.",
            path=str(config_path),
        )

    try:
        data: Any = _parse_settings(config_path, text)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise ConfigurationError(
            ErrorCodes.CONFIG_INVALID,
            f"Configuration file is not valid {config_path.suffix.lstrip('.').upper()}: {e}",
            path=str(config_path),
        ) from e

    if not isinstance(data, dict):
        raise ConfigurationError(
            ErrorCodes.CONFIG_INVALID,
            "Configuration file must contain a single object",
            path=str(config_path),
            found=type(data).__name__,
        )

    logger.info("Application settings loaded.")
    return ApplicationSettings.from_dict(data, base_dir=base_dir)


def resolve_templates_root(
    app_settings: ApplicationSettings | None,
    base_dir: Path | None = None,
) -> Path:
    """
    Templates root directory.

    Priority: settings.templatesFolderPath > <base_dir>/templates

    Args:
        app_settings: loaded settings, or None
        base_dir: fallback base directory when app_settings is None

    Returns:
        templates root path (not checked for existence)
    """
    if app_settings is not None and app_settings.templates_folder_path:
        return Path(app_settings.templates_folder_path).expanduser()

    if app_settings is not None:
        base_dir = app_settings.base_dir
    elif base_dir is None:
        base_dir = default_base_dir()

    return base_dir / DEFAULT_TEMPLATES_DIRNAME
