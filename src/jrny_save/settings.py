"""Storage and logging options, read from YAML.

Packaged defaults live in ``jrny_save/config/default_settings.yaml``. A user
file given to ``Settings.load`` or named by ``JRNY_SETTINGS`` is layered on
top, section by section, and ``JRNY_LOG_LEVEL`` wins over both.
"""
from __future__ import annotations

import dataclasses
import logging
import os
from dataclasses import dataclass
from importlib import resources
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from .errors import SettingsError

logger = logging.getLogger(__name__)

ENV_LOG_LEVEL = "JRNY_LOG_LEVEL"
ENV_SETTINGS = "JRNY_SETTINGS"
DEFAULTS_RESOURCE = "default_settings.yaml"

Sections = Dict[str, Dict[str, Any]]


def _parse_sections(text: str, source: str) -> Sections:
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise SettingsError(f"Could not parse settings from {source}: {e}") from e
    if data is None:
        return {}
    if not isinstance(data, dict) or not all(isinstance(v, dict) for v in data.values()):
        raise SettingsError(f"Settings in {source} must map section names to mappings")
    return data


def _layer(base: Sections, overlay: Sections) -> Sections:
    """Overlay one section mapping onto another, key by key inside each section."""
    layered = {name: dict(values) for name, values in base.items()}
    for name, values in overlay.items():
        layered.setdefault(name, {}).update(values)
    return layered


@dataclass
class Settings:
    """Storage and logging options. None of them change the binary layout."""

    backup_on_write: bool = True
    atomic_write: bool = True
    log_level: str = "INFO"

    @classmethod
    def from_sections(cls, sections: Sections) -> "Settings":
        storage = sections.get("storage", {})
        level = sections.get("logging", {}).get("level", cls.log_level)
        return cls(
            backup_on_write=bool(storage.get("backup_on_write", cls.backup_on_write)),
            atomic_write=bool(storage.get("atomic_write", cls.atomic_write)),
            log_level=str(level).upper(),
        )

    def to_sections(self) -> Sections:
        return {
            "storage": {"backup_on_write": self.backup_on_write, "atomic_write": self.atomic_write},
            "logging": {"level": self.log_level},
        }

    @classmethod
    def load(cls, user_path: Union[str, Path, None] = None) -> "Settings":
        """Build settings from the packaged defaults, a user file and the environment."""
        packaged = resources.files("jrny_save.config").joinpath(DEFAULTS_RESOURCE)
        sections = _parse_sections(packaged.read_text(encoding="utf-8"), DEFAULTS_RESOURCE)

        if user_path is None:
            user_path = os.getenv(ENV_SETTINGS) or None
        if user_path is not None:
            user_path = Path(user_path)
            if user_path.is_file():
                sections = _layer(sections, _parse_sections(user_path.read_text(encoding="utf-8"), str(user_path)))
                logger.info("Loaded user settings from %s", user_path)
            else:
                logger.warning("User settings file not found: %s", user_path)

        settings = cls.from_sections(sections)
        env_level = os.getenv(ENV_LOG_LEVEL)
        if env_level:
            settings = dataclasses.replace(settings, log_level=env_level.upper())
        logger.debug("Using settings %s", settings)
        return settings

    def save(self, path: Union[str, Path]) -> None:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(yaml.safe_dump(self.to_sections(), sort_keys=False), encoding="utf-8")
        logger.info("Saved settings to %s", path)
