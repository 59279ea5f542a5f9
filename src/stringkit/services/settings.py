"""Settings dataclass, persistence helpers and the process-wide active settings."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import asdict, dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Mapping

from ..errors import ConfigurationError

__all__ = [
    "Settings",
    "SettingsStore",
    "GRANULARITY_CHOICES",
    "DEFAULT_GRANULARITY",
    "get_settings",
    "configure",
    "reset_settings",
]

LOGGER = logging.getLogger(__name__)
_SETTINGS_DIR = Path.home() / ".stringkit"
_DEFAULT_SETTINGS_PATH = _SETTINGS_DIR / "settings.json"
_SETTINGS_VERSION = 1
_ENV_OVERRIDES: Mapping[str, str] = {
    "STRINGKIT_GRANULARITY": "granularity",
    "STRINGKIT_LOG_LEVEL": "log_level",
}
_BOOL_ENV_OVERRIDES: Mapping[str, str] = {
    "STRINGKIT_DEBUG_LOGGING": "debug_logging",
}
_TRUE_VALUES = {"1", "true", "yes", "on", "debug"}
_LOG_LEVELS: tuple[str, ...] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
DEFAULT_GRANULARITY = "grapheme"
GRANULARITY_CHOICES: tuple[str, ...] = ("grapheme", "code_point")


@dataclass(slots=True)
class Settings:
    """Library-wide defaults."""

    granularity: str = DEFAULT_GRANULARITY
    debug_logging: bool = False
    log_level: str = "WARNING"


class SettingsStore:
    """Persistence adapter for :class:`Settings`."""

    def __init__(self, path: Path | None = None) -> None:
        self._path = path or _DEFAULT_SETTINGS_PATH

    @property
    def path(self) -> Path:
        """Return the resolved path backing this store."""

        return self._path

    def load(self, *, overrides: Mapping[str, Any] | None = None) -> Settings:
        """Load settings from disk, applying caller/environment overrides when present."""

        payload = self._read_payload()
        settings = Settings(**_filter_fields(payload))
        settings = self._apply_env_overrides(settings)
        if overrides:
            settings = self._apply_overrides(settings, overrides, source="caller")
        return _validated(settings)

    def save(self, settings: Settings) -> Path:
        """Persist ``settings`` as JSON and return the written path."""

        data = _validated(settings)
        payload = asdict(data)
        payload["_version"] = _SETTINGS_VERSION
        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self._path.with_suffix(".tmp")
        tmp_path.write_text(json.dumps(payload, indent=2, sort_keys=True), encoding="utf-8")
        tmp_path.replace(self._path)
        return self._path

    def _read_payload(self) -> Dict[str, Any]:
        if not self._path.exists():
            return {}
        try:
            payload = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            LOGGER.warning("Failed to read settings from %s: %s", self._path, exc)
            return {}
        if not isinstance(payload, dict):
            LOGGER.warning("Ignoring settings file %s: expected a JSON object", self._path)
            return {}
        return payload

    def _apply_overrides(
        self,
        settings: Settings,
        overrides: Mapping[str, Any],
        *,
        source: str,
    ) -> Settings:
        known = {item.name for item in fields(Settings)}
        updates: Dict[str, Any] = {}
        for key, value in overrides.items():
            if key not in known:
                LOGGER.debug("Ignoring unknown %s override %s", source, key)
                continue
            if value is None:
                continue
            updates[key] = value
        if not updates:
            return settings
        return replace(settings, **updates)

    def _apply_env_overrides(self, settings: Settings) -> Settings:
        overrides: Dict[str, Any] = {}
        for env_name, field_name in _ENV_OVERRIDES.items():
            value = os.environ.get(env_name)
            if value:
                overrides[field_name] = value.strip()
        for env_name, field_name in _BOOL_ENV_OVERRIDES.items():
            value = os.environ.get(env_name)
            if value is not None:
                overrides[field_name] = value.strip().lower() in _TRUE_VALUES
        if overrides:
            settings = self._apply_overrides(settings, overrides, source="environment")
        return settings


_ACTIVE: Settings | None = None


def get_settings() -> Settings:
    """Return the active settings, loading defaults plus environment overrides on first use."""

    global _ACTIVE
    if _ACTIVE is None:
        _ACTIVE = SettingsStore()._apply_env_overrides(Settings())
        _ACTIVE = _validated(_ACTIVE)
    return _ACTIVE


def configure(settings: Settings | None = None, **overrides: Any) -> Settings:
    """Install ``settings`` (or the current settings updated by ``overrides``) as active."""

    global _ACTIVE
    base = settings if settings is not None else get_settings()
    if overrides:
        base = SettingsStore()._apply_overrides(base, overrides, source="caller")
    _ACTIVE = _validated(base)
    package_logger = logging.getLogger("stringkit")
    package_logger.setLevel(logging.DEBUG if _ACTIVE.debug_logging else _ACTIVE.log_level)
    return _ACTIVE


def reset_settings() -> None:
    """Drop the active settings so the next :func:`get_settings` call reloads them."""

    global _ACTIVE
    _ACTIVE = None


def _validated(settings: Settings) -> Settings:
    granularity = str(settings.granularity).strip().lower().replace("-", "_")
    if granularity not in GRANULARITY_CHOICES:
        raise ConfigurationError(
            message=f"Unknown granularity {settings.granularity!r}",
            suggestion=f"Use one of: {', '.join(GRANULARITY_CHOICES)}",
            setting="granularity",
            value=settings.granularity,
        )
    log_level = str(settings.log_level).strip().upper()
    if log_level not in _LOG_LEVELS:
        raise ConfigurationError(
            message=f"Unknown log level {settings.log_level!r}",
            suggestion=f"Use one of: {', '.join(_LOG_LEVELS)}",
            setting="log_level",
            value=settings.log_level,
        )
    return replace(
        settings,
        granularity=granularity,
        log_level=log_level,
        debug_logging=bool(settings.debug_logging),
    )


def _filter_fields(payload: Mapping[str, Any]) -> Dict[str, Any]:
    allowed = {item.name for item in fields(Settings)}
    return {key: value for key, value in payload.items() if key in allowed}
