# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Environment-driven settings for the schematype package."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

TELEMETRY_ENV = "SCHEMATYPE_TELEMETRY"
LOG_LEVEL_ENV = "SCHEMATYPE_LOG_LEVEL"

_FALSEY = ("0", "false", "no", "off")


@dataclass(frozen=True)
class Settings:
    """Process-wide knobs that never change validation semantics."""

    telemetry_enabled: bool = True
    log_level: Optional[int] = None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if environ is None else environ

        level_raw = env.get(LOG_LEVEL_ENV, "").strip()
        log_level: Optional[int] = None
        if level_raw:
            if level_raw.isdigit():
                log_level = int(level_raw)
            else:
                resolved = logging.getLevelName(level_raw.upper())
                if not isinstance(resolved, int):
                    raise ConfigurationError(
                        f"Invalid {LOG_LEVEL_ENV} value '{level_raw}'; expected a logging level name"
                    )
                log_level = resolved

        return cls(telemetry_enabled=_telemetry_flag(env), log_level=log_level)

    def apply(self) -> None:
        """Apply the log level (if any) to the package logger."""

        if self.log_level is not None:
            logging.getLogger("schematype").setLevel(self.log_level)


def _telemetry_flag(env: Mapping[str, str]) -> bool:
    return env.get(TELEMETRY_ENV, "1").strip().lower() not in _FALSEY


_SETTINGS: Optional[Settings] = None
_INVALID_SETTINGS_REPORTED = False


def get_settings() -> Settings:
    """Return the cached settings, reading the environment on first use."""

    global _SETTINGS
    if _SETTINGS is None:
        _SETTINGS = Settings.from_env()
        _SETTINGS.apply()
        logger.debug("Loaded settings: %s", _SETTINGS)
    return _SETTINGS


def telemetry_enabled() -> bool:
    """Return whether spans and metrics should be emitted.

    Never raises: invalid settings are reported once at WARNING and the
    telemetry flag is then read on its own.
    """

    global _INVALID_SETTINGS_REPORTED
    try:
        return get_settings().telemetry_enabled
    except ConfigurationError as exc:
        if not _INVALID_SETTINGS_REPORTED:
            logger.warning("Ignoring invalid schematype settings: %s", exc.message)
            _INVALID_SETTINGS_REPORTED = True
        return _telemetry_flag(os.environ)


def reset_settings() -> None:
    """Forget cached settings so the next ``get_settings`` re-reads the environment."""

    global _SETTINGS, _INVALID_SETTINGS_REPORTED
    _SETTINGS = None
    _INVALID_SETTINGS_REPORTED = False


__all__ = [
    "LOG_LEVEL_ENV",
    "Settings",
    "TELEMETRY_ENV",
    "get_settings",
    "reset_settings",
    "telemetry_enabled",
]
