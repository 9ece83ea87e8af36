"""Config settings – LoggingSettings."""
from __future__ import annotations

import dataclasses
import logging

from optionkit.config.settings.base import Settings
from optionkit.config.validation import InvalidSettingValueError

_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET")


@dataclasses.dataclass
class LoggingSettings(Settings):
    """Logging configuration, read from ``OPTIONKIT_LOG_LEVEL`` / ``OPTIONKIT_LOG_JSON``."""

    _prefix: dataclasses.ClassVar[str] = "OPTIONKIT_LOG"

    level: str = "INFO"
    json: bool = True

    def _validate(self) -> None:
        self.level = self.level.upper()
        if self.level not in _LEVELS:
            raise InvalidSettingValueError("level", self.level, f"expected one of {', '.join(_LEVELS)}")

    @property
    def numeric_level(self) -> int:
        return logging.getLevelName(self.level)


__all__ = ["LoggingSettings"]
