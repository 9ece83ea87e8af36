"""Observability – JsonLoggerFactory."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import structlog

if TYPE_CHECKING:
    from optionkit.config.settings.logging import LoggingSettings


class JsonLoggerFactory:
    """Configure structlog on top of the stdlib root logger."""

    @staticmethod
    def configure(level: int = logging.INFO, *, json: bool = True) -> None:
        shared_processors: list[Any] = [
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
        ]
        structlog.configure(
            processors=shared_processors + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )
        renderer: Any = structlog.processors.JSONRenderer() if json else structlog.dev.ConsoleRenderer()
        formatter = structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
        )
        handler = logging.StreamHandler()
        handler.setFormatter(formatter)
        root = logging.getLogger()
        root.handlers.clear()
        root.addHandler(handler)
        root.setLevel(level)

    @classmethod
    def configure_from_settings(cls, settings: LoggingSettings | None = None) -> None:
        """Apply *settings*, loading them from ``OPTIONKIT_LOG_*`` env vars when omitted."""
        from optionkit.config.settings.loaders import EnvSettingsLoader
        from optionkit.config.settings.logging import LoggingSettings

        if settings is None:
            settings = EnvSettingsLoader().load(LoggingSettings)
        cls.configure(settings.numeric_level, json=settings.json)


__all__ = ["JsonLoggerFactory"]
