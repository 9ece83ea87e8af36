"""Config settings – Settings base class."""
from __future__ import annotations

import dataclasses


@dataclasses.dataclass
class Settings:
    """Dataclass whose fields are read from ``<_prefix>_<FIELD>`` env vars.

    Subclasses override :meth:`_validate` to check or normalise field
    values; it runs on every construction.
    """

    _prefix: dataclasses.ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        pass

    @classmethod
    def env_key(cls, field_name: str) -> str:
        """Environment variable holding *field_name*, e.g. ``OPTIONKIT_LOG_LEVEL``."""
        return f"{cls._prefix}_{field_name}".upper().lstrip("_")


__all__ = ["Settings"]
