"""Config settings – Settings base class."""
from __future__ import annotations

import dataclasses
from typing import ClassVar


@dataclasses.dataclass
class Settings:
    """Base class for settings read from ``<_prefix>_<FIELD>`` variables.

    :class:`~edge_messaging.config.settings.messaging.MessagingSettings`
    uses ``_prefix = "MESSAGING"``, so ``log_level`` is read from
    ``MESSAGING_LOG_LEVEL``.  Subclasses check field values in
    :meth:`_validate` and raise
    :class:`~edge_messaging.config.validation.InvalidSettingValueError`.
    """

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    @classmethod
    def env_key(cls, field_name: str) -> str:
        return f"{cls._prefix}_{field_name}".upper().lstrip("_")

    def _validate(self) -> None:
        """Hook run after construction; no checks by default."""


__all__ = ["Settings"]
