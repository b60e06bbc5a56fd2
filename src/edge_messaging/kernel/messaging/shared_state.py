"""Kernel messaging – shared state snapshots published by other extensions."""
from __future__ import annotations

import dataclasses
import enum
from typing import Any, Mapping


class SharedStateStatus(enum.StrEnum):
    """Resolution status of a shared state snapshot.

    ``PENDING`` means the owner will publish later and dependants must wait;
    ``NONE`` means the owner has nothing to publish.
    """

    PENDING = "pending"
    SET = "set"
    NONE = "none"


@dataclasses.dataclass(frozen=True)
class SharedStateSnapshot:
    """Versioned key-value publication from one extension."""

    data: Mapping[str, Any] = dataclasses.field(default_factory=dict)
    status: SharedStateStatus = SharedStateStatus.SET
    version: int = 0

    @property
    def is_set(self) -> bool:
        return self.status is SharedStateStatus.SET


__all__ = ["SharedStateSnapshot", "SharedStateStatus"]
