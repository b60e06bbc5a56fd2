"""Testing fakes – StaticHostApplication."""
from __future__ import annotations


class StaticHostApplication:
    def __init__(self, bundle_id: str | None = "com.example.app") -> None:
        self._bundle_id = bundle_id

    def bundle_identifier(self) -> str | None:
        return self._bundle_id


__all__ = ["StaticHostApplication"]
