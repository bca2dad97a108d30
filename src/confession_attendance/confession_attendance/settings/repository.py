from __future__ import annotations

from typing import Mapping, Protocol


class SettingsRepository(Protocol):
    def read_all(self) -> Mapping[str, str]:
        """Raw key/value pairs as stored."""

        raise NotImplementedError
