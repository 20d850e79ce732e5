from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import MutableMapping, Protocol

from envro.errors import StoreWriteError


class EnvironmentStore(Protocol):
    def get(self, key: str) -> str | None:
        ...

    def set(self, key: str, value: str) -> None:
        ...


@dataclass
class ProcessEnvironment:
    environ: MutableMapping[str, str] = field(default_factory=lambda: os.environ)

    def get(self, key: str) -> str | None:
        return self.environ.get(key)

    def set(self, key: str, value: str) -> None:
        # os.environ rejects NUL bytes and some names at the OS boundary.
        try:
            self.environ[key] = value
        except ValueError as exc:
            raise StoreWriteError(key, exc) from exc


@dataclass
class InMemoryEnvironment:
    values: dict[str, str] = field(default_factory=dict)

    def get(self, key: str) -> str | None:
        return self.values.get(key)

    def set(self, key: str, value: str) -> None:
        self.values[key] = value
