from __future__ import annotations

import os
from enum import Enum
from pathlib import Path

from envro.errors import FileUnreadableError, InvalidEnvFileError, ParseError
from envro.parser import parse
from envro.store import EnvironmentStore, ProcessEnvironment


class InjectionPolicy(Enum):
    OVERRIDE = "override"
    PRESERVE = "preserve"

    @classmethod
    def from_name(cls, name: str) -> "InjectionPolicy":
        normalized = str(name).strip().lower()
        for policy in cls:
            if policy.value == normalized:
                return policy
        allowed = ", ".join(policy.value for policy in cls)
        raise ValueError(f"Unknown injection policy '{name}'. Expected one of: {allowed}")


def load(path: Path | str) -> dict[str, str]:
    """Read and parse a .env file without touching the environment."""
    display = os.fspath(path)
    try:
        content = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise FileUnreadableError(display, exc) from exc

    try:
        return parse(content)
    except ParseError as exc:
        raise InvalidEnvFileError(display, exc.line) from exc


def apply(
    table: dict[str, str],
    policy: InjectionPolicy,
    store: EnvironmentStore,
) -> dict[str, str]:
    """Write ``table`` into ``store`` and return the entries actually written.

    With ``PRESERVE`` an existing non-empty value wins over the loaded one.
    """
    written: dict[str, str] = {}
    for key, value in table.items():
        if policy is InjectionPolicy.PRESERVE and store.get(key):
            continue
        store.set(key, value)
        written[key] = value
    return written


def load_into(
    path: Path | str,
    policy: InjectionPolicy = InjectionPolicy.OVERRIDE,
    store: EnvironmentStore | None = None,
) -> None:
    table = load(path)
    apply(table, policy, store if store is not None else ProcessEnvironment())
