from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from envro.loader import InjectionPolicy

DEFAULT_SETTINGS_PATH = Path("envro.yaml")
_ALLOWED_KEYS = {"policy", "files"}


@dataclass
class LoaderSettings:
    policy: InjectionPolicy = InjectionPolicy.OVERRIDE
    files: list[Path] = field(default_factory=lambda: [Path(".env")])


def _read_settings_yaml(path: Path) -> dict[str, Any]:
    try:
        payload = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except (OSError, UnicodeDecodeError, yaml.YAMLError) as exc:
        raise ValueError(f"Invalid settings file {path}: {exc}") from exc
    if not isinstance(payload, dict):
        raise ValueError(f"Settings file must contain a YAML object: {path}")
    return payload


def _normalize_settings(payload: dict[str, Any], base_dir: Path) -> LoaderSettings:
    unknown = set(payload) - _ALLOWED_KEYS
    if unknown:
        raise ValueError(f"Unknown keys in settings: {sorted(unknown)}")

    policy = InjectionPolicy.from_name(payload.get("policy", InjectionPolicy.OVERRIDE.value))

    raw_files = payload.get("files", [".env"])
    if not isinstance(raw_files, list) or not all(isinstance(item, str) and item for item in raw_files):
        raise ValueError("settings.files must be a list of file paths")

    files = []
    for item in raw_files:
        candidate = Path(item).expanduser()
        files.append(candidate if candidate.is_absolute() else base_dir / candidate)
    return LoaderSettings(policy=policy, files=files)


def load_settings(path: Path | None = None) -> LoaderSettings:
    settings_path = path or DEFAULT_SETTINGS_PATH
    if not settings_path.exists():
        return LoaderSettings()

    payload = _read_settings_yaml(settings_path)
    return _normalize_settings(payload, base_dir=settings_path.parent)
