from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from pathlib import Path

from envro.errors import EnvroError
from envro.loader import InjectionPolicy, apply, load
from envro.settings import load_settings
from envro.store import ProcessEnvironment

LOGGER_NAME = "envro"
logger = logging.getLogger(LOGGER_NAME)


def configure_logging(verbose: bool = False) -> None:
    if logger.handlers:
        logger.setLevel(logging.DEBUG if verbose else logging.INFO)
        return
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        logging.Formatter(
            "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="envro", description="Load variables from .env files")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    show_cmd = sub.add_parser("show", help="Print the variables parsed from .env files")
    show_cmd.add_argument("files", nargs="*", default=[".env"], help="Files to read. Defaults to .env")
    show_cmd.add_argument("--json", action="store_true", help="Print a JSON object instead of KEY=VALUE lines")

    apply_cmd = sub.add_parser("apply", help="Load .env files into the process environment")
    apply_cmd.add_argument(
        "files",
        nargs="*",
        default=[],
        help="Files to load, later files overriding earlier ones. Defaults to the settings file entries",
    )
    apply_cmd.add_argument(
        "--policy",
        choices=[policy.value for policy in InjectionPolicy],
        help="Whether loaded values replace existing variables. Defaults to the settings policy",
    )
    apply_cmd.add_argument("--config", help="Path to the YAML settings file (default: envro.yaml)")
    return parser


def _print_table(table: dict[str, str], as_json: bool) -> None:
    if as_json:
        print(json.dumps(table, indent=2))
        return
    for key, value in table.items():
        print(f"{key}={value}")


def run_show(files: list[str], as_json: bool) -> int:
    merged: dict[str, str] = {}
    for file_name in files:
        table = load(file_name)
        logger.debug("Parsed %d variables from %s", len(table), file_name)
        merged.update(table)
    _print_table(merged, as_json)
    return 0


def run_apply(files: list[str], policy_name: str | None, config: str | None) -> int:
    settings = load_settings(Path(config) if config else None)
    policy = InjectionPolicy.from_name(policy_name) if policy_name else settings.policy
    paths = [Path(name) for name in files] if files else settings.files

    # Later files override earlier ones before the policy meets the environment.
    merged: dict[str, str] = {}
    for path in paths:
        table = load(path)
        logger.debug("Parsed %d variables from %s", len(table), path)
        merged.update(table)

    written = apply(merged, policy, ProcessEnvironment())
    logger.info("Applied %s policy (%d of %d variables written)", policy.value, len(written), len(merged))

    for key in merged:
        print(f"{key}={os.environ.get(key, '')}")
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    try:
        if args.command == "show":
            return run_show(args.files, args.json)
        return run_apply(args.files, args.policy, args.config)
    except (EnvroError, ValueError) as exc:
        logger.error("%s", exc)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
