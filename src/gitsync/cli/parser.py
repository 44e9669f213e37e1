"""CLI parser construction."""

from __future__ import annotations

import argparse
from importlib.metadata import PackageNotFoundError, version

from gitsync.contracts.host import AuthMethod


def _package_version() -> str:
    try:
        return version("gitsync")
    except PackageNotFoundError:
        return "0.0.0"


def _on_off(value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in {"on", "true", "yes", "1"}:
        return True
    if lowered in {"off", "false", "no", "0"}:
        return False
    raise argparse.ArgumentTypeError(f"expected on or off, got {value!r}")


def _common_options() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--config", default=None, help="Path to gitsync.json (default: ~/.cursor-global/gitsync.json)")
    common.add_argument("--workspace", default=None, help="Workspace folder for workspace state and sync config")
    common.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    return common


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="gitsync")
    parser.add_argument("--version", action="version", version=f"%(prog)s {_package_version()}")

    common = _common_options()
    subparsers = parser.add_subparsers(dest="command", required=True)

    setup_parser = subparsers.add_parser("setup", parents=[common], help="Connect to GitHub and pick a settings gist")
    setup_parser.add_argument(
        "--method",
        choices=[method.value for method in AuthMethod],
        default=AuthMethod.TOKEN.value,
        help="How to obtain the GitHub token (default: token)",
    )
    setup_parser.add_argument("--token", default=None, help="Token to use with --method token instead of prompting")

    subparsers.add_parser("export", parents=[common], help="Save the current settings to the gist or locally")
    subparsers.add_parser("import", parents=[common], help="Apply settings from the gist or the local file")
    subparsers.add_parser("sync", parents=[common], help="Export, then import the latest settings")

    prefs_parser = subparsers.add_parser("prefs", parents=[common], help="Show or change extension removal preferences")
    prefs_parser.add_argument("--always-allow", type=_on_off, default=None, metavar="on|off")
    prefs_parser.add_argument("--never-remove", type=_on_off, default=None, metavar="on|off")
    prefs_parser.add_argument("--reset", action="store_true", help="Clear both preferences before applying changes")

    return parser


__all__ = ["build_parser"]
