"""Prefs command: show or change extension removal preferences."""

from __future__ import annotations

import argparse

from gitsync.contracts.config import ExtensionRemovalPreference


def format_preference(preference: ExtensionRemovalPreference) -> str:
    def on_off(value: bool) -> str:
        return "on" if value else "off"

    lines = [
        "",
        "gitsync - extension removal preferences",
        "",
        f"  Always allow:  {on_off(preference.always_allow)}",
        f"  Never remove:  {on_off(preference.never_remove)}",
    ]
    if preference.always_allow and preference.never_remove:
        lines.append("")
        lines.append("  Never remove takes precedence over always allow")
    lines.append("")
    return "\n".join(lines)


def run_prefs(args: argparse.Namespace) -> ExtensionRemovalPreference:
    import gitsync.cli as cli

    settings = cli.load_settings(args.config, workspace=args.workspace)
    app = cli.GitSync.from_settings(settings, prompter=cli.QuestionaryPrompter())

    changing = args.reset or args.always_allow is not None or args.never_remove is not None
    if changing:
        preference = app.update_removal_preference(
            always_allow=args.always_allow,
            never_remove=args.never_remove,
            reset=args.reset,
        )
    else:
        preference = app.removal_preference()

    print(format_preference(preference))
    return preference


__all__ = ["format_preference", "run_prefs"]
