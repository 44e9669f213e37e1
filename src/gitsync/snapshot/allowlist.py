"""Settings namespaces that may be written on import.

Keys outside these namespaces may belong to extensions that are not installed
on this machine, or to nothing at all, and are never applied.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from pydantic import JsonValue

ALLOWED_NAMESPACES: frozenset[str] = frozenset(
    {
        "workbench",
        "editor",
        "files",
        "search",
        "terminal",
        "git",
        "typescript",
        "javascript",
        "html",
        "css",
        "scss",
        "less",
        "json",
        "markdown",
        "python",
        "java",
        "csharp",
        "cpp",
        "go",
        "rust",
        "php",
        "ruby",
        "swift",
        "kotlin",
        "dart",
        "powershell",
        "shell",
        "docker",
        "yaml",
        "xml",
        "sql",
        "graphql",
        "vue",
        "react",
        "angular",
        "svelte",
        "solid",
        "prettier",
        "eslint",
        "bracketPairColorizer",
        "bracketPairColorizer2",
        "indentRainbow",
        "colorHighlight",
        "todoHighlight",
        "bookmarks",
        "pathIntellisense",
        "autoRenameTag",
        "colorize",
        "highlight",
        "trailingSpaces",
        "whitespace",
        "trimTrailingWhitespace",
    }
)


def is_allowed_key(key: str, namespaces: Iterable[str] = ALLOWED_NAMESPACES) -> bool:
    namespace, dot, rest = key.partition(".")
    if not dot or not rest:
        return False
    return namespace in frozenset(namespaces)


def partition_settings(
    settings: Mapping[str, JsonValue],
    namespaces: Iterable[str] = ALLOWED_NAMESPACES,
) -> tuple[dict[str, JsonValue], list[str]]:
    """Split *settings* into the applicable mapping and the list of skipped keys."""
    allowed = frozenset(namespaces)
    applicable: dict[str, JsonValue] = {}
    skipped: list[str] = []
    for key, value in settings.items():
        if is_allowed_key(key, allowed):
            applicable[key] = value
        else:
            skipped.append(key)
    return applicable, skipped


def flatten_settings(settings: Mapping[str, JsonValue]) -> dict[str, JsonValue]:
    """Flatten top-level section objects into dotted keys.

    Only the section level is unfolded: ``{"editor": {"fontSize": 12,
    "quickSuggestions": {"other": "on"}}}`` becomes ``{"editor.fontSize": 12,
    "editor.quickSuggestions": {"other": "on"}}``, since deeper objects are
    setting values. Keys that already contain a dot keep their value verbatim,
    as do language overrides such as ``"[python]"`` and empty sections.
    """
    flat: dict[str, JsonValue] = {}
    for key, value in settings.items():
        if isinstance(value, dict) and value and "." not in key and not key.startswith("["):
            for name, setting in value.items():
                flat[f"{key}.{name}"] = setting
        else:
            flat[key] = value
    return flat
