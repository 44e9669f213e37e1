"""Reading editor JSON files, which may contain comments and trailing commas."""

from __future__ import annotations

import json
from typing import Any


def _skip_string(text: str, start: int, out: list[str]) -> int:
    """Copy the string literal opening at *start* into *out*; return the index after it."""
    i = start + 1
    out.append('"')
    while i < len(text):
        char = text[i]
        out.append(char)
        if char == "\\" and i + 1 < len(text):
            out.append(text[i + 1])
            i += 2
            continue
        i += 1
        if char == '"':
            break
    return i


def strip_comments(text: str) -> str:
    out: list[str] = []
    i = 0
    while i < len(text):
        if text[i] == '"':
            i = _skip_string(text, i, out)
        elif text.startswith("//", i):
            end = text.find("\n", i)
            i = len(text) if end == -1 else end
        elif text.startswith("/*", i):
            end = text.find("*/", i + 2)
            i = len(text) if end == -1 else end + 2
        else:
            out.append(text[i])
            i += 1
    return "".join(out)


def strip_trailing_commas(text: str) -> str:
    out: list[str] = []
    i = 0
    while i < len(text):
        char = text[i]
        if char == '"':
            i = _skip_string(text, i, out)
            continue
        if char == ",":
            j = i + 1
            while j < len(text) and text[j].isspace():
                j += 1
            if j < len(text) and text[j] in "}]":
                i += 1
                continue
        out.append(char)
        i += 1
    return "".join(out)


def loads_jsonc(text: str) -> Any:
    """Parse JSON with ``//`` / ``/* */`` comments and trailing commas.

    Returns ``None`` for a file that is empty once comments are removed.

    Raises:
        json.JSONDecodeError: If the remaining text is not valid JSON.
    """
    cleaned = strip_trailing_commas(strip_comments(text))
    if not cleaned.strip():
        return None
    return json.loads(cleaned)
