"""Auth resolver interfaces."""

from __future__ import annotations

import re
from abc import ABC, abstractmethod

from gitsync.contracts.exceptions import InvalidTokenFormatError

_TOKEN_PATTERN = re.compile(r"^(gh[pousr]_[A-Za-z0-9]{20,}|github_pat_[A-Za-z0-9_]{20,})$")


class TokenResolver(ABC):
    @abstractmethod
    async def resolve(self) -> str:
        """Resolve and return an authentication token."""


def is_token_format_valid(token: str) -> bool:
    return bool(_TOKEN_PATTERN.match(token))


def check_token_format(token: str) -> str:
    """Return the stripped token, or raise if it does not look like a GitHub token.

    This is a cheap local check; the identity endpoint decides validity.
    """
    candidate = token.strip()
    if not candidate:
        raise InvalidTokenFormatError("Token is empty")
    if not is_token_format_valid(candidate):
        raise InvalidTokenFormatError(
            "Token does not look like a GitHub token (expected a ghp_, gho_, ghu_ or github_pat_ prefix)"
        )
    return candidate
