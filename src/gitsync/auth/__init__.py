"""Auth module public exports."""

from gitsync.auth.base import TokenResolver, check_token_format, is_token_format_valid
from gitsync.auth.factory import create_token_resolver
from gitsync.auth.session import AuthSession

__all__ = ["AuthSession", "TokenResolver", "check_token_format", "create_token_resolver", "is_token_format_valid"]
