"""Domain policies package."""

from .accounts import ACCOUNT_SEPARATOR, account_segments, truncate_account

__all__ = ["ACCOUNT_SEPARATOR", "account_segments", "truncate_account"]
