"""Account path helpers."""

ACCOUNT_SEPARATOR = ":"


def account_segments(account: str) -> tuple[str, ...]:
    """Split an account path into its colon-delimited segments.

    Args:
        account: Account path such as ``expenses:groceries``.

    Returns:
        tuple[str, ...]: Segments in path order.
    """
    return tuple(account.split(ACCOUNT_SEPARATOR))


def truncate_account(account: str, depth: int | None) -> str:
    """Keep at most ``depth`` leading segments of an account path.

    Args:
        account: Account path to truncate.
        depth: Number of segments to keep; None keeps the full path.

    Returns:
        str: Truncated account path.

    Raises:
        ValueError: If depth is smaller than 1.
    """
    if depth is None:
        return account
    if depth < 1:
        raise ValueError(f"Account depth must be at least 1, got {depth}")
    return ACCOUNT_SEPARATOR.join(account_segments(account)[:depth])


__all__ = ["ACCOUNT_SEPARATOR", "account_segments", "truncate_account"]
