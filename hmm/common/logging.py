"""Logging helpers.

Messages are plain prints with bracketed tags, e.g. "[scene] [cache-hit] 好".
"""

import sys


def log_debug(enabled: bool, message: str) -> None:
    """Print a debug message if debugging is enabled."""
    if enabled:
        print(f"[debug] {message}")


def log_warn(message: str) -> None:
    """Print a warning to stderr."""
    print(f"[warn] {message}", file=sys.stderr)


def log_error(message: str) -> None:
    """Print an error to stderr."""
    print(f"[error] {message}", file=sys.stderr)


__all__ = [
    "log_debug",
    "log_warn",
    "log_error",
]
