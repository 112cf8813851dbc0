"""
Console reporting for seeding runs.

Status lines go to stdout with a bracketed level prefix; errors go to stderr.
Debug output is only printed when the DEBUG environment variable is set.
"""

import os
import sys

_COLORS = {
    "INFO": "\033[36m",
    "SUCCESS": "\033[32m",
    "WARN": "\033[33m",
    "ERROR": "\033[31m",
    "DEBUG": "\033[90m",
    "PROGRESS": "\033[36m",
}
_RESET = "\033[0m"

BAR_LENGTH = 30


def _use_color(stream) -> bool:
    if os.environ.get("NO_COLOR"):
        return False
    return hasattr(stream, "isatty") and stream.isatty()


def _prefix(level: str, stream) -> str:
    if _use_color(stream):
        return f"{_COLORS[level]}[{level}]{_RESET}"
    return f"[{level}]"


def info(message: str) -> None:
    print(f"{_prefix('INFO', sys.stdout)} {message}")


def success(message: str) -> None:
    print(f"{_prefix('SUCCESS', sys.stdout)} {message}")


def warn(message: str) -> None:
    print(f"{_prefix('WARN', sys.stdout)} {message}")


def error(message: str) -> None:
    print(f"{_prefix('ERROR', sys.stderr)} {message}", file=sys.stderr)


def debug(message: str) -> None:
    if os.environ.get("DEBUG"):
        print(f"{_prefix('DEBUG', sys.stdout)} {message}")


def progress(current: int, total: int, label: str = "") -> None:
    """
    Redraw a single-line progress bar.

    Args:
        current: Items processed so far
        total: Total items (a zero total prints nothing)
        label: Optional label shown after the percentage
    """
    if total <= 0:
        return
    fraction = min(current / total, 1.0)
    filled = int(fraction * BAR_LENGTH)
    bar = "█" * filled + "░" * (BAR_LENGTH - filled)
    suffix = f" ({label})" if label else ""
    sys.stdout.write(f"\r{_prefix('PROGRESS', sys.stdout)} {bar} {int(fraction * 100)}%{suffix}")
    if current >= total:
        sys.stdout.write("\n")
    sys.stdout.flush()


def section(title: str) -> None:
    """Print a banner, matching the run header/summary layout."""
    print("=" * 60)
    print(title)
    print("=" * 60)
