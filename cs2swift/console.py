"""
Console output for the transpiler.

Progress lines go to stdout and error lines to stderr, each prefixed with
the wall-clock time (HH:MM:SS).
"""

import sys
from datetime import datetime


def timestamp() -> str:
    return datetime.now().strftime('%H:%M:%S')


def info(message: str, file=None) -> None:
    """Print a progress line."""
    if file is None:
        file = sys.stdout
    print(f'{timestamp()} {message}', file=file)


def error(message: str, file=None) -> None:
    """Print an error line."""
    if file is None:
        file = sys.stderr
    print(f'{timestamp()} {message}', file=file)
