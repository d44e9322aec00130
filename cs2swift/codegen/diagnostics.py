"""
Diagnostic aggregation for the transpiler.

Collects the C# constructs that could not be translated faithfully. Each
distinct message is counted rather than stored per occurrence, and the
summary printed at the end of a run lists messages by how often they
occurred, so the most common gaps come first.
"""

import threading
from typing import Dict, List, Tuple

from .. import console


class TranspilerDiagnostics:
    """
    Counts translation shortfalls by exact message for the whole run.

    Usage:
        diag = TranspilerDiagnostics()
        diag.error("Abstract methods are not supported")
        # ... after transpilation ...
        diag.print_summary()

    Counts are never reset during a run. Mutation is lock-guarded so that
    declarations can be rendered from worker threads.
    """

    def __init__(self):
        self._counts: Dict[str, int] = {}
        self._lock = threading.Lock()

    def error(self, message: str) -> None:
        """Record one occurrence of message."""
        with self._lock:
            self._counts[message] = self._counts.get(message, 0) + 1

    @property
    def counts(self) -> Dict[str, int]:
        """Get a copy of the message -> count table."""
        with self._lock:
            return dict(self._counts)

    @property
    def count(self) -> int:
        """Get the total number of recorded occurrences."""
        with self._lock:
            return sum(self._counts.values())

    def __len__(self) -> int:
        with self._lock:
            return len(self._counts)

    def __contains__(self, message: str) -> bool:
        with self._lock:
            return message in self._counts

    def sorted_by_count(self) -> List[Tuple[str, int]]:
        """Get (message, count) pairs, most frequent first.

        Messages with equal counts keep the order they were first seen in.
        """
        with self._lock:
            items = list(self._counts.items())
        return sorted(items, key=lambda kv: kv[1], reverse=True)

    # =========================================================================
    # REPORTING
    # =========================================================================

    def print_summary(self, file=None) -> None:
        """Print every message with its count to stderr (or specified file)."""
        for message, count in self.sorted_by_count():
            console.error(f'{message} ({count}x)', file=file)
