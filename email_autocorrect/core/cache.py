"""
In-memory memo of correction results

Entries live until the whole cache is cleared; there is no per-entry expiry
and nothing is persisted. A single lock guards insert and clear so the
cache can be shared by threads.
"""

import threading
from typing import Any, Hashable, Optional, Tuple

from email_autocorrect.utils.logging import get_logger

logger = get_logger(__name__)

_MISSING = object()


class CorrectionCache:
    """Maps a correction request key to its Suggestion (or None)."""

    def __init__(self):
        self._entries = {}
        self._lock = threading.Lock()
        self.hits = 0
        self.misses = 0

    def lookup(self, key: Hashable) -> Tuple[bool, Optional[Any]]:
        """
        Returns:
            (found, value): ``found`` distinguishes a cached None from a miss
        """
        with self._lock:
            value = self._entries.get(key, _MISSING)
            if value is _MISSING:
                self.misses += 1
                return False, None
            self.hits += 1
            return True, value

    def store(self, key: Hashable, value: Optional[Any]) -> None:
        with self._lock:
            self._entries[key] = value

    def clear(self) -> None:
        with self._lock:
            count = len(self._entries)
            self._entries.clear()
            self.hits = 0
            self.misses = 0
        logger.debug(f"Correction cache cleared ({count} entries)")

    def __len__(self):
        return len(self._entries)
