"""
Single slot holding the last suggestion rows shown to the user.

Every distinct query text advances a generation counter. A delayed resolution
captures the generation when it starts and may only write the slot while that
generation is still current, so a slow fetch for an older query cannot
overwrite rows produced for a newer one.

The rows remember which record produced them; readers ask for the rows of
the record they are showing a search row for.
"""
from threading import Lock
from typing import List, Optional

from Shortcut.Model.Record import Record
from Shortcut.Model.ResolvedResult import ResolvedResult


class SuggestionCache:
    def __init__(self):
        self._lock = Lock()
        self._rows: List[ResolvedResult] = []
        self._owner: Optional[Record] = None
        self._generation = 0
        self._latest_query: Optional[str] = None

    def Observe(self, query: str) -> int:
        """Record `query` as the current query text and return its freshness token."""
        with self._lock:
            if query != self._latest_query:
                self._latest_query = query
                self._generation += 1
            return self._generation

    def IsCurrent(self, token: int) -> bool:
        with self._lock:
            return token == self._generation

    def Rows(self) -> List[ResolvedResult]:
        with self._lock:
            return list(self._rows)

    def RowsFor(self, record: Record) -> List[ResolvedResult]:
        with self._lock:
            if self._owner is None or self._owner != record:
                return []
            return list(self._rows)

    def Commit(self, token: int, rows: List[ResolvedResult], owner: Optional[Record] = None) -> bool:
        with self._lock:
            if token != self._generation:
                return False
            self._rows = list(rows)
            self._owner = owner
            return True

    def Clear(self, token: Optional[int] = None) -> bool:
        """Empty the slot; with a token, only if that token is still current."""
        with self._lock:
            if token is not None and token != self._generation:
                return False
            self._rows = []
            self._owner = None
            return True
