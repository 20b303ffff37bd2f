"""
In-memory shortcut records.

Resolvers read through an immutable `RecordSet` snapshot; `Reload` builds a new
snapshot and swaps the reference, so a reader sees the record set from either
before or after a reload, never a mix.
"""
from threading import Lock
from typing import Iterable, List, Optional, Tuple

from Shortcut.Model.Record import Record
from Shortcut.Exception.ShortcutError import LoadError
from Shortcut.Storage.IRecordSource import IRecordSource
from Shortcut.Events.event_dispatcher import EventDispatcher, RECORDS_RELOADED, RECORDS_LOAD_FAILED

import logging
logger = logging.getLogger(__name__)


class RecordSet:
    def __init__(self, records: Iterable[Record] = (), load_error: Optional[str] = None):
        self.records: Tuple[Record, ...] = tuple(records)
        self.load_error = load_error
        self.default_record: Optional[Record] = next((r for r in self.records if r.is_default), None)

    def match_keyword(self, token: str) -> Optional[Record]:
        """Record bound to `token` as its keyword, ignoring case."""
        t = token.lower()
        return next((r for r in self.records if r.keyword.lower() == t), None)

    def match_keyword_or_name(self, token: str) -> Optional[Record]:
        t = token.lower()
        return next((r for r in self.records if r.keyword.lower() == t or r.name.lower() == t), None)

    def prefix_search(self, partial: str) -> List[Record]:
        p = partial.lower()
        return [r for r in self.records if r.keyword.lower().startswith(p) or r.name.lower().startswith(p)]


class RecordStore:
    def __init__(self, source: IRecordSource, dispatcher: Optional[EventDispatcher] = None, autoload: bool = True):
        self.source = source
        self.dispatcher = dispatcher or EventDispatcher()
        self._lock = Lock()
        self._snapshot = RecordSet()
        if autoload:
            self.Reload()

    def Snapshot(self) -> RecordSet:
        return self._snapshot

    @property
    def load_error(self) -> Optional[str]:
        return self._snapshot.load_error

    @property
    def default_record(self) -> Optional[Record]:
        return self._snapshot.default_record

    def match_keyword(self, token: str) -> Optional[Record]:
        return self._snapshot.match_keyword(token)

    def match_keyword_or_name(self, token: str) -> Optional[Record]:
        return self._snapshot.match_keyword_or_name(token)

    def prefix_search(self, partial: str) -> List[Record]:
        return self._snapshot.prefix_search(partial)

    def GetPath(self) -> str:
        return self.source.GetPath()

    def Reload(self) -> bool:
        """Re-read the source and swap the record set. Failures become the store's load error."""
        with self._lock:
            try:
                snapshot = RecordSet(self.source.Load())
            except LoadError as e:
                logger.error("Cannot load shortcuts from %s: %s", self.source.GetPath(), e.message)
                snapshot = RecordSet(load_error=e.message)
            self._snapshot = snapshot

        if snapshot.load_error:
            self.dispatcher.dispatch(RECORDS_LOAD_FAILED, error=snapshot.load_error)
            return False
        logger.info("Shortcut records reloaded: %d records", len(snapshot.records))
        self.dispatcher.dispatch(RECORDS_RELOADED, count=len(snapshot.records))
        return True
