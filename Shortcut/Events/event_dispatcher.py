"""
Observer used by the record store to announce reloads.
Subscriptions are (event_name -> list of callables), guarded by a lock.
"""
from threading import Lock
from typing import Callable, Dict, List
import logging

logger = logging.getLogger(__name__)

RECORDS_RELOADED = "records_reloaded"
RECORDS_LOAD_FAILED = "records_load_failed"


class EventDispatcher:
    def __init__(self):
        self._listeners: Dict[str, List[Callable[..., None]]] = {}
        self._lock = Lock()

    def subscribe(self, event_name: str, callback: Callable[..., None]) -> None:
        with self._lock:
            self._listeners.setdefault(event_name, []).append(callback)

    def unsubscribe(self, event_name: str, callback: Callable[..., None]) -> None:
        with self._lock:
            callbacks = self._listeners.get(event_name, [])
            if callback in callbacks:
                callbacks.remove(callback)

    def dispatch(self, event_name: str, **kwargs) -> int:
        """Call every listener of `event_name`; returns how many of them succeeded."""
        with self._lock:
            listeners = list(self._listeners.get(event_name, []))
        delivered = 0
        for listener in listeners:
            try:
                listener(**kwargs)
                delivered += 1
            except Exception:
                logger.exception("Listener for %s failed", event_name)
        return delivered
