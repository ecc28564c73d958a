from threading import Lock
from typing import Callable, Generic, List, TypeVar

from newsblog.utils.logging import get_logger

logger = get_logger(__name__)

S = TypeVar("S")
Listener = Callable[[S], None]


class Observable(Generic[S]):
    """Holds state listeners and fans out snapshots after each change."""

    def __init__(self):
        self._listeners: List[Listener] = []
        self._listeners_lock = Lock()

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        with self._listeners_lock:
            self._listeners.append(listener)

        def unsubscribe() -> None:
            with self._listeners_lock:
                if listener in self._listeners:
                    self._listeners.remove(listener)

        return unsubscribe

    def _notify(self, snapshot: S) -> None:
        with self._listeners_lock:
            listeners = list(self._listeners)
        for listener in listeners:
            try:
                listener(snapshot)
            except Exception:
                # a broken listener must not break the fetch lifecycle
                logger.exception("State listener %r failed", listener)
