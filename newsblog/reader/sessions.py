import uuid
from collections import OrderedDict
from threading import Lock
from typing import Callable, Optional, Tuple

from newsblog.reader.list_view import ListViewController
from newsblog.utils.logging import get_logger

logger = get_logger(__name__)

_MAX_SESSIONS = 500  # least recently used sessions are dropped past this


class SessionRegistry:
    """In-memory list-view controllers, one per browser session, evicted LRU."""

    def __init__(self, factory: Callable[[], ListViewController], max_sessions: int = _MAX_SESSIONS):
        self.factory = factory
        self.max_sessions = max_sessions
        self._controllers: "OrderedDict[str, ListViewController]" = OrderedDict()
        self._lock = Lock()

    def __len__(self) -> int:
        return len(self._controllers)

    def __contains__(self, session_id: str) -> bool:
        return session_id in self._controllers

    def get_or_create(self, session_id: Optional[str]) -> Tuple[str, ListViewController]:
        """Returns the session's controller, minting a new session id when needed."""
        with self._lock:
            if session_id and session_id in self._controllers:
                self._controllers.move_to_end(session_id)
                return session_id, self._controllers[session_id]

            session_id = uuid.uuid4().hex
            controller = self.factory()
            self._controllers[session_id] = controller
            self._prune()
            return session_id, controller

    def _prune(self):
        while len(self._controllers) > self.max_sessions:
            evicted, _ = self._controllers.popitem(last=False)
            logger.debug("Evicted session %s", evicted)
