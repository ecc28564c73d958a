import re
from threading import Lock
from typing import Literal, Optional

from pydantic import BaseModel

from newsblog.feeds.base import BaseNewsClient
from newsblog.feeds.errors import NewsApiError
from newsblog.feeds.models import Article
from newsblog.reader.observable import Observable
from newsblog.utils.logging import get_logger

logger = get_logger(__name__)

LOAD_ERROR_MESSAGE = "Failed to load article. Please try again later."

DetailStatus = Literal["loading", "error", "not_found", "loaded"]

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


class DetailViewState(BaseModel):
    status: DetailStatus = "loading"
    article_id: str = ""
    index: Optional[int] = None
    article: Optional[Article] = None
    error: Optional[str] = None


def parse_article_id(article_id: str) -> Optional[int]:
    """Reads the leading decimal integer of a route id ("2", "2-foo"); None if there is none."""
    match = _LEADING_INT.match(article_id or "")
    return int(match.group(1)) if match else None


class DetailViewController(Observable[DetailViewState]):
    """
    Resolves `/article/{id}` by refetching the unfiltered top headlines and
    taking the entry at position `id`, falling back to the first entry.

    The id is only a position in whatever batch the API returns right now, so
    the same id can point at a different article on a later request.
    """

    def __init__(self, client: BaseNewsClient):
        super().__init__()
        self.client = client
        self._state = DetailViewState()
        self._lock = Lock()

    @property
    def state(self) -> DetailViewState:
        with self._lock:
            return self._state.model_copy()

    def load(self, article_id: str) -> DetailViewState:
        self._set(DetailViewState(status="loading", article_id=article_id))

        try:
            batch = self.client.top_headlines().articles
        except NewsApiError as e:
            logger.warning("Could not load headlines for article %s: %s", article_id, e)
            return self._set(DetailViewState(status="error", article_id=article_id, error=LOAD_ERROR_MESSAGE))

        index = parse_article_id(article_id)
        if index is None or index < 0 or index >= len(batch):
            index = 0
        if not batch:
            return self._set(DetailViewState(status="not_found", article_id=article_id))
        return self._set(DetailViewState(status="loaded", article_id=article_id, index=index, article=batch[index]))

    def _set(self, state: DetailViewState) -> DetailViewState:
        with self._lock:
            self._state = state
        self._notify(state)
        return state
