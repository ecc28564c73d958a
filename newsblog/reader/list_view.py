from threading import Lock
from typing import List, Optional, Tuple

from pydantic import BaseModel, Field

from newsblog.feeds.base import BaseNewsClient
from newsblog.feeds.errors import NewsApiStatusError, NewsApiTransportError
from newsblog.feeds.models import Article
from newsblog.reader.observable import Observable
from newsblog.utils.logging import get_logger

logger = get_logger(__name__)

CATEGORIES = [
    "general",
    "business",
    "entertainment",
    "health",
    "science",
    "sports",
    "technology",
]
DEFAULT_CATEGORY = "general"

TRANSPORT_ERROR_MESSAGE = "An error occurred while fetching news"
STATUS_ERROR_MESSAGE = "Failed to fetch news"


class ListViewState(BaseModel):
    articles: List[Article] = Field(default_factory=list)
    loading: bool = False
    error: Optional[str] = None
    search_query: str = ""
    active_category: str = DEFAULT_CATEGORY
    page: int = 1


class ListViewController(Observable[ListViewState]):
    """
    State of one reader's article list: category, search query, page counter,
    and the accumulated articles.

    Page 1 results replace the list, later pages are appended as-is (no dedup).
    A transport failure on page 1 empties the list; an error body leaves it alone.
    Every fetch is tagged with a generation number; a response that arrives
    after a newer fetch was started is dropped.
    """

    def __init__(self, client: BaseNewsClient, category: str = DEFAULT_CATEGORY):
        super().__init__()
        self.client = client
        self._state = ListViewState(active_category=category)
        self._lock = Lock()
        self._generation = 0

    @property
    def state(self) -> ListViewState:
        with self._lock:
            return self._snapshot()

    @property
    def started(self) -> bool:
        """True once any fetch has been issued."""
        return self._generation > 0

    def _snapshot(self) -> ListViewState:
        return self._state.model_copy(update={"articles": list(self._state.articles)})

    def load_category(self, category: str) -> None:
        with self._lock:
            self._state.page = 1
            self._state.search_query = ""
            self._state.active_category = category
            generation, snapshot = self._start()
        self._notify(snapshot)
        self._fetch(generation, category, "", 1)

    def search(self, query: str) -> bool:
        """Runs a full-text search. Blank queries are ignored; returns whether a fetch ran."""
        query = (query or "").strip()
        if not query:
            return False
        with self._lock:
            self._state.page = 1
            self._state.search_query = query
            category = self._state.active_category
            generation, snapshot = self._start()
        self._notify(snapshot)
        self._fetch(generation, category, query, 1)
        return True

    def load_more(self) -> bool:
        """Fetches the next page. Ignored while a request is in flight; returns whether a fetch ran."""
        with self._lock:
            if self._state.loading:
                return False
            self._state.page += 1
            category, query, page = self._state.active_category, self._state.search_query, self._state.page
            generation, snapshot = self._start()
        self._notify(snapshot)
        self._fetch(generation, category, query, page)
        return True

    def _start(self) -> Tuple[int, ListViewState]:
        # caller holds self._lock
        self._generation += 1
        self._state.loading = True
        self._state.error = None
        return self._generation, self._snapshot()

    def _fetch(self, generation: int, category: str, query: str, page: int) -> None:
        articles: Optional[List[Article]] = None
        error: Optional[str] = None
        clear_list = False
        try:
            articles = self.client.fetch_articles(category, query, page)
        except NewsApiStatusError as e:
            error = e.message or STATUS_ERROR_MESSAGE
        except NewsApiTransportError as e:
            logger.warning("Fetch failed (category=%s query=%r page=%s): %s", category, query, page, e)
            error = TRANSPORT_ERROR_MESSAGE
            # no body at all: a first page never shows the previous list
            clear_list = page == 1

        with self._lock:
            if generation != self._generation:
                logger.debug("Dropping stale response (generation %s, latest %s)", generation, self._generation)
                return
            self._state.loading = False
            if articles is None:
                self._state.error = error
                if clear_list:
                    self._state.articles = []
            elif page == 1:
                self._state.articles = list(articles)
            else:
                self._state.articles = self._state.articles + list(articles)
            snapshot = self._snapshot()
        self._notify(snapshot)
