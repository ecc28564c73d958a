# newsblog/tests/conftest.py
from typing import Callable, Dict, List, Optional, Tuple, Union

import pytest

from newsblog.feeds.base import BaseNewsClient
from newsblog.feeds.errors import NewsApiStatusError
from newsblog.feeds.models import NewsApiResponse

Scripted = Union[List[dict], Exception]


def make_article(title: str, **overrides) -> dict:
    article = {
        "source": {"id": None, "name": "Unit Source"},
        "author": "Jane Doe",
        "title": title,
        "description": f"About {title}",
        "url": f"https://example.com/{title.replace(' ', '-').lower()}",
        "urlToImage": None,
        "publishedAt": "2023-07-15T09:30:00Z",
        "content": f"{title} body text [+120 chars]",
    }
    article.update(overrides)
    return article


def make_articles(prefix: str, n: int) -> List[dict]:
    return [make_article(f"{prefix} {i}") for i in range(n)]


class FakeNewsApi(BaseNewsClient):
    """
    Scripted stand-in for the NewsAPI client.

    `pages[(category, query, page)]` holds either a list of raw articles or an
    exception to raise; `headlines` is what the unfiltered top-headlines call
    returns. Every call is recorded in `calls`.
    """

    def __init__(self):
        self.pages: Dict[Tuple[str, str, int], Scripted] = {}
        self.headlines: Scripted = []
        self.calls: List[Tuple] = []
        self.on_fetch: Optional[Callable[[str, str, int], None]] = None

    def _answer(self, scripted: Scripted) -> NewsApiResponse:
        if isinstance(scripted, Exception):
            raise scripted
        return NewsApiResponse.model_validate({"status": "ok", "totalResults": len(scripted), "articles": scripted})

    def top_headlines(self, category=None, page=None):
        self.calls.append(("top-headlines", category, page))
        if category is None:
            return self._answer(self.headlines)
        return self._answer(self.pages.get((category, "", page or 1), []))

    def everything(self, query, page=None):
        self.calls.append(("everything", query, page))
        matches = [v for (c, q, p), v in self.pages.items() if q == query and p == (page or 1)]
        return self._answer(matches[0] if matches else [])

    def fetch_articles(self, category, query="", page=1):
        if self.on_fetch:
            self.on_fetch(category, query, page)
        return super().fetch_articles(category, query, page)


@pytest.fixture()
def fake_api():
    return FakeNewsApi()


@pytest.fixture()
def rate_limited():
    return NewsApiStatusError("rate limited", code="rateLimited", http_status=429)


@pytest.fixture()
def app(monkeypatch, fake_api):
    # Swap the real client for the fake and start from an empty registry
    from newsblog.api import main as api_main
    from newsblog.reader.list_view import ListViewController
    from newsblog.reader.sessions import SessionRegistry

    monkeypatch.setattr(api_main, "client", fake_api, raising=True)
    monkeypatch.setattr(api_main, "sessions", SessionRegistry(lambda: ListViewController(fake_api), max_sessions=10), raising=True)
    return api_main.app


@pytest.fixture()
def client(app):
    from fastapi.testclient import TestClient
    with TestClient(app) as c:
        yield c


@pytest.fixture()
def article_factory():
    return make_article


@pytest.fixture()
def batch_factory():
    return make_articles
