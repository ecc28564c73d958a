from abc import ABC, abstractmethod
from typing import List, Optional

from newsblog.feeds.models import Article, NewsApiResponse


class BaseNewsClient(ABC):
    @abstractmethod
    def top_headlines(self, category: Optional[str] = None, page: Optional[int] = None) -> NewsApiResponse:
        pass

    @abstractmethod
    def everything(self, query: str, page: Optional[int] = None) -> NewsApiResponse:
        pass

    def fetch_articles(self, category: str, query: str = "", page: int = 1) -> List[Article]:
        """Full-text search when a query is given, category headlines otherwise."""
        if query:
            return self.everything(query, page=page).articles
        return self.top_headlines(category, page=page).articles
