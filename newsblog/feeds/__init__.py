from .base import BaseNewsClient
from .newsapi import NewsApiClient
from .models import Article, NewsApiResponse, Source
from .errors import NewsApiError, NewsApiStatusError, NewsApiTransportError

__all__ = [
    "BaseNewsClient",
    "NewsApiClient",
    "Article",
    "NewsApiResponse",
    "Source",
    "NewsApiError",
    "NewsApiStatusError",
    "NewsApiTransportError",
]
