from typing import Any, Dict, Optional

import requests
from pydantic import ValidationError
from requests.adapters import HTTPAdapter

from newsblog.config import DEFAULT_BASE_URL
from newsblog.feeds.base import BaseNewsClient
from newsblog.feeds.errors import NewsApiStatusError, NewsApiTransportError
from newsblog.feeds.models import NewsApiResponse
from newsblog.utils.logging import get_logger

logger = get_logger(__name__)

USER_AGENT = "NewsBlog/1.0 (+https://localhost)"


def build_session() -> requests.Session:
    # Pooled session, no retries: a failed call surfaces to the caller as-is
    session = requests.Session()
    adapter = HTTPAdapter(pool_connections=10, pool_maxsize=20, max_retries=0)
    session.mount("https://", adapter)
    session.mount("http://", adapter)
    session.headers.update({"User-Agent": USER_AGENT})
    return session


class NewsApiClient(BaseNewsClient):
    """Client for the two NewsAPI v2 endpoints the reader needs."""

    TIMEOUT = 10

    def __init__(
        self,
        api_key: Optional[str],
        base_url: str = DEFAULT_BASE_URL,
        country: str = "us",
        timeout: float = TIMEOUT,
        session: Optional[requests.Session] = None,
    ):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.country = country
        self.timeout = timeout
        self.session = session or build_session()

    def top_headlines(self, category: Optional[str] = None, page: Optional[int] = None) -> NewsApiResponse:
        params: Dict[str, Any] = {"country": self.country}
        if category:
            params["category"] = category
        return self._get("top-headlines", params, page)

    def everything(self, query: str, page: Optional[int] = None) -> NewsApiResponse:
        return self._get("everything", {"q": query}, page)

    def _get(self, endpoint: str, params: Dict[str, Any], page: Optional[int]) -> NewsApiResponse:
        params = dict(params)
        params["apiKey"] = self.api_key
        if page is not None:
            params["page"] = page
        url = f"{self.base_url}/{endpoint}"
        logger.debug("GET %s %s", url, {k: v for k, v in params.items() if k != "apiKey"})

        try:
            response = self.session.get(url, params=params, timeout=self.timeout)
        except requests.RequestException as e:
            logger.warning("Request to %s failed: %s", endpoint, e)
            raise NewsApiTransportError(str(e)) from e

        # Error bodies come with 4xx/5xx codes but still carry status/message
        try:
            data = response.json()
        except ValueError as e:
            logger.warning("Non-JSON body from %s (HTTP %s)", endpoint, response.status_code)
            raise NewsApiTransportError(f"invalid JSON from {endpoint} (HTTP {response.status_code})") from e

        if not isinstance(data, dict):
            raise NewsApiTransportError(f"unexpected body from {endpoint}")

        if data.get("status") != "ok":
            logger.warning("%s answered status=%s code=%s: %s", endpoint, data.get("status"), data.get("code"), data.get("message"))
            raise NewsApiStatusError(data.get("message"), data.get("code"), response.status_code)

        if not response.ok:
            raise NewsApiTransportError(f"HTTP {response.status_code} from {endpoint}")

        try:
            return NewsApiResponse.model_validate(data)
        except ValidationError as e:
            logger.warning("Malformed article list from %s: %s", endpoint, e)
            raise NewsApiTransportError(f"malformed response from {endpoint}") from e
