import time
from contextlib import asynccontextmanager
from typing import Optional, Tuple

from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import HTMLResponse, JSONResponse, RedirectResponse

from newsblog.components.article_detail import render_article_page
from newsblog.components.home import render_list_page
from newsblog.config import Settings
from newsblog.feeds.newsapi import NewsApiClient
from newsblog.reader.detail_view import DetailViewController
from newsblog.reader.list_view import CATEGORIES, ListViewController
from newsblog.reader.sessions import SessionRegistry
from newsblog.utils.logging import configure_logging, get_logger

logger = get_logger(__name__)

SESSION_COOKIE = "newsblog_session"

# Settings come from .env and the process environment
settings = Settings.from_env()

client = NewsApiClient(
    api_key=settings.newsapi_key,
    base_url=settings.newsapi_base_url,
    country=settings.country,
    timeout=settings.timeout,
)

# One list controller per browser session
sessions = SessionRegistry(lambda: ListViewController(client), max_sessions=settings.max_sessions)


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging(settings.log_level)
    if not settings.newsapi_key:
        logger.warning("NEWSAPI_KEY is not set; every news request will be rejected by the API")
    logger.info("News Blog ready (api=%s, country=%s)", settings.newsapi_base_url, settings.country)
    yield


def _session(request: Request) -> Tuple[str, ListViewController]:
    return sessions.get_or_create(request.cookies.get(SESSION_COOKIE))


def _ensure_started(controller: ListViewController) -> bool:
    """First visit of a session loads the default category, like opening the page."""
    if controller.started:
        return False
    controller.load_category(controller.state.active_category)
    return True


def _with_cookie(resp, session_id: str):
    resp.set_cookie(SESSION_COOKIE, session_id, httponly=True, samesite="lax")
    return resp


def _back_to_list(session_id: str) -> RedirectResponse:
    return _with_cookie(RedirectResponse("/", status_code=303), session_id)


#%% APP

app = FastAPI(lifespan=lifespan)

# A full card grid easily runs to several KB
app.add_middleware(GZipMiddleware, minimum_size=512)


@app.get("/health")
def health():
    return {"status": "ok", "ts": int(time.time())}


@app.get("/", response_class=HTMLResponse)
def list_view(request: Request):
    session_id, controller = _session(request)
    _ensure_started(controller)
    page = render_list_page(controller.state, CATEGORIES, tz_name=settings.display_timezone)
    return _with_cookie(HTMLResponse(page), session_id)


@app.get("/category/{category}")
def select_category(category: str, request: Request):
    if category not in CATEGORIES:
        raise HTTPException(404, "Unknown category")
    session_id, controller = _session(request)
    controller.load_category(category)
    return _back_to_list(session_id)


@app.get("/search")
def search(request: Request, q: Optional[str] = None):
    session_id, controller = _session(request)
    # A blank query issues no request
    if not controller.search(q or ""):
        _ensure_started(controller)
    return _back_to_list(session_id)


@app.get("/load-more")
def load_more(request: Request):
    session_id, controller = _session(request)
    if not _ensure_started(controller):
        controller.load_more()
    return _back_to_list(session_id)


@app.get("/article/{article_id}", response_class=HTMLResponse)
def article_detail(article_id: str):
    state = DetailViewController(client).load(article_id)
    return HTMLResponse(render_article_page(state, tz_name=settings.display_timezone))


# JSON
@app.get("/api/articles")
def api_articles(request: Request):
    session_id, controller = _session(request)
    _ensure_started(controller)
    resp = JSONResponse({"status": "success", "data": controller.state.model_dump(by_alias=True)})
    return _with_cookie(resp, session_id)


@app.get("/api/article/{article_id}")
def api_article(article_id: str):
    state = DetailViewController(client).load(article_id)
    return {"status": "success", "data": state.model_dump(by_alias=True)}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("newsblog.api.main:app", host="0.0.0.0", port=8000, reload=True)
