from typing import Optional

from newsblog.components.layout import SITE_TITLE, esc, render_back_card, render_page
from newsblog.reader.detail_view import DetailViewState
from newsblog.utils.text_utils import reading_time, strip_truncation_marker
from newsblog.utils.tz_utils import DEFAULT_TIMEZONE, format_date

NOT_FOUND_MESSAGE = "The article you're looking for doesn't exist or has been removed."
NO_CONTENT_MESSAGE = "No additional content available. Read the full article on the source website."


def _skeleton() -> str:
    blocks = [("32px", "192px"), ("48px", "100%"), ("24px", "128px"), ("400px", "100%"),
              ("24px", "100%"), ("24px", "100%"), ("24px", "75%")]
    bars = "".join(f"<div class='skeleton' style='height:{h};width:{w}'></div>" for h, w in blocks)
    return f"<div class='container loading' style='max-width:900px;padding:32px 16px'>{bars}</div>"


def render_article_page(state: DetailViewState, tz_name: str = DEFAULT_TIMEZONE, year: Optional[int] = None) -> str:
    """Renders one of the four detail states: loading, error, not_found, loaded."""
    if state.status == "loading":
        return render_page(SITE_TITLE, _skeleton(), year)
    if state.status == "error":
        return render_page(SITE_TITLE, render_back_card("Error", state.error or "", "error"), year)
    if state.status == "not_found" or state.article is None:
        return render_page(SITE_TITLE, render_back_card("Article Not Found", NOT_FOUND_MESSAGE), year)

    article = state.article
    source_name = article.source.name or ""
    author = article.author or "Unknown Author"
    initial = article.author[0] if article.author else "A"

    image = ""
    if article.url_to_image:
        image = f"<img src='{esc(article.url_to_image)}' alt='{esc(article.title)}' style='width:100%;max-height:500px;object-fit:cover'>"

    if article.content:
        content = f"<p>{esc(strip_truncation_marker(article.content))}</p>"
    else:
        content = f"<p>{NO_CONTENT_MESSAGE}</p>"

    read_more = ""
    if article.url:
        read_more = (
            f"<p><a href='{esc(article.url)}' target='_blank' rel='noopener noreferrer'>"
            f"Read Full Article on {esc(source_name)}</a></p>"
        )

    body = (
        "<div class='container' style='max-width:900px;padding:32px 16px'>"
        "<p><a href='/'>&larr; Back to News</a></p>"
        "<article>"
        "<header>"
        f"<p class='muted'><span class='badge'>{esc(source_name)}</span> "
        f"<span>{esc(format_date(article.published_at, tz_name))}</span> "
        f"<span>{esc(reading_time(article.content, article.description))}</span></p>"
        f"<h1>{esc(article.title)}</h1>"
        f"<p><span class='avatar'>{esc(initial)}</span> {esc(author)}</p>"
        "</header>"
        f"{image}"
        f"<p style='font-size:1.1em'>{esc(article.description)}</p>"
        "<hr>"
        f"{content}"
        f"{read_more}"
        "</article>"
        "<hr><p><a href='/'>Back to News</a></p>"
        "</div>"
    )
    return render_page(article.title or SITE_TITLE, body, year)
