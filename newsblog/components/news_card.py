from typing import Optional

from newsblog.components.layout import esc
from newsblog.feeds.models import Article
from newsblog.utils.text_utils import reading_time
from newsblog.utils.tz_utils import DEFAULT_TIMEZONE, format_date


def render_news_card(
    article: Article,
    position: int,
    category: Optional[str] = None,
    tz_name: str = DEFAULT_TIMEZONE,
) -> str:
    """
    Summary card for one article of the grid.

    The card links to `/article/{position}`, i.e. the article's place in the
    list, which is all the detail view has to go on.
    """
    image = ""
    if article.url_to_image:
        image = f"<img src='{esc(article.url_to_image)}' alt='{esc(article.title)}' loading='lazy'>"
    badge = f"<span class='badge'>{esc(category.capitalize())}</span>" if category else ""
    external = ""
    if article.url:
        external = (
            f"<a href='{esc(article.url)}' target='_blank' rel='noopener noreferrer'>"
            "Visit original source</a>"
        )

    return (
        "<article class='card'>"
        f"<a href='/article/{position}'>{image}</a>"
        "<div style='padding:12px;flex-grow:1'>"
        f"{badge}"
        f"<h3><a href='/article/{position}'>{esc(article.title)}</a></h3>"
        f"<p class='muted'><span>{esc(article.source.name)}</span> "
        f"<span>{esc(format_date(article.published_at, tz_name, long=False))}</span></p>"
        f"<p>{esc(article.description)}</p>"
        "</div>"
        "<div style='padding:12px;display:flex;justify-content:space-between'>"
        f"<span class='muted'>{esc(reading_time(article.content, article.description))}</span>"
        f"{external}"
        "</div>"
        "</article>"
    )
