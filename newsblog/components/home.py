from typing import Iterable, Optional

from newsblog.components.category_filter import render_category_filter
from newsblog.components.layout import SITE_TITLE, esc, render_page
from newsblog.components.news_card import render_news_card
from newsblog.reader.list_view import ListViewState
from newsblog.utils.tz_utils import DEFAULT_TIMEZONE


def render_list_page(
    state: ListViewState,
    categories: Iterable[str],
    tz_name: str = DEFAULT_TIMEZONE,
    year: Optional[int] = None,
) -> str:
    header = (
        "<header class='site'><div class='container'>"
        f"<h1>{SITE_TITLE}</h1>"
        "<form method='get' action='/search'>"
        f"<input type='text' name='q' placeholder='Search news...' value='{esc(state.search_query)}'>"
        "<button type='submit'>Search</button>"
        "</form>"
        f"{render_category_filter(categories, state.active_category)}"
        "</div></header>"
    )

    parts = []
    if state.error:
        parts.append(f"<div class='banner-error' role='alert'>{esc(state.error)}</div>")

    if state.loading and not state.articles:
        parts.append("<div class='loading' style='text-align:center;padding:96px 0'>Loading...</div>")
    else:
        cards = "".join(
            render_news_card(article, i, state.active_category, tz_name)
            for i, article in enumerate(state.articles)
        )
        parts.append(f"<div class='grid'>{cards}</div>")

        if not state.articles and not state.loading:
            parts.append(
                "<div class='empty' style='text-align:center;padding:48px 0'>"
                "<h2>No articles found</h2>"
                "<p class='muted'>Try a different search term or category</p>"
                "</div>"
            )

        if state.articles:
            if state.loading:
                more = "<span class='load-more' aria-disabled='true'>Loading...</span>"
            else:
                more = "<a class='load-more' href='/load-more'>Load More</a>"
            parts.append(f"<div style='text-align:center;margin:40px 0'>{more}</div>")

    body = f"{header}<main class='container'>{''.join(parts)}</main>"
    return render_page(SITE_TITLE, body, year)
