from typing import Iterable
from urllib.parse import quote

from newsblog.components.layout import esc


def render_category_filter(categories: Iterable[str], active_category: str) -> str:
    links = []
    for category in categories:
        cls = "active" if category == active_category else ""
        links.append(
            f"<a class='{cls}' href='/category/{quote(category)}'>{esc(category.capitalize())}</a>"
        )
    return f"<nav class='categories'>{''.join(links)}</nav>"
