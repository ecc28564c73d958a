import html
from datetime import datetime
from typing import Optional

SITE_TITLE = "News Blog"

_STYLE = """
body{font-family:system-ui,sans-serif;margin:0;background:#fff;color:#111}
.container{max-width:1200px;margin:0 auto;padding:0 16px}
header.site{position:sticky;top:0;background:#fff;border-bottom:1px solid #e5e7eb;padding:16px 0}
.categories a{display:inline-block;margin:4px;padding:4px 12px;border:1px solid #d1d5db;border-radius:6px;text-decoration:none;color:#111}
.categories a.active{background:#111;color:#fff}
.banner-error{background:#fee2e2;color:#991b1b;padding:16px;border-radius:6px;margin:24px 0}
.grid{display:grid;grid-template-columns:repeat(auto-fill,minmax(260px,1fr));gap:24px;margin-top:24px}
.card{border:1px solid #e5e7eb;border-radius:8px;overflow:hidden;display:flex;flex-direction:column}
.card img{width:100%;height:192px;object-fit:cover}
.badge{background:#111;color:#fff;border-radius:9999px;padding:2px 8px;font-size:12px}
.muted{color:#6b7280;font-size:13px}
.skeleton{background:#e5e7eb;border-radius:6px;margin-bottom:16px}
footer.site{border-top:1px solid #e5e7eb;padding:24px 0;text-align:center;color:#6b7280}
"""


def esc(value: Optional[str]) -> str:
    return html.escape(value or "", quote=True)


def render_page(title: str, body: str, year: Optional[int] = None) -> str:
    year = year or datetime.now().year
    return (
        "<!DOCTYPE html>"
        "<html lang='en'><head><meta charset='utf-8'>"
        "<meta name='viewport' content='width=device-width, initial-scale=1'>"
        f"<title>{esc(title)}</title><style>{_STYLE}</style></head>"
        f"<body>{body}"
        f"<footer class='site'><div class='container'><p>&copy; {year} {SITE_TITLE}. All rights reserved.</p></div></footer>"
        "</body></html>"
    )


def render_back_card(heading: str, message: str, heading_class: str = "") -> str:
    """Full-page card with a way back to the list (detail error / not-found)."""
    cls = f" class='{heading_class}'" if heading_class else ""
    return (
        "<div class='container' style='max-width:900px;padding:32px 16px'>"
        "<div class='card' style='padding:32px;text-align:center'>"
        f"<h2{cls}>{esc(heading)}</h2>"
        f"<p>{esc(message)}</p>"
        "<a href='/'>Back to Home</a>"
        "</div></div>"
    )
