import math
import re
from typing import Optional

WORDS_PER_MINUTE = 200

# NewsAPI cuts `content` at ~200 chars and appends e.g. "… [+2345 chars]"
_TRUNCATION_MARKER = re.compile(r"\s*\[\+\d+ chars\]\s*$")


def word_count(text: Optional[str]) -> int:
    return len((text or "").split())


def reading_time(content: Optional[str], description: Optional[str] = None) -> str:
    """Estimated reading time of an article, e.g. "2 min read". Never below 1 minute."""
    text = content if content and content.strip() else description
    minutes = math.ceil(word_count(text) / WORDS_PER_MINUTE)
    return f"{max(minutes, 1)} min read"


def strip_truncation_marker(content: Optional[str]) -> str:
    if not content:
        return ""
    return _TRUNCATION_MARKER.sub("", content)
