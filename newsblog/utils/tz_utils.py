from datetime import datetime, timezone
from zoneinfo import ZoneInfo
from typing import Optional

DEFAULT_TIMEZONE = "UTC"


def parse_iso(iso_ts: Optional[str]) -> Optional[datetime]:
    """Parses an ISO-8601 timestamp; naive values are taken as UTC."""
    if not iso_ts:
        return None
    try:
        # fromisoformat only understands a trailing 'Z' from 3.11 on
        dt = datetime.fromisoformat(iso_ts.strip().replace("Z", "+00:00"))
    except ValueError:
        return None
    return dt if dt.tzinfo else dt.replace(tzinfo=timezone.utc)


def utc_to_local(dt_utc: datetime, tz_name: str = DEFAULT_TIMEZONE) -> datetime:
    """Converts a UTC datetime to the given timezone."""
    return dt_utc.astimezone(ZoneInfo(tz_name))


def format_date(iso_ts: Optional[str], tz_name: str = DEFAULT_TIMEZONE, long: bool = True) -> str:
    """
    Formats a timestamp the way en-US locales print dates:
    "July 15, 2023" (long) or "Jul 15, 2023" (short). Unparseable input gives "".
    """
    dt = parse_iso(iso_ts)
    if dt is None:
        return ""
    local = utc_to_local(dt, tz_name)
    month = local.strftime("%B" if long else "%b")
    return f"{month} {local.day}, {local.year}"
