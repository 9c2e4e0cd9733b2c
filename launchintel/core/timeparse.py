# /launchintel/core/timeparse.py
# Purpose: one robust time parser used for NET strings and alert-state keys
import re
import typing
from datetime import datetime, timezone

# trailing ISO-8601 timestamp at the end of a "name-net" alert key
_TRAILING_ISO = re.compile(r"(\d{4}-\d{2}-\d{2}(?:[T ][0-9:.]+(?:Z|[+-]\d{2}:?\d{2})?)?)$")

_FMTS = (
    "%Y-%m-%dT%H:%M:%S.%fZ",
    "%Y-%m-%dT%H:%M:%SZ",
    "%Y-%m-%dT%H:%M:%S%z",
    "%Y-%m-%dT%H:%M:%S",   # naive ISO → assume UTC
    "%Y-%m-%d",
)


def parse_iso(s: typing.Optional[str]) -> typing.Optional[datetime]:
    """ISO-8601 string → aware UTC datetime, or None if not recognized."""
    if not isinstance(s, str) or not s.strip():
        return None
    s = s.strip()
    try:
        # fromisoformat only learned the 'Z' suffix in 3.11
        dt = datetime.fromisoformat(s[:-1] + "+00:00" if s.endswith("Z") else s)
    except ValueError:
        dt = None
        for fmt in _FMTS:
            try:
                dt = datetime.strptime(s, fmt)
                break
            except ValueError:
                continue
    if dt is None:
        return None
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def to_epoch_ms(s: typing.Optional[str]) -> typing.Optional[float]:
    dt = parse_iso(s)
    return dt.timestamp() * 1000.0 if dt else None


def launch_date_from_key(launch_id: str) -> typing.Optional[float]:
    """
    Epoch ms of the date embedded at the end of a "name-net" key.
    NET strings contain '-' themselves, so match the whole trailing
    timestamp; fall back to the last '-' segment for anything else.
    """
    m = _TRAILING_ISO.search(launch_id or "")
    if m:
        ms = to_epoch_ms(m.group(1))
        if ms is not None:
            return ms
    return to_epoch_ms((launch_id or "").rsplit("-", 1)[-1])
