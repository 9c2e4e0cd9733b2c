# /launchintel/core/launches.py
# Purpose: cache-first launch aggregation over both providers, plus recent launches

import math
from datetime import datetime, timedelta, timezone
from typing import Dict, List, Optional

from launchintel.core.cache import read_cache, save_cache
from launchintel.core.config import Config
from launchintel.core.errors import LaunchIntelError
from launchintel.core.models import FRESH, AllFailed, Ok, UpstreamResult
from launchintel.core.utils import dprint, filter_relevant, now_ms, safe_get
from launchintel.providers import launch_library, spacex

MAX_LAUNCHES = 5


def _is_records(data) -> bool:
    """A cached payload is usable only as a list of record dicts."""
    return isinstance(data, list) and all(isinstance(r, dict) for r in data)


def normalize_record(raw: Dict) -> Dict:
    """Project a primary-shaped record onto the flat LaunchRecord layout."""
    return {
        "name": raw.get("name"),
        "status": safe_get(raw, "status.name", "Unknown"),
        "net": raw.get("net"),
        "pad": safe_get(raw, "pad.name", "Unknown Pad"),
        "location": safe_get(raw, "pad.location.name", "Unknown Location"),
        "image": raw.get("image") or None,
    }


def merge_sources(primary: List[Dict], secondary: List[Dict]) -> List[Dict]:
    # all-or-nothing: interleaving would need de-duplication across schemas
    return list(primary) if primary else list(secondary)


def fetch_upstream(config: Config) -> UpstreamResult:
    """Query both providers. Ok with the merged raw records unless both failed."""
    ll = launch_library.fetch_upcoming(config)
    sx = spacex.fetch_upcoming(config)
    if not (ll.ok or sx.ok):
        return AllFailed(f"{ll.provider}: {ll.error}; {sx.provider}: {sx.error}")
    return Ok(merge_sources(ll.data, sx.data))


def get_launches(config: Config, now: Optional[float] = None) -> List[Dict]:
    """
    Up to 5 upcoming launches at configured spaceports.
      1) fresh cache → returned as-is, no network
      2) otherwise both providers are queried
      3) both failed → stale cache of any age, else []
      4) merge → filter → normalize → write cache
    Always returns a list.
    """
    if now is None:
        now = now_ms()
    cache_file = config.paths["launches_cache"]

    cached = read_cache(cache_file, config.cache_ttl_ms, now=now)
    if cached.status == FRESH and _is_records(cached.data):
        dprint("[Launch] returning cached launch data")
        return cached.data

    result = fetch_upstream(config)
    if isinstance(result, AllFailed):
        print(f"❌ [Launch] all APIs failed, falling back to stale cache ({result.message})")
        stale = read_cache(cache_file, math.inf, now=now)
        return stale.data if _is_records(stale.data) else []

    relevant = filter_relevant(
        result.records, config.target_ids, config.target_keywords, limit=MAX_LAUNCHES
    )
    output = [normalize_record(r) for r in relevant]
    save_cache(cache_file, output, now=now)
    print(f"✅ [Launch] cached {len(output)} filtered launches")
    return output


def get_recent_launches(config: Config, days: Optional[int] = None, now: Optional[float] = None) -> List[Dict]:
    """Launches from the last `days` (default defaults.recent_days). [] on any failure."""
    lookback = days or int(config.defaults.get("recent_days", 7))
    if now is None:
        now = now_ms()
    start = datetime.fromtimestamp(now / 1000.0, tz=timezone.utc) - timedelta(days=lookback)
    window_start = start.strftime("%Y-%m-%dT%H:%M:%SZ")
    limit = int(config.defaults.get("recent_limit", 10))

    try:
        rows = launch_library.fetch_previous(config, window_start, limit)
    except LaunchIntelError as e:
        print(f"❌ [Recent] error fetching recent launches: {e}")
        return []

    return [
        {
            "name": r.get("name"),
            "status": safe_get(r, "status.name", "Unknown"),
            "net": r.get("net"),
            "location": safe_get(r, "pad.location.name", "Unknown Location"),
            "mission": safe_get(r, "mission.description", "No mission description."),
        }
        for r in rows
    ]
