# /launchintel/providers/launch_library.py
# Purpose: Launch Library 2 adapter (primary source, records already near-canonical)

from typing import Any, Dict, List

from launchintel.core.config import Config
from launchintel.core.errors import LaunchIntelError, ParseError
from launchintel.core.http import fetch_json
from launchintel.core.models import ProviderResult
from launchintel.core.utils import dprint

NAME = "Launch Library 2"

def _api(config: Config) -> Dict[str, Any]:
    return config.apis["launch_library"]

def _results(payload: Any, url: str) -> List[Dict]:
    if not isinstance(payload, dict):
        raise ParseError(f"expected an object from {url}, got {type(payload).__name__}")
    results = payload.get("results") or []
    if not isinstance(results, list):
        raise ParseError(f"'results' is not a list in {url}")
    return [r for r in results if isinstance(r, dict)]

def fetch_upcoming(config: Config) -> ProviderResult:
    """Upcoming launches. Never raises; failures come back as ok=False."""
    api = _api(config)
    url = f"{api['base_url']}{api['upcoming_path']}"
    params = {"limit": api.get("default_limit", 10), "mode": api.get("mode", "normal")}
    try:
        rows = _results(fetch_json(url, params=params, timeout_ms=config.fetch_timeout_ms), url)
    except LaunchIntelError as e:
        print(f"⚠️ [Launch] {NAME} error ({type(e).__name__}): {e}")
        return ProviderResult(NAME, ok=False, error=str(e))
    print(f"✅ [Launch] fetched {len(rows)} launches from {NAME}")
    return ProviderResult(NAME, ok=True, data=rows)

def fetch_previous(config: Config, window_start: str, limit: int) -> List[Dict]:
    """Past launches since window_start (ISO-8601). Raises LaunchIntelError."""
    api = _api(config)
    url = f"{api['base_url']}{api['previous_path']}"
    params = {"window_start": window_start, "limit": limit, "mode": api.get("mode", "normal")}
    rows = _results(fetch_json(url, params=params, timeout_ms=config.fetch_timeout_ms), url)
    dprint(f"[Launch] {NAME} returned {len(rows)} previous launches since {window_start}")
    return rows
