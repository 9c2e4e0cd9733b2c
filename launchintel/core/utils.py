# /launchintel/core/utils.py
# --- Debug output, dict helpers, spaceport targeting ---

from __future__ import annotations
import os
import time
from typing import Any, Dict, Iterable, List, Optional

# ========== Debug / formatting ==========

def _debug_enabled() -> bool:
    v = (os.getenv("DEBUG") or "").strip().lower()
    return v in ("1", "true", "yes", "on")

def dprint(*args, **kwargs):
    """Print only when DEBUG is enabled in the environment."""
    if _debug_enabled():
        print("[DEBUG]", *args, **kwargs, flush=True)

def now_ms() -> float:
    return time.time() * 1000.0

def format_countdown(secs: Optional[int]) -> str:
    """Seconds to '2d 3h', '3h 5m' or '12m'. 'N/A' for missing, 'now' for past."""
    if not isinstance(secs, int):
        return "N/A"
    if secs <= 0:
        return "now"
    d, h, m = secs // 86400, (secs % 86400) // 3600, (secs % 3600) // 60
    if d > 0:
        return f"{d}d {h}h"
    if h > 0:
        return f"{h}h {m}m"
    return f"{m}m"

# ========== Dict helpers ==========

def safe_get(obj: Any, dotted: str, fallback: Any = "Unknown") -> Any:
    """
    Walk 'pad.location.name' through nested dicts.
    Returns fallback as soon as a level is missing or None.
    """
    cur = obj
    for key in dotted.split("."):
        if not isinstance(cur, dict) or cur.get(key) is None:
            return fallback
        cur = cur[key]
    return cur

def _contains_any(text: str, keywords: Iterable[str]) -> bool:
    t = (text or "").lower()
    return any(k.lower() in t for k in keywords if k)

# ========== Targeting Rule ==========

def is_target_location(launch: Dict, target_ids: Iterable[int], target_keywords: Iterable[str]) -> bool:
    """
    Rule:
      pad.location.id in target_ids OR a keyword appears in the location name
    Records without pad/location can't be placed, so they never match.
    """
    pad = launch.get("pad")
    if not isinstance(pad, dict) or not isinstance(pad.get("location"), dict):
        return False
    loc_name = str(safe_get(launch, "pad.location.name", ""))
    loc_id = safe_get(launch, "pad.location.id", -1)
    return loc_id in list(target_ids) or _contains_any(loc_name, target_keywords)

def filter_relevant(
    launches: Iterable[Dict],
    target_ids: Iterable[int],
    target_keywords: Iterable[str],
    limit: int = 5,
) -> List[Dict]:
    ids = list(target_ids)
    kws = [k.lower() for k in target_keywords]
    out = [l for l in launches if is_target_location(l, ids, kws)]
    return out[:limit]
