# /launchintel/core/cache.py
# Purpose: timestamped JSON cache files + raw alert-state files
import json
import math
from pathlib import Path
from typing import Any, Dict, Optional, Union

from launchintel.core.models import ABSENT, FRESH, STALE, CacheResult
from launchintel.core.utils import dprint, now_ms

PathLike = Union[str, Path]


def _read_json(path: PathLike) -> Any:
    """Parsed JSON, or None when the file is missing or unreadable."""
    p = Path(path)
    if not p.exists():
        return None
    try:
        return json.loads(p.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        dprint(f"[Cache] ignoring unreadable {p}: {e}")
        return None


def _write_json(path: PathLike, payload: Any) -> bool:
    p = Path(path)
    try:
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(payload, indent=2), encoding="utf-8")
        return True
    except (OSError, TypeError, ValueError) as e:
        print(f"⚠️ [Cache] write failed for {p}: {e}")
        return False


def read_cache(path: PathLike, ttl_ms: float, now: Optional[float] = None) -> CacheResult:
    """
    Envelope {"timestamp": ms, "data": ...} →
      fresh  if now - timestamp <  ttl_ms
      stale  otherwise (data kept, expired=True)
      absent if missing, corrupt, or not an envelope
    ttl_ms=math.inf accepts any age.
    """
    env = _read_json(path)
    if not isinstance(env, dict) or "data" not in env:
        return CacheResult(ABSENT)
    ts = env.get("timestamp")
    if isinstance(ts, bool) or not isinstance(ts, (int, float)):
        return CacheResult(ABSENT)
    if now is None:
        now = now_ms()
    if ttl_ms == math.inf or now - ts < ttl_ms:
        return CacheResult(FRESH, env["data"])
    return CacheResult(STALE, env["data"])


def save_cache(path: PathLike, data: Any, now: Optional[float] = None) -> bool:
    if now is None:
        now = now_ms()
    return _write_json(path, {"timestamp": int(now), "data": data})


def load_state(path: PathLike) -> Dict[str, Dict[str, bool]]:
    state = _read_json(path)
    return state if isinstance(state, dict) else {}


def save_state(path: PathLike, state: Dict[str, Dict[str, bool]]) -> bool:
    return _write_json(path, state)
