# /launchintel/core/config.py
# Purpose: built-in defaults + config/config.json + env overrides → one Config value
import copy
import json
import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from dotenv import load_dotenv

from launchintel.core.models import AlertWindow

PROJECT_ROOT = Path(__file__).resolve().parents[2]
CONFIG_PATH = PROJECT_ROOT / "config" / "config.json"

DEFAULT_CONFIG: Dict[str, Any] = {
    "apis": {
        "launch_library": {
            "base_url": "https://ll.thespacedevs.com/2.2.0/launch",
            "upcoming_path": "/upcoming/",
            "previous_path": "/previous/",
            "default_limit": 10,
            "mode": "normal",
        },
        "spacex": {
            "base_url": "https://api.spacexdata.com/v5/launches",
            "upcoming_path": "/upcoming",
        },
    },
    "spaceports": {
        # LL2 location ids: Cape Canaveral SFS, KSC, Vandenberg SFB, Starbase
        "target_ids": [12, 27, 11, 143],
        "target_keywords": ["cape canaveral", "kennedy", "vandenberg", "starbase", "spacex"],
    },
    "alerts": {
        "channel_id": "",
        "windows": [
            {"key": "24h", "label": "T-24 Hours", "emoji": "📅", "name": "24h",
             "min_hours": 23, "max_hours": 25},
            {"key": "1h", "label": "T-1 Hour", "emoji": "⏰", "name": "1h",
             "min_hours": 0.75, "max_hours": 1.25},
            {"key": "10m", "label": "T-10 Minutes", "emoji": "🚀", "name": "10m",
             "min_minutes": 5, "max_minutes": 15},
        ],
    },
    "defaults": {
        "cache_ttl_ms": 15 * 60 * 1000,
        "fetch_timeout_ms": 5000,
        "alert_cleanup_ttl_ms": 48 * 60 * 60 * 1000,
        "recent_days": 7,
        "recent_limit": 10,
    },
    "paths": {
        "launches_cache": "data/launches_cache.json",
        "alerts_state": "data/alerts_state.json",
    },
    "delivery": {
        "method": "cli",          # cli | twilio | none
        "cli": "openclaw",
        "twilio_sid": "",
        "twilio_token": "",
        "twilio_from": "",
        "twilio_messaging_sid": "",
    },
}


def _int_env(name: str, default: int) -> int:
    v = os.getenv(name, "").strip()
    try:
        return int(v) if v else default
    except ValueError:
        return default

def _list_env(name: str) -> Optional[List[str]]:
    v = os.getenv(name, "").strip()
    if not v:
        return None
    return [s.strip() for s in v.split(",") if s.strip()]

def _deep_merge(base: Dict, override: Dict) -> Dict:
    out = copy.deepcopy(base)
    for k, v in (override or {}).items():
        if isinstance(v, dict) and isinstance(out.get(k), dict):
            out[k] = _deep_merge(out[k], v)
        else:
            out[k] = copy.deepcopy(v)
    return out


@dataclass
class Config:
    apis: Dict[str, Dict[str, Any]]
    spaceports: Dict[str, Any]
    alerts: Dict[str, Any]
    defaults: Dict[str, Any]
    paths: Dict[str, Path]
    delivery: Dict[str, Any] = field(default_factory=dict)
    windows: List[AlertWindow] = field(default_factory=list)

    @classmethod
    def from_dict(cls, raw: Dict[str, Any], root: Optional[Path] = None) -> "Config":
        """Fill gaps from DEFAULT_CONFIG, resolve paths under root, validate windows."""
        d = _deep_merge(DEFAULT_CONFIG, raw)
        root = Path(root) if root else PROJECT_ROOT
        paths = {}
        for key, val in d["paths"].items():
            p = Path(val)
            paths[key] = (p if p.is_absolute() else root / p).resolve()
        return cls(
            apis=d["apis"],
            spaceports=d["spaceports"],
            alerts=d["alerts"],
            defaults=d["defaults"],
            paths=paths,
            delivery=d["delivery"],
            windows=[AlertWindow.from_dict(w) for w in d["alerts"].get("windows") or []],
        )

    @property
    def channel_id(self) -> str:
        return str(self.alerts.get("channel_id") or "")

    @property
    def target_ids(self) -> List[int]:
        return list(self.spaceports.get("target_ids") or [])

    @property
    def target_keywords(self) -> List[str]:
        return [str(k).lower() for k in self.spaceports.get("target_keywords") or []]

    @property
    def cache_ttl_ms(self) -> int:
        return int(self.defaults["cache_ttl_ms"])

    @property
    def fetch_timeout_ms(self) -> int:
        return int(self.defaults["fetch_timeout_ms"])

    @property
    def alert_cleanup_ttl_ms(self) -> int:
        return int(self.defaults["alert_cleanup_ttl_ms"])


def _apply_env(d: Dict[str, Any]) -> Dict[str, Any]:
    apis, defaults, delivery = d["apis"], d["defaults"], d["delivery"]

    if os.getenv("LL_API_URL"):
        apis["launch_library"]["base_url"] = re.sub(
            r"/launch/?(upcoming|previous)?/?$", "/launch", os.environ["LL_API_URL"].strip()
        )
    if os.getenv("SPACEX_API_URL"):
        apis["spacex"]["base_url"] = re.sub(r"/upcoming/?$", "", os.environ["SPACEX_API_URL"].strip())

    if os.getenv("ALERT_CHANNEL_ID"):
        d["alerts"]["channel_id"] = os.environ["ALERT_CHANNEL_ID"].strip()

    defaults["cache_ttl_ms"] = _int_env("CACHE_TTL_MS", defaults["cache_ttl_ms"])
    defaults["fetch_timeout_ms"] = _int_env("FETCH_TIMEOUT_MS", defaults["fetch_timeout_ms"])
    defaults["alert_cleanup_ttl_ms"] = _int_env("ALERT_CLEANUP_TTL_MS", defaults["alert_cleanup_ttl_ms"])
    defaults["recent_days"] = _int_env("RECENT_DAYS", defaults["recent_days"])

    ids = _list_env("TARGET_IDS")
    if ids is not None:
        d["spaceports"]["target_ids"] = [int(x) for x in ids if x.lstrip("-").isdigit()]
    kws = _list_env("TARGET_KEYWORDS")
    if kws is not None:
        d["spaceports"]["target_keywords"] = [k.lower() for k in kws]

    cache_dir = os.getenv("CACHE_DIR", "").strip()
    if cache_dir:
        d["paths"]["launches_cache"] = str(Path(cache_dir) / "launches_cache.json")
        d["paths"]["alerts_state"] = str(Path(cache_dir) / "alerts_state.json")

    if os.getenv("DELIVERY_METHOD"):
        delivery["method"] = os.environ["DELIVERY_METHOD"].strip().lower()
    if os.getenv("ALERT_CLI"):
        delivery["cli"] = os.environ["ALERT_CLI"].strip()
    for env_name, key in (
        ("TWILIO_SID", "twilio_sid"),
        ("TWILIO_TOKEN", "twilio_token"),
        ("TWILIO_FROM", "twilio_from"),
        ("TWILIO_MESSAGING_SID", "twilio_messaging_sid"),
    ):
        if os.getenv(env_name):
            delivery[key] = os.environ[env_name].strip()

    return d


def load_config(path: Optional[Path] = None, use_dotenv: bool = True) -> Config:
    """
    Build the effective Config. Environment variables always win over the
    JSON file, which wins over DEFAULT_CONFIG. A malformed JSON file raises
    ValueError rather than silently running on defaults.
    """
    if use_dotenv:
        load_dotenv()

    if path is None:
        path = Path(os.getenv("LAUNCHINTEL_CONFIG") or CONFIG_PATH)
    path = Path(path)

    file_cfg: Dict[str, Any] = {}
    if path.exists():
        try:
            file_cfg = json.loads(path.read_text(encoding="utf-8"))
        except ValueError as e:
            raise ValueError(f"invalid config file {path}: {e}") from e
        if not isinstance(file_cfg, dict):
            raise ValueError(f"invalid config file {path}: top level must be an object")

    merged = _apply_env(_deep_merge(DEFAULT_CONFIG, file_cfg))
    return Config.from_dict(merged)
