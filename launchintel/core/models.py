# /launchintel/core/models.py
# Purpose: small tagged result types shared by cache, providers and alerts
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

FRESH = "fresh"
STALE = "stale"
ABSENT = "absent"


@dataclass
class CacheResult:
    status: str
    data: Any = None

    @property
    def expired(self) -> bool:
        return self.status == STALE

    @property
    def hit(self) -> bool:
        return self.status != ABSENT


@dataclass
class ProviderResult:
    """Outcome of one upstream provider call. `data` is raw provider records."""
    provider: str
    ok: bool
    data: List[Dict] = field(default_factory=list)
    error: Optional[str] = None


@dataclass
class Ok:
    records: List[Dict]


@dataclass
class AllFailed:
    message: str


UpstreamResult = Union[Ok, AllFailed]


@dataclass
class AlertWindow:
    key: str
    label: str = ""
    emoji: str = ""
    name: str = ""
    min_hours: Optional[float] = None
    max_hours: Optional[float] = None
    min_minutes: Optional[float] = None
    max_minutes: Optional[float] = None

    def __post_init__(self):
        hours = self.min_hours is not None and self.max_hours is not None
        minutes = self.min_minutes is not None and self.max_minutes is not None
        if hours == minutes:
            raise ValueError(
                f"alert window {self.key!r} needs exactly one of "
                f"min_hours/max_hours or min_minutes/max_minutes"
            )

    @classmethod
    def from_dict(cls, d: Dict) -> "AlertWindow":
        if not d.get("key"):
            raise ValueError(f"alert window without a key: {d!r}")
        return cls(
            key=str(d["key"]),
            label=d.get("label") or d["key"],
            emoji=d.get("emoji") or "",
            name=d.get("name") or "",
            min_hours=d.get("min_hours"),
            max_hours=d.get("max_hours"),
            min_minutes=d.get("min_minutes"),
            max_minutes=d.get("max_minutes"),
        )

    @property
    def watch_live(self) -> bool:
        # last window before liftoff gets the "watch live" body
        return "10m" in (self.name, self.key)

    def contains(self, diff_ms: float) -> bool:
        """Inclusive range test of time-to-launch in this window's unit."""
        if self.min_hours is not None and self.max_hours is not None:
            hours = diff_ms / 3_600_000
            return self.min_hours <= hours <= self.max_hours
        minutes = diff_ms / 60_000
        return self.min_minutes <= minutes <= self.max_minutes


@dataclass
class AlertRun:
    sent: List[str] = field(default_factory=list)
    soonest_secs: Optional[int] = None
    state_changed: bool = False
