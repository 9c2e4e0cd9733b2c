"""Shared fixtures: tmp-dir Config, fake HTTP responses, a fixed clock."""

import json
from datetime import datetime, timedelta, timezone
from unittest.mock import MagicMock

import pytest

from launchintel.core.config import Config

NOW_DT = datetime(2025, 3, 1, 12, 0, 0, tzinfo=timezone.utc)
NOW = NOW_DT.timestamp() * 1000.0

LL_UPCOMING = "https://ll.thespacedevs.com/2.2.0/launch/upcoming/"
LL_PREVIOUS = "https://ll.thespacedevs.com/2.2.0/launch/previous/"
SX_UPCOMING = "https://api.spacexdata.com/v5/launches/upcoming"


def iso_in(**delta) -> str:
    """ISO-8601 'Z' timestamp at NOW + delta."""
    return (NOW_DT + timedelta(**delta)).strftime("%Y-%m-%dT%H:%M:%SZ")


def fake_response(payload=None, status=200, bad_json=False, chunks=None):
    """Streamed response: body comes back through iter_content()."""
    r = MagicMock()
    r.status_code = status
    if chunks is None:
        chunks = [b"{not json"] if bad_json else [json.dumps(payload).encode()]
    r.iter_content.side_effect = lambda chunk_size=None: iter(chunks)
    return r


def ll_launch(name, loc_id=27, loc_name="Kennedy Space Center, FL, USA", net=None, status="Go for Launch"):
    return {
        "name": name,
        "net": net or iso_in(days=3),
        "status": {"name": status},
        "pad": {"name": "Launch Complex 39A", "location": {"id": loc_id, "name": loc_name}},
        "image": f"https://img.example/{name}.png",
    }


def sx_launch(name, date_utc=None):
    return {
        "name": name,
        "date_utc": date_utc or iso_in(days=4),
        "links": {"patch": {"small": f"https://patch.example/{name}.png"}},
    }


@pytest.fixture
def make_config(tmp_path):
    def _make(**overrides):
        raw = {
            "paths": {
                "launches_cache": str(tmp_path / "cache" / "launches.json"),
                "alerts_state": str(tmp_path / "cache" / "alerts_state.json"),
            },
            "delivery": {"method": "none"},
        }
        for section, values in overrides.items():
            raw.setdefault(section, {})
            if isinstance(values, dict):
                raw[section].update(values)
            else:
                raw[section] = values
        return Config.from_dict(raw, root=tmp_path)
    return _make


@pytest.fixture
def config(make_config):
    return make_config()
