"""
Tests for the JSON cache store and alert-state files.

Run: python -m pytest tests/test_cache.py -v
"""

import json
import math

from launchintel.core.cache import load_state, read_cache, save_cache, save_state
from launchintel.core.models import ABSENT, FRESH, STALE

from conftest import NOW

TTL = 15 * 60 * 1000


class TestReadCache:
    """Fresh / stale / absent classification."""

    def test_fresh_returns_written_data_unmodified(self, tmp_path):
        path = tmp_path / "launches.json"
        data = [{"name": "X", "net": "2024-01-01T00:00:00Z", "nested": {"a": [1, 2]}}]
        save_cache(path, data, now=NOW)
        res = read_cache(path, TTL, now=NOW + TTL - 1)
        assert res.status == FRESH
        assert res.data == data
        assert res.expired is False

    def test_at_ttl_boundary_is_stale(self, tmp_path):
        path = tmp_path / "launches.json"
        save_cache(path, [1, 2, 3], now=NOW)
        res = read_cache(path, TTL, now=NOW + TTL)
        assert res.status == STALE
        assert res.expired is True
        assert res.data == [1, 2, 3]

    def test_old_data_kept_when_stale(self, tmp_path):
        path = tmp_path / "launches.json"
        save_cache(path, [{"name": "old"}], now=NOW)
        res = read_cache(path, TTL, now=NOW + 10 * TTL)
        assert res.expired
        assert res.data == [{"name": "old"}]

    def test_infinite_ttl_accepts_any_age(self, tmp_path):
        path = tmp_path / "launches.json"
        save_cache(path, ["ancient"], now=0)
        res = read_cache(path, math.inf, now=NOW)
        assert res.status == FRESH
        assert res.data == ["ancient"]

    def test_missing_file_is_absent(self, tmp_path):
        res = read_cache(tmp_path / "nope.json", TTL, now=NOW)
        assert res.status == ABSENT
        assert res.hit is False
        assert res.data is None

    def test_corrupt_file_is_absent(self, tmp_path):
        path = tmp_path / "launches.json"
        path.write_text("{not json", encoding="utf-8")
        assert read_cache(path, TTL, now=NOW).status == ABSENT

    def test_wrong_shape_is_absent(self, tmp_path):
        path = tmp_path / "launches.json"
        path.write_text(json.dumps([1, 2, 3]), encoding="utf-8")
        assert read_cache(path, TTL, now=NOW).status == ABSENT
        path.write_text(json.dumps({"timestamp": "yesterday", "data": []}), encoding="utf-8")
        assert read_cache(path, TTL, now=NOW).status == ABSENT
        path.write_text(json.dumps({"timestamp": NOW}), encoding="utf-8")
        assert read_cache(path, TTL, now=NOW).status == ABSENT


class TestSaveCache:

    def test_creates_parent_directories(self, tmp_path):
        path = tmp_path / "a" / "b" / "launches.json"
        assert save_cache(path, [], now=NOW) is True
        assert path.exists()

    def test_envelope_layout(self, tmp_path):
        path = tmp_path / "launches.json"
        save_cache(path, [{"name": "X"}], now=NOW)
        env = json.loads(path.read_text(encoding="utf-8"))
        assert env == {"timestamp": int(NOW), "data": [{"name": "X"}]}

    def test_write_failure_is_logged_not_raised(self, tmp_path, capsys):
        blocker = tmp_path / "file"
        blocker.write_text("x")
        assert save_cache(blocker / "launches.json", [], now=NOW) is False
        assert "write failed" in capsys.readouterr().out


class TestStateFiles:

    def test_round_trip_without_wrapper(self, tmp_path):
        path = tmp_path / "state" / "alerts.json"
        state = {"Falcon 9-2025-03-01T12:00:00Z": {"24h": True}}
        save_state(path, state)
        assert json.loads(path.read_text(encoding="utf-8")) == state
        assert load_state(path) == state

    def test_missing_or_corrupt_state_is_empty(self, tmp_path):
        path = tmp_path / "alerts.json"
        assert load_state(path) == {}
        path.write_text("[[[", encoding="utf-8")
        assert load_state(path) == {}
        path.write_text("[1, 2]", encoding="utf-8")
        assert load_state(path) == {}
