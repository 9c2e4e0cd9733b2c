# /launchintel/core/alerts.py
# Purpose: central alert engine: time-to-launch windows, per-window dedup, state sweep

from typing import Dict, Iterable, List, Optional

from launchintel.core.cache import load_state, save_state
from launchintel.core.config import Config
from launchintel.core.delivery import DeliveryChannel, deliver
from launchintel.core.launches import get_launches
from launchintel.core.models import AlertRun, AlertWindow
from launchintel.core.timeparse import launch_date_from_key, to_epoch_ms
from launchintel.core.utils import dprint, now_ms


def launch_key(launch: Dict) -> str:
    # name + net, not a stable upstream id: a rename or reschedule re-arms every window
    return f"{launch.get('name')}-{launch.get('net')}"


def compose_alert(window: AlertWindow, launch: Dict) -> str:
    if window.watch_live:
        detail = "📺 Watch live!"
    else:
        detail = f"📍 {launch.get('location')}\n⏰ {launch.get('net')}"
    return f"{window.emoji} **{window.label}:** {launch.get('name')}\n{detail}"


def sweep_state(state: Dict[str, Dict[str, bool]], now: float, ttl_ms: float) -> List[str]:
    """Drop entries whose embedded launch date is older than ttl_ms. Returns removed keys."""
    removed = []
    for key in list(state):
        launch_ms = launch_date_from_key(key)
        if launch_ms is None:
            continue
        if now - launch_ms > ttl_ms:
            del state[key]
            removed.append(key)
    return removed


def check_alerts(
    config: Config,
    channel: Optional[DeliveryChannel] = None,
    now: Optional[float] = None,
    launches: Optional[Iterable[Dict]] = None,
) -> AlertRun:
    """
    launches: LaunchRecord dicts (name, net, location, ...); fetched via
    get_launches() when not given.
    Fires each configured window at most once per launch, then sweeps old
    state entries. State is written only when a flag flipped or an entry
    was removed.
    """
    if now is None:
        now = now_ms()
    if launches is None:
        launches = get_launches(config, now=now)

    state_file = config.paths["alerts_state"]
    state = load_state(state_file)
    run = AlertRun()

    for launch in launches:
        if not isinstance(launch, dict):
            continue
        launch_ms = to_epoch_ms(launch.get("net"))
        if launch_ms is None:
            continue
        diff_ms = launch_ms - now
        if diff_ms > 0:
            secs = int(diff_ms // 1000)
            run.soonest_secs = secs if run.soonest_secs is None else min(run.soonest_secs, secs)

        key = launch_key(launch)
        flags = state.get(key)
        if not isinstance(flags, dict):
            flags = state[key] = {}

        for window in config.windows:
            if flags.get(window.key):
                continue  # already sent
            if not window.contains(diff_ms):
                continue
            msg = compose_alert(window, launch)
            deliver(msg, channel, config.channel_id)
            run.sent.append(msg)
            flags[window.key] = True
            run.state_changed = True

    removed = sweep_state(state, now, config.alert_cleanup_ttl_ms)
    if removed:
        dprint(f"[Alerts] removed {len(removed)} expired state entries")
        run.state_changed = True

    if run.state_changed:
        save_state(state_file, state)
        print("✅ [Alerts] alert state updated")
    return run
