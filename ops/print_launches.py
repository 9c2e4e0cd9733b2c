# Print upcoming launches, or the last N days with --recent [DAYS]
import sys
from argparse import ArgumentParser
from pathlib import Path
sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from launchintel.core.config import load_config
from launchintel.core.launches import get_launches, get_recent_launches
from launchintel.core.timeparse import to_epoch_ms
from launchintel.core.utils import format_countdown, now_ms

def _countdown(net):
    ms = to_epoch_ms(net)
    return format_countdown(int((ms - now_ms()) // 1000)) if ms is not None else "N/A"

def print_upcoming(config):
    launches = get_launches(config)
    if not launches:
        print("No upcoming launches found (or API error). Try checking SpaceflightNow or SpaceDevs directly.")
        return
    print("🚀 **Upcoming Launches**\n")
    for l in launches:
        print(f"**{l.get('name')}**")
        print(f"📅 {l.get('net')} (T-{_countdown(l.get('net'))})")
        print(f"📍 {l.get('location')}")
        print(f"Status: {l.get('status')}\n")

def print_recent(config, days):
    launches = get_recent_launches(config, days)
    lookback = days or config.defaults.get("recent_days")
    if not launches:
        print("No recent launches found (or API error). Try checking SpaceflightNow or SpaceDevs directly.")
        return
    print(f"🚀 **Launches (Last {lookback} Days)**\n")
    for l in launches:
        status = (l.get("status") or "").lower()
        icon = "✅" if ("success" in status or "go" in status) else "❌"
        print(f"{icon} **{l.get('name')}**")
        print(f"📅 {(l.get('net') or 'Unknown')[:10]}")
        print(f"📍 {l.get('location')}")
        print(f"Status: {l.get('status')}\n")

if __name__ == "__main__":
    p = ArgumentParser(description="Print upcoming or recent launches")
    p.add_argument("--recent", nargs="?", type=int, const=0, default=None, metavar="DAYS",
                   help="Show past launches instead (default lookback from config)")
    args = p.parse_args()
    cfg = load_config()
    if args.recent is None:
        print_upcoming(cfg)
    else:
        print_recent(cfg, args.recent or None)
