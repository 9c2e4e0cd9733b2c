# /run_alerts.py
# Purpose: poll launches and fire timed alerts; adaptive sleep as liftoff nears
import io, sys, time, random
from argparse import ArgumentParser
sys.stdout = io.TextIOWrapper(sys.stdout.buffer, encoding="utf-8")
sys.stderr = io.TextIOWrapper(sys.stderr.buffer, encoding="utf-8")

from launchintel.core.config import load_config
from launchintel.core.alerts import check_alerts
from launchintel.core.delivery import build_channel
from launchintel.core.utils import dprint, format_countdown

BASE_SLEEP  = 15 * 60   # nothing close
FAST_SLEEP  = 5 * 60    # launch within 2 hours
SNIPE_SLEEP = 60        # launch within 20 minutes

def parse_args():
    p = ArgumentParser(description="LaunchIntel: timed alerts before liftoff")
    p.add_argument("--once", action="store_true", help="Run a single check and exit (cron)")
    p.add_argument("--no-alerts", action="store_true", help="Print only; skip the delivery channel")
    return p.parse_args()

def next_sleep(soonest):
    if isinstance(soonest, int):
        if soonest <= 20 * 60:
            return SNIPE_SLEEP
        if soonest <= 2 * 3600:
            return FAST_SLEEP
    return BASE_SLEEP

def one_cycle(config, channel):
    run = check_alerts(config, channel=channel)
    dprint(f"sent {len(run.sent)} alert(s); next launch in {format_countdown(run.soonest_secs)}")
    return run.soonest_secs

if __name__ == "__main__":
    args = parse_args()
    config = load_config()
    channel = None if args.no_alerts else build_channel(config)

    if args.once:
        one_cycle(config, channel)
        sys.exit(0)

    while True:
        try:
            soonest = one_cycle(config, channel)
            time.sleep(next_sleep(soonest) + random.randint(-5, 10))
        except Exception as e:
            print(f"Unexpected loop error: {e}")
            time.sleep(120)
