import sys, time
from datetime import datetime, timedelta, timezone
from pathlib import Path
sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from launchintel.core.config import load_config
from launchintel.core.alerts import check_alerts
from launchintel.core.delivery import build_channel

if __name__ == "__main__":
    config = load_config()
    net = (datetime.now(timezone.utc) + timedelta(minutes=9)).strftime("%Y-%m-%dT%H:%M:%SZ")
    launches = [{
        "name": f"FORCE TEST LAUNCH {int(time.time())}",
        "status": "Go",
        "net": net,                  # 9 minutes -> inside the default 10m window
        "pad": "Test Pad",
        "location": "Test Location",
        "image": None,
    }]
    run = check_alerts(config, channel=build_channel(config), launches=launches)
    print("sent:", len(run.sent))
