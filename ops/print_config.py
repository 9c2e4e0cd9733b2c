import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from launchintel.core.config import load_config
from launchintel.core.utils import _debug_enabled

c = load_config()

print("DEBUG:", _debug_enabled())
print("LL2 URL:", c.apis["launch_library"]["base_url"] + c.apis["launch_library"]["upcoming_path"])
print("SpaceX URL:", c.apis["spacex"]["base_url"] + c.apis["spacex"]["upcoming_path"])
print("TARGET_IDS:", c.target_ids)
print("TARGET_KEYWORDS:", c.target_keywords)
print("CACHE_TTL_MS:", c.cache_ttl_ms, "FETCH_TIMEOUT_MS:", c.fetch_timeout_ms)
print("ALERT_CLEANUP_TTL_MS:", c.alert_cleanup_ttl_ms)
print("WINDOWS:", ", ".join(w.key for w in c.windows))
print("LAUNCHES CACHE:", c.paths["launches_cache"])
print("ALERTS STATE:", c.paths["alerts_state"])
print("ALERT_CHANNEL_ID:", c.channel_id or "(print-only)")
print("DELIVERY_METHOD:", c.delivery.get("method"), "CLI:", c.delivery.get("cli"))
print("TWILIO_SID set:", bool(c.delivery.get("twilio_sid")))
print("TWILIO_TOKEN set:", bool(c.delivery.get("twilio_token")))
print("TWILIO_FROM:", c.delivery.get("twilio_from"))
print("TWILIO_MESSAGING_SID:", bool(c.delivery.get("twilio_messaging_sid")))
