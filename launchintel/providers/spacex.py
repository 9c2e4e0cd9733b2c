# /launchintel/providers/spacex.py
# Purpose: SpaceX API v5 adapter (secondary source, different schema)
# Records carry no usable pad location, so they're mapped onto a placeholder
# pad that can only pass the spaceport filter by keyword ("spacex").

from typing import Dict, List

from launchintel.core.config import Config
from launchintel.core.errors import LaunchIntelError, ParseError
from launchintel.core.http import fetch_json
from launchintel.core.models import ProviderResult
from launchintel.core.utils import safe_get

NAME = "SpaceX API"

PLACEHOLDER_PAD = "SpaceX Pad"
PLACEHOLDER_LOCATION = "SpaceX Facility"
PLACEHOLDER_LOCATION_ID = 0

def to_primary_shape(raw: Dict) -> Dict:
    """Map one SpaceX launch onto the Launch Library record layout."""
    return {
        "name": raw.get("name"),
        "net": raw.get("date_utc"),
        "status": {"name": "Confirmed"},
        "pad": {
            "name": PLACEHOLDER_PAD,
            "location": {"name": PLACEHOLDER_LOCATION, "id": PLACEHOLDER_LOCATION_ID},
        },
        "image": safe_get(raw, "links.patch.small", None),
    }

def fetch_upcoming(config: Config) -> ProviderResult:
    """Upcoming launches, already mapped via to_primary_shape. Never raises."""
    api = config.apis["spacex"]
    url = f"{api['base_url']}{api['upcoming_path']}"
    try:
        payload = fetch_json(url, timeout_ms=config.fetch_timeout_ms)
        if not isinstance(payload, list):
            raise ParseError(f"expected a list from {url}, got {type(payload).__name__}")
    except LaunchIntelError as e:
        print(f"⚠️ [Launch] {NAME} error ({type(e).__name__}): {e}")
        return ProviderResult(NAME, ok=False, error=str(e))
    rows: List[Dict] = [to_primary_shape(r) for r in payload if isinstance(r, dict)]
    print(f"✅ [Launch] fetched {len(rows)} launches from {NAME}")
    return ProviderResult(NAME, ok=True, data=rows)
