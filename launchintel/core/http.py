# /launchintel/core/http.py
# Purpose: bounded-timeout JSON GET shared by every provider
import json
import time
from typing import Any, Dict, Optional

import requests

from launchintel.core.errors import FetchTimeoutError, HttpStatusError, NetworkError, ParseError
from launchintel.core.utils import dprint

DEFAULT_TIMEOUT_MS = 5000
CHUNK_SIZE = 8192

def _headers():
    return {
        "accept": "application/json",
        "user-agent": "launchintel/0.1",
    }

def fetch_json(url: str, params: Optional[Dict[str, Any]] = None, timeout_ms: Optional[int] = None) -> Any:
    """
    GET url and decode JSON. timeout_ms bounds the whole call, body included.
    Raises (never returns partial data):
      FetchTimeoutError  connect/read/total exceeded timeout_ms
      NetworkError       DNS / connection / other transport failure
      HttpStatusError    non-2xx
      ParseError         body is not JSON
    """
    timeout_ms = timeout_ms or DEFAULT_TIMEOUT_MS
    timeout = timeout_ms / 1000.0
    deadline = time.monotonic() + timeout
    dprint(f"GET {url} params={params} timeout={timeout}s")
    try:
        r = requests.get(url, params=params, headers=_headers(), timeout=timeout, stream=True)
    except requests.Timeout as e:
        raise FetchTimeoutError(f"timed out after {timeout_ms}ms: {url}") from e
    except requests.RequestException as e:
        raise NetworkError(f"{url}: {e}") from e

    try:
        if not 200 <= r.status_code < 300:
            raise HttpStatusError(url, r.status_code)
        body = bytearray()
        try:
            for chunk in r.iter_content(chunk_size=CHUNK_SIZE):
                body.extend(chunk)
                # per-read timeout alone lets a slow drip run forever
                if time.monotonic() > deadline:
                    raise FetchTimeoutError(f"timed out after {timeout_ms}ms reading body: {url}")
        except requests.Timeout as e:
            raise FetchTimeoutError(f"timed out after {timeout_ms}ms: {url}") from e
        except requests.RequestException as e:
            raise NetworkError(f"{url}: {e}") from e
    finally:
        r.close()

    try:
        return json.loads(bytes(body))
    except ValueError as e:
        raise ParseError(f"invalid JSON from {url}: {e}") from e
