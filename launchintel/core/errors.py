# /launchintel/core/errors.py
# Purpose: one error taxonomy for fetch, parse and delivery failures


class LaunchIntelError(Exception):
    """Base class for everything this package raises on purpose."""


class NetworkError(LaunchIntelError):
    """Connection / DNS failure talking to an upstream API."""


class FetchTimeoutError(LaunchIntelError, TimeoutError):
    """Request exceeded fetch_timeout_ms and was aborted."""


class HttpStatusError(LaunchIntelError):
    def __init__(self, url: str, status_code: int):
        super().__init__(f"HTTP {status_code} for {url}")
        self.url = url
        self.status_code = status_code


class ParseError(LaunchIntelError):
    """Malformed JSON in a response body or a cache file."""


class DeliveryError(LaunchIntelError):
    """External delivery channel refused or failed to send."""
