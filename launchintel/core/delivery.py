# /launchintel/core/delivery.py
# Purpose: pluggable "send text to channel X" used by the alert engine
# Alerts always go to stdout first; a channel is best-effort on top of that.

import subprocess
from typing import Optional

from launchintel.core.config import Config
from launchintel.core.errors import DeliveryError

try:
    from twilio.rest import Client
except ImportError:
    Client = None


class DeliveryChannel:
    name = "none"

    def send(self, message: str, channel_id: str) -> None:
        """Deliver message or raise DeliveryError."""
        raise NotImplementedError


class CliChannel(DeliveryChannel):
    """Shells out to `<cli> message send --channel <id> --message <text>`."""
    name = "cli"

    def __init__(self, cli: str = "openclaw", timeout_secs: float = 30.0):
        self.cli = cli
        self.timeout_secs = timeout_secs

    def send(self, message: str, channel_id: str) -> None:
        cmd = [self.cli, "message", "send", "--channel", channel_id, "--message", message]
        try:
            subprocess.run(cmd, check=True, capture_output=True, timeout=self.timeout_secs)
        except (OSError, ValueError, subprocess.SubprocessError) as e:
            # ValueError: NUL byte in an argument
            raise DeliveryError(f"{self.cli} failed: {e}") from e


class TwilioChannel(DeliveryChannel):
    """SMS through Twilio; channel_id is the destination phone number."""
    name = "twilio"

    def __init__(self, sid: str, token: str, from_number: str = "", messaging_sid: str = ""):
        self.sid = sid
        self.token = token
        self.from_number = from_number
        self.messaging_sid = messaging_sid
        self._client = None

    def client(self):
        if self._client is None:
            if Client is None:
                raise DeliveryError("Twilio client not available. pip install twilio")
            if not (self.sid and self.token):
                raise DeliveryError("Missing TWILIO_SID/TWILIO_TOKEN")
            self._client = Client(self.sid, self.token)
        return self._client

    def send(self, message: str, channel_id: str) -> None:
        client = self.client()
        try:
            # Prefer Messaging Service for SMS (handles carrier rules/A2P better)
            if self.messaging_sid:
                msg = client.messages.create(
                    to=channel_id,
                    messaging_service_sid=self.messaging_sid,
                    body=message,
                )
            else:
                msg = client.messages.create(
                    to=channel_id,
                    from_=self.from_number,
                    body=message,
                )
        except Exception as e:
            raise DeliveryError(f"SMS failed: {e}") from e
        print(f"✅ SMS sent successfully (SID={msg.sid})")


def build_channel(config: Config) -> Optional[DeliveryChannel]:
    """Channel named by delivery.method, or None for print-only."""
    d = config.delivery
    method = (d.get("method") or "none").lower()
    if method == "cli":
        return CliChannel(d.get("cli") or "openclaw")
    if method == "twilio":
        return TwilioChannel(
            d.get("twilio_sid", ""),
            d.get("twilio_token", ""),
            d.get("twilio_from", ""),
            d.get("twilio_messaging_sid", ""),
        )
    if method != "none":
        print(f"⚠️ [Alerts] unknown delivery method {method!r}; alerts are print-only")
    return None


def deliver(message: str, channel: Optional[DeliveryChannel], channel_id: str) -> bool:
    """Print, then try the channel. True only if the channel accepted it."""
    print(message)
    if channel is None or not channel_id:
        return False
    try:
        channel.send(message, channel_id)
    except Exception as e:
        print(f"⚠️ [Alerts] {channel.name} delivery failed, message was still printed: {e}")
        return False
    print(f"📨 [Alerts] alert delivered via {channel.name} (channel {channel_id})")
    return True
