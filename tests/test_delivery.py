"""Tests for delivery channels and the print-then-send wrapper."""

import subprocess
from unittest.mock import MagicMock, patch

import pytest

from launchintel.core import delivery
from launchintel.core.delivery import CliChannel, TwilioChannel, build_channel, deliver
from launchintel.core.errors import DeliveryError


class TestCliChannel:

    def test_runs_cli_with_argument_list(self):
        with patch("launchintel.core.delivery.subprocess.run") as run:
            CliChannel("mycli").send('T-10 "quoted"\nWatch live!', "chan-1")
        cmd = run.call_args.args[0]
        assert cmd == ["mycli", "message", "send", "--channel", "chan-1",
                       "--message", 'T-10 "quoted"\nWatch live!']
        assert run.call_args.kwargs["check"] is True

    def test_missing_binary_is_delivery_error(self):
        with patch("launchintel.core.delivery.subprocess.run", side_effect=FileNotFoundError("mycli")):
            with pytest.raises(DeliveryError):
                CliChannel("mycli").send("hi", "chan")

    def test_nonzero_exit_is_delivery_error(self):
        err = subprocess.CalledProcessError(1, ["mycli"])
        with patch("launchintel.core.delivery.subprocess.run", side_effect=err):
            with pytest.raises(DeliveryError):
                CliChannel("mycli").send("hi", "chan")

    def test_nul_byte_in_message_is_delivery_error(self):
        with patch("launchintel.core.delivery.subprocess.run",
                   side_effect=ValueError("embedded null byte")):
            with pytest.raises(DeliveryError):
                CliChannel("mycli").send("bad\x00text", "chan")


class TestTwilioChannel:

    def test_sends_via_messaging_service(self):
        client = MagicMock()
        with patch.object(delivery, "Client", return_value=client) as ctor:
            TwilioChannel("AC1", "tok", messaging_sid="MG1").send("hello", "+15550001111")
        ctor.assert_called_once_with("AC1", "tok")
        client.messages.create.assert_called_once_with(
            to="+15550001111", messaging_service_sid="MG1", body="hello"
        )

    def test_sends_from_number(self):
        client = MagicMock()
        with patch.object(delivery, "Client", return_value=client):
            TwilioChannel("AC1", "tok", from_number="+15559990000").send("hello", "+15550001111")
        client.messages.create.assert_called_once_with(
            to="+15550001111", from_="+15559990000", body="hello"
        )

    def test_missing_credentials(self):
        with pytest.raises(DeliveryError):
            TwilioChannel("", "").send("hello", "+15550001111")

    def test_api_failure_is_delivery_error(self):
        client = MagicMock()
        client.messages.create.side_effect = RuntimeError("21211 invalid To")
        with patch.object(delivery, "Client", return_value=client):
            with pytest.raises(DeliveryError):
                TwilioChannel("AC1", "tok", from_number="+1").send("hello", "bad")


class TestBuildChannel:

    def test_methods(self, make_config):
        assert isinstance(build_channel(make_config(delivery={"method": "cli", "cli": "x"})), CliChannel)
        assert isinstance(build_channel(make_config(delivery={"method": "twilio"})), TwilioChannel)
        assert build_channel(make_config(delivery={"method": "none"})) is None
        assert build_channel(make_config(delivery={"method": "pigeon"})) is None


class TestDeliver:

    def test_always_prints(self, capsys):
        assert deliver("🚀 hello", None, "chan") is False
        assert "🚀 hello" in capsys.readouterr().out

    def test_failure_logged_not_raised(self, capsys):
        channel = MagicMock()
        channel.name = "mock"
        channel.send.side_effect = DeliveryError("nope")
        assert deliver("msg", channel, "chan") is False
        assert "delivery failed" in capsys.readouterr().out

    def test_success(self):
        channel = MagicMock()
        channel.name = "mock"
        assert deliver("msg", channel, "chan") is True
        channel.send.assert_called_once_with("msg", "chan")

    def test_unexpected_channel_error_logged_not_raised(self, capsys):
        channel = MagicMock()
        channel.name = "webhook"
        channel.send.side_effect = RuntimeError("webhook exploded")
        assert deliver("msg", channel, "chan") is False
        out = capsys.readouterr().out
        assert "webhook delivery failed" in out
        assert "webhook exploded" in out
