"""Tests for the SMTP adapter with the SMTP client patched out."""

import smtplib
from unittest.mock import patch

from notifications.channel import get_email_channel, reset_channels, set_email_channel
from notifications.channel.fake_email import FakeEmailAdapter
from notifications.channel.smtp_email import SmtpEmailAdapter


def _adapter(**overrides):
    params = {"host": "smtp.example.com", "port": 587, "username": "mailer", "password": "secret"}
    params.update(overrides)
    return SmtpEmailAdapter(sender="no-reply@shopfront.test", **params)


class TestSmtpEmailAdapter:
    @patch("notifications.channel.smtp_email.smtplib.SMTP")
    def test_sends_multipart_message(self, smtp_cls):
        client = smtp_cls.return_value.__enter__.return_value

        result = _adapter().send("jane@example.com", "Hello", "Plain body", "<p>HTML body</p>")

        assert result["status"] == "sent"
        assert result["message_id"]
        smtp_cls.assert_called_once_with("smtp.example.com", 587, timeout=10.0)
        client.starttls.assert_called_once()
        client.login.assert_called_once_with("mailer", "secret")

        message = client.send_message.call_args.args[0]
        assert message["To"] == "jane@example.com"
        assert message["From"] == "no-reply@shopfront.test"
        assert message.is_multipart()

    @patch("notifications.channel.smtp_email.smtplib.SMTP")
    def test_skips_login_without_credentials(self, smtp_cls):
        client = smtp_cls.return_value.__enter__.return_value

        _adapter(username=None, password=None).send("jane@example.com", "Hello", "Plain body")

        client.login.assert_not_called()

    @patch("notifications.channel.smtp_email.smtplib.SMTP")
    def test_smtp_errors_are_reported_not_raised(self, smtp_cls):
        smtp_cls.return_value.__enter__.return_value.send_message.side_effect = smtplib.SMTPRecipientsRefused({})

        result = _adapter().send("jane@example.com", "Hello", "Plain body")

        assert result["status"] == "failed"
        assert result["message_id"] is None

    @patch("notifications.channel.smtp_email.smtplib.SMTP", side_effect=ConnectionRefusedError("refused"))
    def test_connection_errors_are_reported(self, smtp_cls):
        result = _adapter().send("jane@example.com", "Hello", "Plain body")
        assert result == {"message_id": None, "status": "failed", "error": "refused"}


class TestChannelSelection:
    def test_fake_adapter_without_smtp_host(self):
        assert isinstance(get_email_channel(), FakeEmailAdapter)

    def test_smtp_adapter_when_host_configured(self, monkeypatch):
        from shared.config import reset_settings

        monkeypatch.setenv("SMTP_HOST", "smtp.example.com")
        reset_settings()
        reset_channels()

        channel = get_email_channel()
        assert isinstance(channel, SmtpEmailAdapter)
        assert channel.host == "smtp.example.com"

    def test_override_replaces_the_adapter(self):
        adapter = FakeEmailAdapter()
        set_email_channel(adapter)
        assert get_email_channel() is adapter
