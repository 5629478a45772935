"""Email channel registry.

Provides singleton access to the email adapter. Uses the fake adapter by
default; the SMTP adapter is selected when ``SMTP_HOST`` is configured.
"""

from notifications.channel.email_port import EmailPort
from shared.config import get_settings

_email_channel: EmailPort | None = None


def get_email_channel() -> EmailPort:
    """Return the configured email adapter (created on first use)."""
    global _email_channel
    if _email_channel is None:
        settings = get_settings()
        if settings.smtp_host:
            from notifications.channel.smtp_email import SmtpEmailAdapter

            _email_channel = SmtpEmailAdapter(
                host=settings.smtp_host,
                port=settings.smtp_port,
                username=settings.smtp_user,
                password=settings.smtp_password,
                sender=settings.mail_from,
            )
        else:
            from notifications.channel.fake_email import FakeEmailAdapter

            _email_channel = FakeEmailAdapter()

    return _email_channel


def set_email_channel(adapter: EmailPort) -> None:
    """Override the active email adapter (useful for tests)."""
    global _email_channel
    _email_channel = adapter


def reset_channels():
    """Reset the email channel singleton (useful for testing)."""
    global _email_channel
    _email_channel = None
