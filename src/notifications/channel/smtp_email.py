"""SMTP email adapter.

Opens one connection per message with STARTTLS. Failures are reported in
the result rather than raised, so a bad send marks the notification FAILED.
"""

import smtplib
from email.message import EmailMessage
from email.utils import make_msgid

from notifications.channel.email_port import EmailPort, failed, sent
from shared.logging import get_logger

logger = get_logger(__name__)


class SmtpEmailAdapter(EmailPort):
    def __init__(
        self,
        host: str,
        port: int = 587,
        username: str | None = None,
        password: str | None = None,
        sender: str = "no-reply@localhost",
        timeout: float = 10.0,
    ):
        self.host = host
        self.port = port
        self.username = username
        self.password = password
        self.sender = sender
        self.timeout = timeout

    def _build_message(self, to, subject, body, html_body) -> EmailMessage:
        message = EmailMessage()
        message["From"] = self.sender
        message["To"] = to
        message["Subject"] = subject
        message["Message-ID"] = make_msgid()
        message.set_content(body)
        if html_body:
            message.add_alternative(html_body, subtype="html")
        return message

    def send(self, to: str, subject: str, body: str, html_body: str | None = None) -> dict:
        message = self._build_message(to, subject, body, html_body)
        try:
            with smtplib.SMTP(self.host, self.port, timeout=self.timeout) as client:
                client.starttls()
                if self.username:
                    client.login(self.username, self.password or "")
                client.send_message(message)
        except (smtplib.SMTPException, OSError) as exc:
            logger.error("SMTP send failed", to=to, host=self.host, error=str(exc))
            return failed(str(exc))

        return sent(message["Message-ID"])
