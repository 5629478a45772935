"""Email channel port.

Adapters never raise on delivery problems. ``send`` always returns a result
dict, built with ``sent`` or ``failed``, which the dispatcher turns into a
SENT or FAILED notification.
"""

from abc import ABC, abstractmethod

SENT = "sent"
FAILED = "failed"


def sent(message_id: str) -> dict:
    return {"message_id": message_id, "status": SENT}


def failed(error: str) -> dict:
    return {"message_id": None, "status": FAILED, "error": error}


class EmailPort(ABC):
    """Sends one email to one recipient."""

    @abstractmethod
    def send(self, to: str, subject: str, body: str, html_body: str | None = None) -> dict:
        """Deliver a plain-text email, with an optional HTML alternative.

        Returns:
            dict with keys: message_id, status (``SENT`` or ``FAILED``), error (on failure)
        """
        ...
