"""Notifications bounded context — Cross-domain event consumer for email dispatch.

Consumes events from the other domains (Identity, Ordering, Catalogue) and
from the external Payments producer, renders an email for each, sends it
through the email channel and records the outcome as a Notification.
"""

from protean.domain import Domain

from shared.logging import configure_logging, get_logger

configure_logging()

notifications = Domain(name="notifications")

logger = get_logger(__name__)
