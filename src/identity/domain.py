"""Identity bounded context — user accounts, credentials and shipping addresses.

Issues the access tokens every other context verifies, and publishes
UserRegistered so Notifications can greet new users.
"""

from protean.domain import Domain

from shared.logging import configure_logging, get_logger

configure_logging()

logger = get_logger(__name__)

# Domain Composition Root
identity = Domain(name="identity")
