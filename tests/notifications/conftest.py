import pytest
from protean.integrations.pytest import DomainFixture


@pytest.fixture(scope="session")
def notifications_bed():
    from notifications.domain import notifications

    bed = DomainFixture(notifications)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(notifications_bed):
    """Push the domain context before each test, clear its stores after."""
    from notifications.channel import reset_channels

    with notifications_bed.domain_context():
        yield

        from protean import current_domain

        for _, provider in current_domain.providers.items():
            provider._data_reset()
        for _, broker in current_domain.brokers.items():
            broker._data_reset()
        current_domain.event_store.store._data_reset()
    reset_channels()


@pytest.fixture()
def outbox():
    """The in-memory email adapter every notification is sent through."""
    from notifications.channel import get_email_channel

    return get_email_channel()


def notifications_for(recipient_id):
    from notifications.notification.notification import Notification
    from protean.utils.globals import current_domain

    repo = current_domain.repository_for(Notification)
    return repo._dao.query.filter(recipient_id=recipient_id).all().items


@pytest.fixture()
def find_notifications():
    return notifications_for
