import pytest
from protean.integrations.pytest import DomainFixture


@pytest.fixture(scope="session")
def cart_bed():
    from cart.domain import cart

    bed = DomainFixture(cart)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(cart_bed):
    """Push the domain context before each test, clear its stores after."""
    with cart_bed.domain_context():
        yield

        from protean import current_domain

        for _, provider in current_domain.providers.items():
            provider._data_reset()
        for _, broker in current_domain.brokers.items():
            broker._data_reset()
        current_domain.event_store.store._data_reset()
