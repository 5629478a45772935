import pytest
from protean.integrations.pytest import DomainFixture


@pytest.fixture(scope="session")
def ordering_bed():
    from ordering.domain import ordering

    bed = DomainFixture(ordering)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(ordering_bed):
    """Push the domain context before each test, clear its stores after."""
    with ordering_bed.domain_context():
        yield

        from protean import current_domain

        for _, provider in current_domain.providers.items():
            provider._data_reset()
        for _, broker in current_domain.brokers.items():
            broker._data_reset()
        current_domain.event_store.store._data_reset()


@pytest.fixture()
def upstream():
    """Install an in-memory cart/product client for the duration of a test."""
    from ordering.clients import reset_upstream_client, set_upstream_client
    from ordering.clients.fake_adapter import FakeUpstreamClient

    client = FakeUpstreamClient()
    set_upstream_client(client)
    yield client
    reset_upstream_client()


@pytest.fixture()
def shipping_address():
    return {"street": "1 Main St", "city": "Pune", "state": "MH", "pincode": "411001", "country": "India"}
