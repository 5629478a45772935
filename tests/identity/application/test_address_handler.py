import pytest
from identity.user.addresses import AddAddress, RemoveAddress
from identity.user.passwords import hash_password
from identity.user.user import User
from protean import current_domain
from protean.exceptions import ObjectNotFoundError


@pytest.fixture()
def user_id():
    user = User.register(
        username="janedoe",
        email="jane@example.com",
        password_hash=hash_password("s3cret", iterations=1000),
    )
    current_domain.repository_for(User).add(user)
    return str(user.id)


def _add(user_id, **overrides):
    params = {"street": "1 Main St", "city": "Pune", "state": "MH", "pincode": "411001", "country": "India"}
    params.update(overrides)
    return current_domain.process(AddAddress(user_id=user_id, **params), asynchronous=False)


class TestAddAddress:
    def test_returns_the_new_address(self, user_id):
        address = _add(user_id)
        assert address["street"] == "1 Main St"
        assert address["is_default"] is True

    def test_address_is_persisted(self, user_id):
        _add(user_id)
        _add(user_id, street="2 Side St", is_default=True)

        user = current_domain.repository_for(User).get(user_id)
        assert len(user.addresses) == 2
        defaults = [a.street for a in user.addresses if a.is_default]
        assert defaults == ["2 Side St"]


class TestRemoveAddress:
    def test_returns_remaining_addresses(self, user_id):
        first = _add(user_id)
        _add(user_id, street="2 Side St")

        remaining = current_domain.process(RemoveAddress(user_id=user_id, address_id=first["id"]), asynchronous=False)

        assert [a["street"] for a in remaining] == ["2 Side St"]
        assert remaining[0]["is_default"] is True

    def test_missing_address(self, user_id):
        with pytest.raises(ObjectNotFoundError):
            current_domain.process(RemoveAddress(user_id=user_id, address_id="missing"), asynchronous=False)
