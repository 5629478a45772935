"""Domain events for the User aggregate."""

from protean.fields import Boolean, DateTime, Identifier, String

from identity.domain import identity


@identity.event(part_of="User")
class UserRegistered:
    """A new user account was created."""

    __version__ = 1

    user_id: Identifier(required=True)
    username: String(required=True)
    email: String(required=True)
    first_name: String()
    last_name: String()
    role: String(required=True)
    registered_at: DateTime(required=True)


@identity.event(part_of="User")
class AddressAdded:
    """A shipping address was added to the user's address book."""

    __version__ = 1

    user_id: Identifier(required=True)
    address_id: Identifier(required=True)
    street: String(required=True)
    city: String(required=True)
    state: String()
    pincode: String(required=True)
    country: String(required=True)
    is_default: Boolean(required=True)


@identity.event(part_of="User")
class AddressRemoved:
    """A shipping address was removed from the user's address book."""

    __version__ = 1

    user_id: Identifier(required=True)
    address_id: Identifier(required=True)
