"""User address book — commands and handler."""

from protean import handle
from protean.fields import Boolean, Identifier, String
from protean.utils.globals import current_domain

from identity.domain import identity
from identity.user.user import User, address_to_dict


@identity.command(part_of="User")
class AddAddress:
    """Add a shipping address to a user's address book."""

    user_id: Identifier(required=True)
    street: String(required=True, max_length=255)
    city: String(required=True, max_length=100)
    state: String(max_length=100)
    pincode: String(required=True, max_length=20)
    country: String(required=True, max_length=100)
    is_default: Boolean(default=False)


@identity.command(part_of="User")
class RemoveAddress:
    """Remove a shipping address from a user's address book."""

    user_id: Identifier(required=True)
    address_id: Identifier(required=True)


@identity.command_handler(part_of=User)
class ManageAddressesHandler:
    @handle(AddAddress)
    def add_address(self, command):
        repo = current_domain.repository_for(User)
        user = repo.get(command.user_id)
        address = user.add_address(
            street=command.street,
            city=command.city,
            state=command.state,
            pincode=command.pincode,
            country=command.country,
            is_default=bool(command.is_default),
        )
        repo.add(user)
        return address_to_dict(address)

    @handle(RemoveAddress)
    def remove_address(self, command):
        repo = current_domain.repository_for(User)
        user = repo.get(command.user_id)
        user.remove_address(command.address_id)
        repo.add(user)
        return [address_to_dict(a) for a in user.addresses]
