"""User aggregate root with Address entity and FullName value object."""

from datetime import UTC, datetime

from protean import atomic_change, invariant
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.fields import Boolean, DateTime, HasMany, String, ValueObject

from identity.domain import identity
from identity.shared.email import is_valid_email
from identity.user.events import AddressAdded, AddressRemoved, UserRegistered
from shared.auth.roles import Role


@identity.value_object(part_of="User")
class FullName:
    """A user's given and family name."""

    first_name: String(max_length=100)
    last_name: String(max_length=100)


@identity.entity(part_of="User")
class Address:
    """A shipping address in the user's address book.

    Exactly one address is the default whenever the book is non-empty.
    """

    street: String(required=True, max_length=255)
    city: String(required=True, max_length=100)
    state: String(max_length=100)
    pincode: String(required=True, max_length=20)
    country: String(required=True, max_length=100)
    is_default: Boolean(default=False)


@identity.aggregate
class User:
    """A person who can sign in: a shopper, a seller or an administrator.

    Usernames and emails are unique across all users. The password is only
    ever stored hashed.
    """

    username: String(required=True, min_length=3, max_length=50, unique=True)
    email: String(required=True, max_length=254, unique=True)
    password_hash: String(required=True, max_length=255)
    full_name: ValueObject(FullName)
    role: String(choices=Role, default=Role.USER.value)
    addresses: HasMany(Address)
    registered_at: DateTime()

    @invariant.post
    def email_must_be_well_formed(self):
        if not is_valid_email(self.email):
            raise ValidationError({"email": ["Invalid email address"]})

    @invariant.post
    def exactly_one_default_address_when_addresses_exist(self):
        if not self.addresses:
            return
        defaults = [a for a in self.addresses if a.is_default]
        if len(defaults) != 1:
            raise ValidationError({"addresses": ["Exactly one address must be marked as default"]})

    @classmethod
    def register(cls, username, email, password_hash, first_name=None, last_name=None, role=Role.USER.value):
        now = datetime.now(UTC)
        user = cls(
            username=username,
            email=email.lower(),
            password_hash=password_hash,
            full_name=FullName(first_name=first_name, last_name=last_name),
            role=role or Role.USER.value,
            registered_at=now,
        )
        user.raise_(
            UserRegistered(
                user_id=str(user.id),
                username=user.username,
                email=user.email,
                first_name=first_name,
                last_name=last_name,
                role=user.role,
                registered_at=now,
            )
        )
        return user

    def add_address(self, street, city, pincode, country, state=None, is_default=False):
        # First address is always default
        if not self.addresses:
            is_default = True

        with atomic_change(self):
            if is_default:
                for addr in self.addresses:
                    if addr.is_default:
                        addr.is_default = False

            address = Address(
                street=street,
                city=city,
                state=state,
                pincode=pincode,
                country=country,
                is_default=is_default,
            )
            self.add_addresses(address)

        self.raise_(
            AddressAdded(
                user_id=str(self.id),
                address_id=str(address.id),
                street=street,
                city=city,
                state=state,
                pincode=pincode,
                country=country,
                is_default=bool(is_default),
            )
        )
        return address

    def remove_address(self, address_id):
        address = next((a for a in self.addresses if str(a.id) == str(address_id)), None)
        if address is None:
            raise ObjectNotFoundError("Address not found")

        was_default = address.is_default

        with atomic_change(self):
            self.remove_addresses(address)

            # Promote the first remaining address if the default went away
            if was_default and self.addresses:
                self.addresses[0].is_default = True

        self.raise_(AddressRemoved(user_id=str(self.id), address_id=str(address_id)))

    def to_public_dict(self) -> dict:
        """Everything about the user that is safe to hand back to a client."""
        return {
            "id": str(self.id),
            "username": self.username,
            "email": self.email,
            "full_name": {
                "first_name": self.full_name.first_name if self.full_name else None,
                "last_name": self.full_name.last_name if self.full_name else None,
            },
            "role": self.role,
            "addresses": [address_to_dict(a) for a in self.addresses],
        }


def address_to_dict(address: Address) -> dict:
    return {
        "id": str(address.id),
        "street": address.street,
        "city": address.city,
        "state": address.state,
        "pincode": address.pincode,
        "country": address.country,
        "is_default": bool(address.is_default),
    }


@identity.repository(part_of=User)
class UserRepository:
    """Lookups by the natural keys users sign in with."""

    def find_by_username(self, username: str) -> User | None:
        users = self._dao.query.filter(username=username).all().items
        return users[0] if users else None

    def find_by_email(self, email: str) -> User | None:
        users = self._dao.query.filter(email=email.lower()).all().items
        return users[0] if users else None

    def find_by_login(self, username: str | None = None, email: str | None = None) -> User | None:
        """Find a user by username or email, whichever matches first."""
        user = self.find_by_username(username) if username else None
        if user is None and email:
            user = self.find_by_email(email)
        return user
