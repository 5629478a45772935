"""User registration — command and handler."""

from protean import handle
from protean.exceptions import InvalidOperationError, ValidationError
from protean.fields import String
from protean.utils.globals import current_domain

from identity.domain import identity
from identity.user.user import User
from shared.auth.roles import Role
from shared.logging import get_logger

logger = get_logger(__name__)

# Administrators are provisioned out of band (see manage.py create-admin)
SELF_SERVICE_ROLES = (Role.USER.value, Role.SELLER.value)


@identity.command(part_of="User")
class RegisterUser:
    """Create a new account with an already-hashed password."""

    username: String(required=True, min_length=3, max_length=50)
    email: String(required=True, max_length=254)
    password_hash: String(required=True, max_length=255)
    first_name: String(max_length=100)
    last_name: String(max_length=100)
    role: String(max_length=20)


@identity.command_handler(part_of=User)
class RegisterUserHandler:
    @handle(RegisterUser)
    def register_user(self, command):
        return register(command, allowed_roles=SELF_SERVICE_ROLES)


def register(command: RegisterUser, allowed_roles=tuple(Role.values())) -> str:
    role = command.role or Role.USER.value
    if role not in allowed_roles:
        raise ValidationError({"role": [f"Role must be one of: {', '.join(allowed_roles)}"]})

    repo = current_domain.repository_for(User)
    if repo.find_by_username(command.username) or repo.find_by_email(command.email):
        raise InvalidOperationError("Username or email already in use")

    user = User.register(
        username=command.username,
        email=command.email,
        password_hash=command.password_hash,
        first_name=command.first_name,
        last_name=command.last_name,
        role=role,
    )
    repo.add(user)

    logger.info("User registered", user_id=str(user.id), username=user.username, role=user.role)
    return str(user.id)
