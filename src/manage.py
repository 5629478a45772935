"""Shopfront management CLI.

Provides commands to create and drop database schemas for all domains, and
to create admin accounts (self-registration only allows users and sellers).

Usage:
    python src/manage.py setup-db                     # Create all tables
    python src/manage.py drop-db --domain ordering    # Drop one domain's tables
    python src/manage.py create-admin --username root --email root@example.com
"""

import argparse
import getpass
import sys

DOMAIN_NAMES = ["identity", "cart", "ordering", "catalogue", "notifications"]


def _get_domain(name):
    if name == "identity":
        from identity.domain import identity as domain
    elif name == "cart":
        from cart.domain import cart as domain
    elif name == "ordering":
        from ordering.domain import ordering as domain
    elif name == "catalogue":
        from catalogue.domain import catalogue as domain
    elif name == "notifications":
        from notifications.domain import notifications as domain
    else:
        raise ValueError(f"Unknown domain: {name}")
    return domain


def setup_databases(domains=None):
    """Create database schemas for the specified (or all) domains."""
    from shared.db import setup_db

    for name in domains or DOMAIN_NAMES:
        domain = _get_domain(name)
        print(f"Initializing {name} domain...")
        domain.init()
        print(f"Creating {name} database schema...")
        touched = setup_db(domain)
        if touched:
            print(f"  {name} schema ready ({', '.join(touched)}).")
        else:
            print(f"  {name} uses no SQL provider, nothing to create.")

    print("Done.")


def drop_databases(domains=None):
    """Drop database schemas for the specified (or all) domains."""
    from shared.db import drop_db

    for name in domains or DOMAIN_NAMES:
        domain = _get_domain(name)
        print(f"Initializing {name} domain...")
        domain.init()
        print(f"Dropping {name} database schema...")
        drop_db(domain)
        print(f"  {name} schema dropped.")

    print("Done.")


def create_admin(username, email, password, first_name, last_name):
    """Register an account with the admin role."""
    from identity.domain import identity
    from identity.user.passwords import hash_password
    from identity.user.registration import RegisterUser, register
    from shared.auth.roles import Role

    identity.init()
    with identity.domain_context():
        user_id = register(
            RegisterUser(
                username=username,
                email=email,
                password_hash=hash_password(password),
                first_name=first_name,
                last_name=last_name,
                role=Role.ADMIN.value,
            )
        )
    print(f"Admin {username} created with id {user_id}.")
    return user_id


def main():
    parser = argparse.ArgumentParser(description="Shopfront management")
    subparsers = parser.add_subparsers(dest="command", required=True)

    setup_parser = subparsers.add_parser("setup-db", help="Create all database tables")
    setup_parser.add_argument(
        "--domain",
        choices=DOMAIN_NAMES,
        nargs="*",
        help="Specific domain(s) to set up (default: all)",
    )

    drop_parser = subparsers.add_parser("drop-db", help="Drop all database tables")
    drop_parser.add_argument(
        "--domain",
        choices=DOMAIN_NAMES,
        nargs="*",
        help="Specific domain(s) to drop (default: all)",
    )

    admin_parser = subparsers.add_parser("create-admin", help="Create an admin account")
    admin_parser.add_argument("--username", required=True)
    admin_parser.add_argument("--email", required=True)
    admin_parser.add_argument("--first-name", default="Admin")
    admin_parser.add_argument("--last-name", default="User")
    admin_parser.add_argument("--password", help="Prompted for when omitted")

    args = parser.parse_args()

    if args.command == "setup-db":
        setup_databases(args.domain)
    elif args.command == "drop-db":
        drop_databases(args.domain)
    elif args.command == "create-admin":
        password = args.password or getpass.getpass("Password: ")
        create_admin(args.username, args.email, password, args.first_name, args.last_name)
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
