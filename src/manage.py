"""Craft Bazaar management CLI.

Creates and drops database schemas for the bounded contexts, and bootstraps
administrator accounts (the HTTP API never grants the admin role).

Usage:
    python src/manage.py setup-db                       # Create all tables
    python src/manage.py drop-db --domain inbox         # Drop one context's tables
    python src/manage.py create-admin --email a@b.io --username admin --password s3cret!
"""

import argparse
import sys

DOMAIN_NAMES = ["identity", "catalogue", "ordering", "inbox"]


def _domains():
    from catalogue.domain import catalogue
    from identity.domain import identity
    from inbox.domain import inbox
    from ordering.domain import ordering

    return {"identity": identity, "catalogue": catalogue, "ordering": ordering, "inbox": inbox}


def setup_databases(domains=None):
    """Create database schemas for the specified (or all) domains."""
    from shared.db import setup_db

    all_domains = _domains()
    targets = {d: all_domains[d] for d in domains} if domains else all_domains

    for name, domain in targets.items():
        print(f"Initializing {name} domain...")
        domain.init()
        print(f"Creating {name} database schema...")
        setup_db(domain)
        print(f"  {name} schema ready.")

    print("Done.")


def drop_databases(domains=None):
    """Drop database schemas for the specified (or all) domains."""
    from shared.db import drop_db

    all_domains = _domains()
    targets = {d: all_domains[d] for d in domains} if domains else all_domains

    for name, domain in targets.items():
        print(f"Initializing {name} domain...")
        domain.init()
        print(f"Dropping {name} database schema...")
        drop_db(domain)
        print(f"  {name} schema dropped.")

    print("Done.")


def create_admin(email, username, password, phone=None):
    """Register an account (or reuse the one with this email) and promote it to admin."""
    from protean.utils.globals import current_domain

    from identity.domain import identity
    from identity.user.registration import PromoteUser, RegisterUser
    from identity.user.user import User

    identity.init()
    with identity.domain_context():
        existing = current_domain.repository_for(User).find_by_email(email)
        if existing is not None:
            user_id = str(existing.id)
            print(f"User {email} already exists.")
        else:
            user_id = current_domain.process(
                RegisterUser(username=username, email=email, phone=phone, password=password),
                asynchronous=False,
            )
            print(f"Registered {email}.")

        current_domain.process(PromoteUser(user_id=user_id), asynchronous=False)

    print(f"  {email} is now an admin ({user_id}).")
    return user_id


def main():
    parser = argparse.ArgumentParser(description="Craft Bazaar management")
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

    admin_parser = subparsers.add_parser("create-admin", help="Create or promote an administrator account")
    admin_parser.add_argument("--email", required=True)
    admin_parser.add_argument("--username", required=True)
    admin_parser.add_argument("--password", required=True)
    admin_parser.add_argument("--phone")

    args = parser.parse_args()

    if args.command == "setup-db":
        setup_databases(args.domain)
    elif args.command == "drop-db":
        drop_databases(args.domain)
    elif args.command == "create-admin":
        create_admin(args.email, args.username, args.password, phone=args.phone)
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
