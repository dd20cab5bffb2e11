#!/usr/bin/env python3
"""
One-time provisioning of the first administrator.

Credentials come from the command line or from ADMIN_NAME / ADMIN_EMAIL /
ADMIN_PASSWORD. Nothing is hardcoded and there is no HTTP endpoint for this.
Running it against an existing account promotes that account to admin.
"""
import argparse
import getpass
import sys
import os

# Add the app directory to the path
app_dir = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'app')
sys.path.insert(0, app_dir)

from clubhub.constant_file import ADMIN_NAME, ADMIN_EMAIL, ADMIN_PASSWORD
from clubhub.controller.auth_controller import create_admin_user
from clubhub.database import store
import clubhub.main  # registers every model before tables are created


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Create or promote the club administrator")
    parser.add_argument("--name", default=ADMIN_NAME)
    parser.add_argument("--email", default=ADMIN_EMAIL)
    parser.add_argument("--password", default=ADMIN_PASSWORD)
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    if not args.email:
        print("An admin email is required (--email or ADMIN_EMAIL)")
        return 1
    password = args.password or getpass.getpass("Admin password: ")
    if len(password) < 8:
        print("Admin password must be at least 8 characters")
        return 1

    db = store.session()
    try:
        admin = create_admin_user(db, args.name, args.email, password)
        print(f"Admin ready: {admin.email} (id {admin.id})")
        return 0
    except Exception as e:
        db.rollback()
        print(f"Failed to create admin: {e}")
        return 1
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main())
