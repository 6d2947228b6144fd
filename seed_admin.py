"""
Create an admin account. Admins cannot register through the API.

Usage:
    python seed_admin.py --name "Site Admin" --email admin@example.com --password secret
"""

import argparse
import logging
import sys

from accounts import ADMIN, register
from context import AppContext
from database import db
from errors import DuplicateAccount

logger = logging.getLogger("seed_admin")


def seed_admin(ctx: AppContext, name: str, email: str, password: str) -> bool:
    """Return True if the admin was created, False if the email is taken."""
    try:
        register(ctx, ADMIN, {"adminName": name, "adminEmail": email}, password)
    except DuplicateAccount:
        return False
    return True


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Create a Travel Buddy admin account")
    parser.add_argument("--name", required=True)
    parser.add_argument("--email", required=True)
    parser.add_argument("--password", required=True)
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")

    if db is None:
        logger.error("Database not configured. Set DATABASE_URL and DATABASE_NAME.")
        return 1

    if not seed_admin(AppContext(database=db), args.name, args.email, args.password):
        logger.error("Admin %s already exists", args.email)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
