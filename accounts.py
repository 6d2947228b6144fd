"""
Registration and login for riders, drivers and admins.

The three account kinds only differ in collection, field names and the
messages shown to the client, so they share one implementation
parameterized by AccountKind.
"""

import logging
from dataclasses import dataclass
from typing import Type

from pydantic import BaseModel

from context import AppContext
from errors import BadCredential, DuplicateAccount, NotFound
from schemas import Admin, Driver, User
from security import hash_password, verify_password

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AccountKind:
    name: str
    collection: str
    schema: Type[BaseModel]
    email_field: str
    password_field: str
    # key the stored record is returned under on login
    record_key: str
    registered_message: str
    duplicate_message: str
    not_found_message: str
    welcome_message: str
    bad_password_message: str = "Incorrect Password !"


RIDER = AccountKind(
    name="rider",
    collection="user",
    schema=User,
    email_field="userEmail",
    password_field="userPassword",
    record_key="user",
    registered_message="Registration Success !",
    duplicate_message="User already exist !",
    not_found_message="User not found !",
    welcome_message="Welcome",
)

DRIVER = AccountKind(
    name="driver",
    collection="driver",
    schema=Driver,
    email_field="driverEmail",
    password_field="driverPassword",
    record_key="driver",
    registered_message="Driver Registration Success !",
    duplicate_message="Driver already exists !",
    not_found_message="Driver not found !",
    welcome_message="Welcome Driver",
)

ADMIN = AccountKind(
    name="admin",
    collection="admin",
    schema=Admin,
    email_field="adminEmail",
    password_field="adminPassword",
    record_key="admin",
    registered_message="Admin Registration Success !",
    duplicate_message="Admin already exists !",
    not_found_message="Admin not found !",
    welcome_message="Welcome",
)


def normalize_email(email: str) -> str:
    """Emails are matched case-insensitively and without surrounding whitespace."""
    return email.strip().lower()


def register(ctx: AppContext, kind: AccountKind, profile: dict, secret: str) -> None:
    """
    Create an account of the given kind.

    `profile` holds the stored fields (without the password). Raises
    DuplicateAccount when the email is already registered for this kind.
    The existence check and the insert are two separate store calls.
    """
    repo = ctx.repository(kind.collection)
    email = normalize_email(profile[kind.email_field])
    profile = {**profile, kind.email_field: email}

    if repo.find_by_email(kind.email_field, email):
        logger.warning("Duplicate %s registration for %s", kind.name, email)
        raise DuplicateAccount(kind.duplicate_message)

    record = kind.schema(**profile, **{kind.password_field: hash_password(secret)})
    repo.insert(record)
    logger.info("Registered %s %s", kind.name, email)


def login(ctx: AppContext, kind: AccountKind, email: str, secret: str) -> dict:
    """Return the stored account record when `secret` matches its password hash."""
    email = normalize_email(email)
    account = ctx.repository(kind.collection).find_by_email(kind.email_field, email)
    if not account:
        logger.warning("Login for unknown %s %s", kind.name, email)
        raise NotFound(kind.not_found_message)

    if not verify_password(secret, account.get(kind.password_field)):
        logger.warning("Wrong password for %s %s", kind.name, email)
        raise BadCredential(kind.bad_password_message)

    logger.info("%s %s logged in", kind.name.capitalize(), email)
    return account
