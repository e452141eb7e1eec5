"""
Users
-----

Registration and login.
"""
from typing import Dict

from tambula import logger
from tambula.service.passwords import hash_password, check_password, placeholder_hash
from tambula.service.verify_token import TokenVerifier
from tambula.store import PersistentStore, UniqueConstraintError


class UserExistsError(Exception):
    def __init__(self, errors: Dict[str, str]):
        super().__init__("Username or email already exists")
        self.errors = errors


class InvalidCredentialsError(Exception):
    """Raised for both unknown users and wrong passwords, so the two can't be told apart."""

    def __init__(self):
        super().__init__("Invalid username or password")


async def register_user(store: PersistentStore, username: str, password: str, email: str, name: str):
    """
    Creates a new user with a hashed password.

    :raises UserExistsError: When a user with the given username or email already exists.
    """
    existing = await store.get_user(username=username, email=email)
    if existing is not None:
        errors = {}
        if existing.username == username:
            errors["username"] = "User with that item already exists!"
        if existing.email == email:
            errors["email"] = "User with that item already exists!"
        raise UserExistsError(errors)

    password_hash = await hash_password(password)

    try:
        user = await store.add_user(username, password_hash, email, name)
    except UniqueConstraintError as error:
        # somebody else registered the same details since we checked
        raise UserExistsError(error.fields) from error

    logger.info("Registered user %s", username)
    return user


async def login_user(store: PersistentStore, verifier: TokenVerifier, username: str, password: str) -> str:
    """
    Checks the credentials and issues a token for the user.

    :raises InvalidCredentialsError: When the user doesn't exist or the password is wrong.
    """
    user = await store.get_user(username=username)
    password_hash = user.password_hash if user is not None else await placeholder_hash()

    # unknown users still pay for a full check
    if not await check_password(password, password_hash) or user is None:
        logger.info("Failed login for %s", username)
        raise InvalidCredentialsError

    return verifier.create_token(user.username)
