"""
Verify Token
------------

Issues and verifies the bearer tokens handed out on login.

Tokens are HS256 signed JWTs carrying a single ``username`` claim. They
have no expiry and are never stored, so verification is purely a
signature check and logging out cannot revoke them.
"""
from abc import ABC, abstractmethod

from aiohttp.web_request import Request
from jose import jwt, JWTError


class TokenVerificationError(Exception):

    @property
    def message(self):
        return self.args[0] if self.args else "Invalid token"


class TokenVerifier(ABC):

    @abstractmethod
    def create_token(self, username: str) -> str:
        """Issues a signed token for the given username."""

    @abstractmethod
    def verify_token(self, token) -> str:
        """
        Given a token, verifies it, returning the username it was issued to.

        :raises TokenVerificationError: When the provided token is invalid.
        """


class JWTVerifier(TokenVerifier):
    """
    Signs and verifies tokens with a shared secret.
    """

    algorithm = "HS256"

    def __init__(self, secret: str):
        if not secret:
            raise ValueError("A token secret is required.")
        self._secret = secret

    def create_token(self, username: str) -> str:
        return jwt.encode({"username": username}, self._secret, algorithm=self.algorithm)

    def verify_token(self, token) -> str:
        if not isinstance(token, str) or not token:
            raise TokenVerificationError("Invalid token")

        try:
            claims = jwt.decode(token, self._secret, algorithms=[self.algorithm])
        except JWTError as e:
            raise TokenVerificationError("Invalid token") from e

        username = claims.get("username")
        if not isinstance(username, str):
            raise TokenVerificationError("Invalid token")

        return username


def get_bearer_token(request: Request) -> str:
    """
    Pulls the token out of the Authorization header.

    :raises TokenVerificationError: When there is no bearer token.
    """
    header = request.headers.get("Authorization", "")
    scheme, _, token = header.partition(" ")
    if scheme != "Bearer" or not token.strip():
        raise TokenVerificationError("Access denied. No token provided")
    return token.strip()


def verify_token(request: Request) -> str:
    """
    Checks a request for the existence of a valid Authorization header.

    :param request: The request to check.
    :return: The username the token was issued to.
    :raises TokenVerificationError: When the Authorization header is missing or invalid.
    """
    return request.app["token_verifier"].verify_token(get_bearer_token(request))
