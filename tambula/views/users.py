"""
User Related Views
-------------------------

Handles registering, logging in, and logging out.
"""
from http import HTTPStatus

from aiohttp import web
from aiohttp_apispec import docs

from tambula.permissions import requires, ValidToken
from tambula.serializer import expects, returns
from tambula.serializer.misc import RegisterSchema, LoginSchema, MessageSchema, TokenSchema
from tambula.service.users import register_user, login_user, UserExistsError, InvalidCredentialsError
from tambula.views.base import BaseView, BEARER_SECURITY


class RegisterView(BaseView):
    """
    Creates a new user.
    """
    url = "/register"
    name = "register"

    @docs(summary="Register A User")
    @expects(RegisterSchema())
    @returns(
        registered=MessageSchema(),
        user_exists=(MessageSchema(), HTTPStatus.BAD_REQUEST)
    )
    async def post(self):
        try:
            await register_user(self.store, **self.request["data"])
        except UserExistsError as error:
            return "user_exists", {"message": str(error)}

        return "registered", {"message": "User registered successfully"}


class LoginView(BaseView):
    """
    Exchanges a username and password for a bearer token.
    """
    url = "/login"
    name = "login"

    @docs(summary="Log In")
    @expects(LoginSchema())
    @returns(
        logged_in=TokenSchema(),
        invalid_credentials=(MessageSchema(), HTTPStatus.UNAUTHORIZED)
    )
    async def post(self):
        try:
            token = await login_user(self.store, self.token_verifier, **self.request["data"])
        except InvalidCredentialsError as error:
            return "invalid_credentials", {"message": str(error)}

        return "logged_in", {"token": token}


class LogoutView(BaseView):
    """
    Logs the user out.

    Tokens are stateless, so this only tells the client to forget
    its token. The token itself stays valid.
    """
    url = "/logout"
    name = "logout"

    @docs(summary="Log Out", security=BEARER_SECURITY)
    @requires(ValidToken())
    async def post(self):
        response = web.json_response(MessageSchema().dump({"message": "Logged out successfully"}))
        response.headers["Authorization"] = ""
        return response
