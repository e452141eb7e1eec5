from aiohttp.web_urldispatcher import View

from tambula.permissions.permission import Permission, RoutePermissionError
from tambula.service.verify_token import verify_token, TokenVerificationError


class ValidToken(Permission):
    """
    Asserts that the request has a valid bearer token, and stores
    the username it was issued to on the request as ``"username"``.
    """

    async def __call__(self, view: View, **kwargs):
        try:
            username = verify_token(view.request)
        except TokenVerificationError as error:
            raise RoutePermissionError(error.message)
        else:
            view.request["username"] = username

    def __repr__(self):
        return "ValidToken()"
