"""
Decorators
----------
"""

from functools import wraps
from http import HTTPStatus

from aiohttp import web
from aiohttp.web_urldispatcher import View

from tambula.permissions.permission import RoutePermissionError, Permission


def requires(permission: Permission):
    """
    A decorator that requires the given permission to be met to continue.
    Failed permissions respond with a 401 before the route is run.
    """

    if not isinstance(permission, Permission):
        raise TypeError(f"Expected a Permission, not {type(permission)}")

    def decorator(original_function):

        @wraps(original_function)
        async def new_func(self: View, **kwargs):
            try:
                await permission(self, **kwargs)
            except RoutePermissionError as error:
                return web.json_response({"message": str(error)}, status=HTTPStatus.UNAUTHORIZED)

            return await original_function(self, **kwargs)

        return new_func

    return decorator
