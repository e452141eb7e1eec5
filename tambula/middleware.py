"""
Middleware
----------
"""
from http import HTTPStatus

from aiohttp import web
from aiohttp.abc import Request
from aiohttp.web_middlewares import middleware

from tambula import logger


@middleware
async def error_middleware(request: Request, handler):
    """
    The final error boundary. Any exception that escapes a view is logged
    in full and the client gets a generic error with no internal details.

    aiohttp's own http exceptions (404, 405, etc.) are passed along as they are.
    """
    try:
        return await handler(request)
    except web.HTTPException:
        raise
    except Exception:
        logger.exception("Unhandled error on %s %s", request.method, request.rel_url)
        return web.json_response({"message": "An error occurred"}, status=HTTPStatus.INTERNAL_SERVER_ERROR)
