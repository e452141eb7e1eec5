"""
App
-----
"""

import sentry_sdk
from aiohttp import web
from aiohttp_apispec import setup_aiohttp_apispec
from sentry_sdk.integrations.aiohttp import AioHttpIntegration

from tambula import logger
from tambula.config import server_mode, api_root, sentry_dsn, database_url, token_secret as configured_secret
from tambula.middleware import error_middleware
from tambula.service.verify_token import JWTVerifier
from tambula.signals import register_signals
from tambula.store import PersistentStore, create_store
from tambula.version import __version__, name
from tambula.views import register_views


def build_app(db_uri=None, token_secret=None, store: PersistentStore = None, init_store=True):
    """
    Sets up the app.

    :param db_uri: The database to connect to, defaults to ``DATABASE_URL``.
    :param token_secret: The key to sign tokens with, defaults to ``TOKEN_SECRET``.
    :param store: A ready made store, overrides ``db_uri``.
    :param init_store: Whether to open and close the store with the app.
    :raises RuntimeError: If no token secret was configured.
    """
    token_secret = token_secret if token_secret is not None else configured_secret
    if not token_secret:
        raise RuntimeError("You must specify the TOKEN_SECRET in the environment variables.")

    app = web.Application(middlewares=[error_middleware])

    app['store'] = store if store is not None else create_store(db_uri if db_uri is not None else database_url)
    app['token_verifier'] = JWTVerifier(token_secret)

    register_signals(app, init_store=init_store)
    register_views(app, api_root)

    setup_aiohttp_apispec(
        app=app, title=name, version=__version__, url=f"{api_root}/docs",
        components={
            "securitySchemes": {
                "BearerToken": {
                    "type": "http",
                    "description": "The token returned by the login route",
                    "scheme": "bearer",
                    "bearerFormat": "JWT",
                }
            }
        },
    )

    # set up sentry exception tracking
    if server_mode != "development" and sentry_dsn:
        logger.info("Starting Sentry Logging")
        sentry_sdk.init(
            dsn=sentry_dsn,
            environment=server_mode,
            release=f"{name}@{__version__}",
            integrations=[AioHttpIntegration()]
        )

    return app
