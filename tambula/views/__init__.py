"""
This package contains the server API for registering users
and generating and fetching tambula tickets.

API Conventions
---------------

* Accept and return JSON; ticket keys are camel cased (``ticketId``, ``ticketData``)
* Authenticated routes expect an ``Authorization: Bearer $TOKEN`` header
* Validation failures respond with a 400 and an ``errors`` object
* Authentication failures respond with a 401 and a ``message``
"""

import aiohttp_cors
from aiohttp.abc import Application

from tambula import logger
from .tickets import TicketsView, TicketView
from .users import RegisterView, LoginView, LogoutView

views = [
    RegisterView, LoginView, LogoutView,
    TicketsView, TicketView,
]


def register_views(app: Application, base: str):
    """
    Registers all the API views onto the given router at a specific root url.

    :param app: The app to register the views to.
    :param base: The base URL.
    """
    cors = aiohttp_cors.setup(app, defaults={
        "*": aiohttp_cors.ResourceOptions(
            allow_credentials=True,
            expose_headers="*",
            allow_headers="*",
            allow_methods="*",
        )
    })

    for view in views:
        logger.info("Registered %s at %s", view.__name__, base + view.url)
        view.register_route(app, base)
        view.enable_cors(cors)
