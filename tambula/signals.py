"""
Signals
-------

Defines the signals that the aiohttp server uses to set up and tear down
the resources shared between requests.

Each signal must accept an the ``app`` argument.
"""
from aiohttp.abc import Application


async def open_store(app: Application):
    """Opens the store, creating the database schema if needed."""
    await app['store'].open()


async def close_store(app: Application):
    """Closes the store."""
    await app['store'].close()


def register_signals(app, init_store=True):
    """Registers all the signals at the appropriate hooks."""
    if init_store:
        app.on_startup.append(open_store)
        app.on_cleanup.append(close_store)
