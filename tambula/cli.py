"""
The entry point for the CLI tool
"""

import uvloop
from aiohttp import web

from tambula import logger
from tambula.app import build_app
from tambula.config import port
from tambula.version import __version__, name


def run():
    """Builds the app from the environment and runs it on uvloop."""
    logger.info(f'Starting {name} %s!', __version__)
    try:
        app = build_app()
    except RuntimeError as error:
        logger.error(str(error))
        raise SystemExit(1)

    web.run_app(app, port=port, loop=uvloop.new_event_loop())


if __name__ == '__main__':
    run()
