"""
Command line interface.

Usage:
    userapi serve [--host HOST] [--port PORT] [--log-level LEVEL]

Binds the API to a single TCP port and serves until terminated.
A failure to bind or start is fatal: the process exits with status 1.
"""

import argparse
import logging
import sys
from typing import Optional, Sequence

from userapi.core.config import settings
from userapi.shared.logging import configure_logging

logger = logging.getLogger(__name__)


def cmd_serve(args: argparse.Namespace) -> None:
    """Start the API server with uvicorn."""
    import uvicorn

    from userapi.main import create_app

    app_settings = settings.model_copy(
        update={"host": args.host, "port": args.port, "log_level": args.log_level}
    )
    app = create_app(app_settings)

    logger.info(
        "Starting server at http://%s:%d", app_settings.host, app_settings.port
    )
    try:
        uvicorn.run(
            app,
            host=app_settings.host,
            port=app_settings.port,
            log_level=app_settings.log_level.lower(),
        )
    except OSError as exc:
        logger.critical("Failed to start server: %s", exc)
        sys.exit(1)


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="User API CLI")
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve = subparsers.add_parser("serve", help="Run the HTTP server")
    serve.add_argument("--host", default=settings.host)
    serve.add_argument("--port", type=int, default=settings.port)
    serve.add_argument("--log-level", default=settings.log_level)
    serve.set_defaults(func=cmd_serve)

    args = parser.parse_args(argv)
    configure_logging(level=args.log_level)
    args.func(args)


if __name__ == "__main__":
    main()
