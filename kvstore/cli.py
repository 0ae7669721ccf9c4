"""
CLI entry point for the key-value server.

Usage:
    # Serve on the configured address (127.0.0.1:3001 by default)
    python -m kvstore

    # Override bind address and log level
    python -m kvstore --host 0.0.0.0 --port 8000 --log-level debug
"""

import argparse
import logging

from kvstore.core.config import settings

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="In-memory key-value store over HTTP"
    )
    parser.add_argument(
        "--host", default=settings.host, help="Address to bind to"
    )
    parser.add_argument(
        "--port", type=int, default=settings.port, help="Port to bind to"
    )
    parser.add_argument(
        "--log-level",
        default=settings.log_level,
        help="Log level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """Parse arguments and serve the application with uvicorn."""
    import uvicorn

    from kvstore.main import create_app

    args = build_parser().parse_args(argv)
    app_settings = settings.model_copy(
        update={"host": args.host, "port": args.port, "log_level": args.log_level}
    )
    app = create_app(settings=app_settings)

    logger.info("Serving kvstore at http://%s:%d", args.host, args.port)
    uvicorn.run(
        app,
        host=args.host,
        port=args.port,
        log_level=args.log_level.lower(),
        reload=False,
    )


if __name__ == "__main__":
    main()
