#!/usr/bin/env python3

from logger import get_logger
from web.app import create_app

logger = get_logger()


def cmd_serve(args, services):
    """Run the JSON API with Flask's built-in server."""
    config = services.config
    host = args.host or config.server_host
    port = args.port or config.server_port

    app = create_app(config, services=services)
    logger.info(f"Serving API on http://{host}:{port}/api")
    app.run(host=host, port=port, debug=args.debug)


def setup_parser(subparsers):
    """Setup serve subcommand parser.

    Args:
        subparsers: The subparsers object from the main CLI
    """
    parser = subparsers.add_parser(
        "serve",
        help="Run the HTTP API",
        description="Serve the JSON API (host and port default to [server] config)",
    )
    parser.add_argument("--host", help="Bind address")
    parser.add_argument("--port", type=int, help="Port")
    parser.add_argument("--debug", action="store_true", help="Enable Flask debug mode")
    parser.set_defaults(func=cmd_serve)
