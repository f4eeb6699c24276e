"""
Command-line entry point for the helper server.
"""

import argparse
import sys
from dataclasses import replace

import uvloop
from aiohttp import web

from api.server import ROUTES, create_app
from config import ServerConfig, load_server_config, validate_config
from utils.logger import get_logger, set_level, setup_file_logging

logger = get_logger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments.

    Returns:
        Parsed arguments
    """
    parser = argparse.ArgumentParser(
        description="Serve Solana keypair, signing and instruction helpers over HTTP."
    )
    parser.add_argument("--host", type=str, help="Interface to bind (default: HOST or 0.0.0.0)")
    parser.add_argument("--port", type=int, help="Port to listen on (default: PORT or 3000)")
    parser.add_argument("--log-level", type=str, help="Logging level (default: LOG_LEVEL or INFO)")
    parser.add_argument("--env-file", type=str, help="Path to a .env file")
    return parser.parse_args(argv)


def resolve_config(args: argparse.Namespace) -> ServerConfig:
    """Load configuration, preferring command line flags over the environment."""
    config = load_server_config(args.env_file)

    overrides = {}
    if args.host is not None:
        overrides["host"] = args.host
    if args.port is not None:
        overrides["port"] = args.port
    if args.log_level is not None:
        overrides["log_level"] = args.log_level.upper()

    if overrides:
        config = replace(config, **overrides)
        validate_config(config)
    return config


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)

    try:
        config = resolve_config(args)
    except ValueError as e:
        logger.error(f"Configuration error: {e}")
        sys.exit(1)

    set_level(config.log_level_number)
    if config.log_file:
        setup_file_logging(config.log_file, config.log_level_number)

    logger.info(f"Starting helper server on {config.host}:{config.port}")
    logger.info(f"Routes: {', '.join(ROUTES)}")

    web.run_app(
        create_app(),
        host=config.host,
        port=config.port,
        print=None,
        loop=uvloop.new_event_loop(),
    )


if __name__ == "__main__":
    main()
