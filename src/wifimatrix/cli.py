"""Command-line interface for wifimatrix.

Running ``wifimatrix`` with no arguments serves the control panel on
0.0.0.0:3000 and prints the URLs to open it from this machine and from
other devices on the LAN.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="wifimatrix",
        description="Serve the 8x8 WiFi matrix control panel on the local network",
    )
    parser.add_argument(
        "-c", "--config",
        type=Path,
        default=None,
        help="Path to YAML configuration file (default: config/wifimatrix.yaml)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    """Main entry point for the wifimatrix CLI."""
    args = parse_args(argv)

    import yaml
    from pydantic import ValidationError

    from wifimatrix.config.settings import load_settings
    from wifimatrix.server.runner import BindFailure, start
    from wifimatrix.utils.logging import setup_logging

    try:
        settings = load_settings(args.config)
    except (ValidationError, yaml.YAMLError) as e:
        setup_logging()
        logger.error("Invalid configuration: %s", e)
        sys.exit(1)

    if args.verbose:
        settings.logging.level = "DEBUG"

    setup_logging(settings.logging)

    srv = settings.server
    logger.info("Starting server on %s:%d", srv.host, srv.port)
    try:
        start(
            port=srv.port,
            bind_address=srv.host,
            asset_root=srv.asset_root,
            log_level=settings.logging.level,
        )
    except (BindFailure, FileNotFoundError) as e:
        logger.error("%s", e)
        sys.exit(1)


if __name__ == "__main__":
    main()
