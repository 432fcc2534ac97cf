#!/usr/bin/env python3
"""Print the management metadata this instance would publish.

Reads INSTANCE_*, SERVER_* and MANAGEMENT_* settings from the environment
(or .env) and resolves them without contacting any registry.

Usage:
    python -m scripts.print_management_metadata [--json]
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from management_metadata import ConfigurationError, DefaultManagementMetadataResolver
from management_metadata.logging_config import setup_logging
from management_metadata.settings import load_instance_config, load_resolution_inputs

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_PORT_UNASSIGNED = 1
EXIT_CONFIGURATION_ERROR = 2


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Resolve and print management metadata")
    parser.add_argument("--json", action="store_true", help="Print the metadata as a JSON object")
    parser.add_argument("--verbose", action="store_true", help="Log each constructed URL")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    setup_logging(user_friendly=not args.verbose)

    try:
        instance = load_instance_config()
        inputs = load_resolution_inputs()
        metadata = DefaultManagementMetadataResolver().resolve_inputs(instance, inputs)
    except ConfigurationError as exc:
        logger.error("Invalid configuration: %s", exc)
        return EXIT_CONFIGURATION_ERROR

    if metadata is None:
        logger.warning("Management port is not assigned yet; nothing to publish")
        return EXIT_PORT_UNASSIGNED

    if args.json:
        print(metadata.to_json())
        return EXIT_OK

    print(f"healthCheckUrl:       {metadata.health_check_url}")
    if metadata.secure_health_check_url is not None:
        print(f"secureHealthCheckUrl: {metadata.secure_health_check_url}")
    print(f"statusPageUrl:        {metadata.status_page_url}")
    print(f"managementPort:       {metadata.management_port}")
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
