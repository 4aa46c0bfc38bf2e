"""Flower shop database management CLI.

Usage:
    python src/manage.py setup-db   # Create all tables
    python src/manage.py drop-db    # Drop all tables
"""

import argparse
import sys

from flowershop.utils.logging import get_logger

logger = get_logger(__name__)


def setup_database():
    """Create the database schema for the flowershop domain."""
    from flowershop.domain import flowershop
    from flowershop.utils.db import setup_db

    flowershop.init()
    setup_db(flowershop)
    logger.info("schema_created", domain=flowershop.name)


def drop_database():
    """Drop the database schema for the flowershop domain."""
    from flowershop.domain import flowershop
    from flowershop.utils.db import drop_db

    flowershop.init()
    drop_db(flowershop)
    logger.info("schema_dropped", domain=flowershop.name)


def main(argv=None):
    parser = argparse.ArgumentParser(description="Flower shop database management")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("setup-db", help="Create all database tables")
    subparsers.add_parser("drop-db", help="Drop all database tables")

    args = parser.parse_args(argv)

    if args.command == "setup-db":
        setup_database()
    elif args.command == "drop-db":
        drop_database()
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
