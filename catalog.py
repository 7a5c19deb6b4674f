#!/usr/bin/env python3
"""Book Catalog CLI - in-memory library management menu."""
import argparse
import sys
import logging

from src.config import Config
from src.menu import CatalogMenu
from src.store import BookStore

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Book Catalog - in-memory library management",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Start the menu with defaults (10 books, settings from .env)
  %(prog)s
  
  # Larger catalog, grid tables, no "Press Enter" pauses
  %(prog)s --capacity 25 --table-format grid --no-pause
        """
    )
    parser.add_argument("--capacity", type=int, default=Config.CATALOG_CAPACITY,
                        help=f"Max books held at once (default: {Config.CATALOG_CAPACITY})")
    parser.add_argument("--table-format", default=Config.TABLE_FORMAT,
                        help=f"tabulate table format (default: {Config.TABLE_FORMAT})")
    parser.add_argument("--log-level", default=Config.LOG_LEVEL,
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"], type=str.upper,
                        help=f"Logging level (default: {Config.LOG_LEVEL})")
    parser.add_argument("--no-pause", dest="pause", action="store_false",
                        default=Config.PAUSE_AFTER_ACTION,
                        help="Do not wait for Enter after each action")
    return parser


def main(argv=None):
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    
    if args.capacity < 1:
        parser.error("--capacity must be at least 1")
    
    # Configure logging
    logging.basicConfig(
        level=args.log_level,
        format='%(asctime)s - %(levelname)s - %(message)s'
    )
    
    store = BookStore(capacity=args.capacity)
    menu = CatalogMenu(store, pause=args.pause, table_format=args.table_format)
    
    try:
        menu.run()
    except KeyboardInterrupt:
        logger.warning("⚠️  Interrupted by user")
        sys.exit(0)
    except Exception as e:
        logger.error(f"❌ Error: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
