"""
Command line tool: seed the listing store and export listings.
"""
import argparse
import logging
import os

from .database import db_connect, db_init, db_list_listings, upsert_listing
from .export import save_output_rows
from .i18n import SUPPORTED_LANGUAGES
from .mock_listings import MOCK_LISTINGS
from .utils import init_logger

logger = logging.getLogger("catalog")


def parse_args(argv=None):
    ap = argparse.ArgumentParser(description="Marketplace listing store tools (seed SQLite, export CSV/XLSX)")
    ap.add_argument("--db", type=str, default=os.getenv("MARKET_DB", "marketplace.db"), help="Path to SQLite DB")

    # Logging
    lvl_choices = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
    ap.add_argument("--log-level", choices=lvl_choices, default=os.getenv("LOG_LEVEL", "INFO"),
                    help="Log level for console and file (default from env LOG_LEVEL or INFO).")
    ap.add_argument("--log-file-path", default=os.getenv("LOG_FILE_PATH", "catalog.log"),
                    help="Path to log file (default from env LOG_FILE_PATH or catalog.log).")
    ap.add_argument("--no-file-log", action="store_true", help="Disable file logging (only console output).")

    sub = ap.add_subparsers(dest="command", required=True)

    sub.add_parser("seed", help="Create the schema and upsert the mock listings")

    exp = sub.add_parser("export", help="Export listings to CSV/XLSX")
    exp.add_argument("--out", type=str, default="listings_export.csv", help="CSV/XLSX output path")
    exp.add_argument("--lang", choices=SUPPORTED_LANGUAGES, default="ru", help="Language of exported texts")
    exp.add_argument("--category", type=str, default="", help="Only export this category id")
    exp.add_argument("--source", choices=["db", "mock"], default="db",
                     help="Read listings from the SQLite store or the mock collection")

    return ap.parse_args(argv)


def seed(db_path: str) -> int:
    conn = db_connect(db_path)
    try:
        db_init(conn)
        new_items = 0
        for listing in MOCK_LISTINGS:
            new_items += int(upsert_listing(conn, listing))
        logger.info(f">>> Seeded {len(MOCK_LISTINGS)} listings into {db_path} ({new_items} new)")
        return new_items
    finally:
        conn.close()


def export(db_path: str, out_path: str, lang: str, category: str, source: str) -> int:
    if source == "mock":
        listings = [x for x in MOCK_LISTINGS if not category or x.category_id == category]
    else:
        conn = db_connect(db_path)
        try:
            db_init(conn)
            listings = db_list_listings(conn, category or None)
        finally:
            conn.close()
    return save_output_rows(listings, out_path, lang, logger=logger)


def main(argv=None):
    args = parse_args(argv)
    global logger
    logger = init_logger(
        console_level=args.log_level,
        file_level=args.log_level,
        log_file=None if args.no_file_log else args.log_file_path
    )
    logger.info(
        f"Logger initialized: level={args.log_level}, "
        f"file={'DISABLED' if args.no_file_log else args.log_file_path}"
    )

    if args.command == "seed":
        seed(args.db)
    elif args.command == "export":
        export(args.db, args.out, args.lang, args.category, args.source)


if __name__ == "__main__":
    main()
