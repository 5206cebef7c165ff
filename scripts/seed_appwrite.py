#!/usr/bin/env python3
"""Seed the Appwrite catalog from the reference dataset.

Usage examples:
  APPWRITE_ENDPOINT=https://cloud.appwrite.io/v1 APPWRITE_PROJECT_ID=... \
  APPWRITE_API_KEY=... python scripts/seed_appwrite.py --file data/seed_data.json

The run is destructive: the categories, customizations, menu and
menu_customizations collections and the image bucket are emptied first.
Exit codes: 0 success, 1 seeding failed, 2 missing data file or bad configuration.
"""
import argparse
import logging
import os
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

logger = logging.getLogger("foodorder.seed")


def parse_args(argv=None):
    p = argparse.ArgumentParser(
        description="Wipe and reload the food-ordering catalog in Appwrite."
    )
    p.add_argument(
        "--file",
        default=os.environ.get("SEED_FILE"),
        help="Path to the seed dataset JSON (defaults to data/seed_data.json)",
    )
    p.add_argument("--log-level", default=None, help="Override LOG_LEVEL")
    return p.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)

    from app.exceptions import ConfigurationError, SeedError

    try:
        from app.config import settings
        from adapters import appwrite_adapter
        from services.seed_service import SeedService, load_seed_data
    except ConfigurationError as exc:
        logging.basicConfig(level=logging.INFO)
        logger.error("Configuration error: %s", exc)
        return 2

    logging.basicConfig(
        level=getattr(logging, (args.log_level or settings.log_level).upper(), logging.INFO),
        format=settings.log_format,
    )

    if args.file and not os.path.exists(args.file):
        logger.error("Data file not found: %s", args.file)
        return 2

    try:
        data = load_seed_data(args.file)
    except FileNotFoundError as exc:
        logger.error("Data file not found: %s", exc.filename)
        return 2
    except SeedError as exc:
        logger.error("Invalid seed data: %s", exc)
        return 1

    try:
        backend = appwrite_adapter.connect()
        service = SeedService(
            backend,
            delete_workers=settings.seed_delete_workers,
            image_fetch_timeout=settings.image_fetch_timeout,
        )
        report = service.seed(data)
        logger.info("Seeding completed successfully: %s", report.model_dump())
    except SeedError as exc:
        logger.error("Seeding failed: %s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
