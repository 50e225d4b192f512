"""Utility script to insert the example invoice template."""

from __future__ import annotations

import argparse

from sqlalchemy.exc import SQLAlchemyError

from invoice_designer.application.use_cases.templates import seed_templates
from invoice_designer.infrastructure.database import SessionLocal, initialize_database
from invoice_designer.logging_config import configure_logging


def parse_args() -> argparse.Namespace:
    """Parse command line arguments for seeding."""

    parser = argparse.ArgumentParser(
        description="Seed the database with the Standard Invoice example template.",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level override (defaults to LOG_LEVEL)",
    )
    return parser.parse_args()


def main() -> None:
    """Create the example template if the template table is empty."""

    args = parse_args()
    configure_logging(args.log_level)
    initialize_database()

    session = SessionLocal()
    try:
        template = seed_templates(session)
    except SQLAlchemyError as exc:
        session.rollback()
        raise SystemExit(f"Could not seed the database: {exc}") from exc
    finally:
        session.close()

    if template is None:
        print("Templates already exist; nothing to seed.")
    else:
        print(f"Seeded template {template.id}: {template.name}")


if __name__ == "__main__":
    main()
