"""Utility script printing the rendered page of a stored template as JSON."""

from __future__ import annotations

import argparse
import json
from pathlib import Path

from invoice_designer.application.editor_session import parse_sample_data
from invoice_designer.application.use_cases.templates import render_template
from invoice_designer.domain.errors import InvalidSampleDataError, TemplateNotFoundError
from invoice_designer.infrastructure.database import SessionLocal, initialize_database
from invoice_designer.logging_config import configure_logging


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Render a template in edit or preview mode and print the result.",
    )
    parser.add_argument("--id", type=int, required=True, help="Template identifier")
    parser.add_argument(
        "--mode",
        choices=("edit", "preview"),
        default="preview",
        help="Render mode (default: preview)",
    )
    parser.add_argument(
        "--data",
        type=Path,
        default=None,
        help="JSON file overriding the template's sample data",
    )
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    configure_logging()
    initialize_database()

    sample_data = None
    if args.data is not None:
        try:
            sample_data = parse_sample_data(args.data.read_text(encoding="utf-8"))
        except InvalidSampleDataError as exc:
            raise SystemExit(f"{exc} ({exc.detail})") from exc

    with SessionLocal() as session:
        try:
            page = render_template(session, args.id, mode=args.mode, sample_data=sample_data)
        except TemplateNotFoundError as exc:
            raise SystemExit(f"Template {args.id} not found") from exc

    print(json.dumps(page.to_dict(), indent=2, ensure_ascii=False))


if __name__ == "__main__":
    main()
