"""CLI entrypoint that renders one blog post to a PDF file."""

from __future__ import annotations

import argparse
from datetime import datetime
import json
import logging
from pathlib import Path

from dotenv import load_dotenv

from blogprint.config import LayoutSettings
from blogprint.errors import DocumentGenerationError, RecordError
from blogprint.generator import DocumentGenerator
from blogprint.models import BlogRecord


load_dotenv()

LOGGER = logging.getLogger(__name__)


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Render a blog post into a paginated PDF")
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--record", help="JSON file holding a blog API record")
    source.add_argument("--html", help="HTML file holding the post body")
    parser.add_argument("--title", help="Post title (with --html)")
    parser.add_argument("--subtitle", help="Optional subtitle (with --html)")
    parser.add_argument("--author", help="Author name (with --html)")
    parser.add_argument("--category", default="others", help="Post category (with --html)")
    parser.add_argument("--date", help="ISO-8601 publication date (with --html); defaults to now")
    parser.add_argument("--output-dir", default=".", help="Directory the PDF is written to")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity",
    )
    return parser.parse_args(argv)


def _load_record(args: argparse.Namespace) -> BlogRecord:
    if args.record:
        payload = json.loads(Path(args.record).read_text(encoding="utf-8"))
        if not isinstance(payload, dict):
            raise RecordError("Record file must contain a JSON object")
        return BlogRecord.from_api_payload(payload)

    if not args.title or not args.author:
        raise RecordError("--title and --author are required with --html")

    html_path = Path(args.html)
    payload = {
        "_id": html_path.stem,
        "title": args.title,
        "subtitle": args.subtitle,
        "author": args.author,
        "category": args.category,
        "createdAt": args.date or datetime.now().replace(microsecond=0).isoformat(),
        "content": html_path.read_text(encoding="utf-8"),
    }
    return BlogRecord.from_api_payload(payload)


def _print(payload: dict[str, object]) -> None:
    print(json.dumps(payload, ensure_ascii=True, indent=2))


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(asctime)s %(levelname)s %(name)s %(message)s")

    try:
        record = _load_record(args)
        settings = LayoutSettings.from_env()
    except (RecordError, ValueError, OSError) as exc:
        LOGGER.error("Invalid input: %s", exc)
        _print({"error": str(exc)})
        return 2

    try:
        rendered = DocumentGenerator(settings).generate(record)
    except DocumentGenerationError as exc:
        _print({"error": str(exc)})
        return 1

    output_dir = Path(args.output_dir)
    output_path = output_dir / rendered.filename
    try:
        output_dir.mkdir(parents=True, exist_ok=True)
        output_path.write_bytes(rendered.content)
    except OSError as exc:
        LOGGER.error("Cannot write %s: %s", output_path, exc)
        _print({"error": f"Cannot write {output_path}: {exc.strerror or exc}"})
        return 1

    _print(
        {
            "id": record.id,
            "filename": rendered.filename,
            "path": str(output_path),
            "pages": rendered.page_count,
            "bytes": len(rendered.content),
        }
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
