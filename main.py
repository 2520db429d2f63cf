import argparse
import sys
from pathlib import Path

from config import (
    get_export_formats,
    get_output_dir,
    get_retries,
    get_source_location,
    get_timeout,
    load_config,
)
from doc_client import DocumentFetchError, fetch_document
from exporter import export_document


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Normalize a styler XML document through the editor view tree."
    )
    parser.add_argument("location", nargs="?", help="path or http(s) url of the XML document")
    parser.add_argument("--config", help="path to config.toml")
    parser.add_argument("--output-dir", help="directory for exported files")
    parser.add_argument(
        "--format",
        action="append",
        dest="formats",
        choices=["xml", "html", "md"],
        help="export format, may be repeated",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_arg_parser().parse_args(argv)

    cfg = load_config(args.config)
    location = args.location or get_source_location(cfg)
    output_dir = Path(args.output_dir) if args.output_dir else get_output_dir(cfg)
    formats = args.formats or get_export_formats(cfg)

    print(f"Loading document {location or '(placeholder)'} ...")
    try:
        xml = fetch_document(
            location,
            timeout=get_timeout(cfg),
            retries=get_retries(cfg),
        )
    except DocumentFetchError as e:
        print(f"Failed to load document: {e}")
        return 1

    name = Path(location).stem if location else "document"
    export_document(xml, output_dir, name, formats)
    return 0


if __name__ == "__main__":
    sys.exit(main())
