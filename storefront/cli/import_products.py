"""Bulk product import script for Storefront.

Commands:
    run        Import products from a CSV or JSON file
    template   Write a sample import file
"""

import argparse
import asyncio
import sys
from pathlib import Path

from storefront.config import settings
from storefront.database import close_db, init_db
from storefront.schemas.import_schemas import ImportResult
from storefront.schemas.product import ProductInput
from storefront.services.import_service import decode_content, get_sample_template, import_from_file
from storefront.services.product_store import create_product


async def _discard(product: ProductInput) -> None:
    """Persist stand-in for --dry-run: validation only."""
    return None


def print_result(result: ImportResult, max_errors: int) -> None:
    """Print an import summary and the first row errors."""
    print(result.summary)
    if not result.errors:
        return

    print(f"First errors (max {max_errors}):")
    for error in result.errors[:max_errors]:
        label = f"Row {error.row}"
        if error.product_id:
            label += f" [{error.product_id}]"
        print(f"  {label}: {'; '.join(error.errors)}")


async def run_import(path: Path, dry_run: bool = False) -> ImportResult | None:
    """Import a product file into the database.

    Returns:
        The ImportResult, or None if the file could not be read.
    """
    if not path.is_file():
        print(f"Error: File '{path}' not found.")
        return None

    size = path.stat().st_size
    if size > settings.max_upload_size_bytes:
        print(f"Error: File too large. Maximum size is {settings.max_upload_size_mb}MB")
        return None

    content = decode_content(path.read_bytes())

    if dry_run:
        return await import_from_file(path.name, content, _discard)

    await init_db()
    try:
        return await import_from_file(path.name, content, create_product)
    finally:
        await close_db()


def write_template(fmt: str, output: Path | None) -> None:
    """Write a sample import file to output, or stdout."""
    template = get_sample_template(fmt)
    if output is None:
        sys.stdout.write(template.content)
        return

    output.write_text(template.content, encoding="utf-8")
    print(f"Template written to {output}")


def main() -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Storefront bulk product import",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s run products.csv            Import products into MongoDB
  %(prog)s run products.json --dry-run Validate without writing
  %(prog)s template csv -o sample.csv  Write the CSV template
        """,
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    run_parser = subparsers.add_parser("run", help="Import products from a file")
    run_parser.add_argument("file", type=Path, help="CSV or JSON product file")
    run_parser.add_argument(
        "--dry-run", "-n",
        action="store_true",
        help="Validate every row without writing to the database",
    )

    template_parser = subparsers.add_parser("template", help="Write a sample import file")
    template_parser.add_argument("format", choices=["csv", "json"], help="Template format")
    template_parser.add_argument(
        "--output", "-o",
        type=Path,
        default=None,
        help="Output path (default: stdout)",
    )

    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        return 1

    try:
        if args.command == "run":
            result = asyncio.run(run_import(args.file, dry_run=args.dry_run))
            if result is None:
                return 1
            print_result(result, settings.import_error_preview)
            return 0 if result.success else 1

        elif args.command == "template":
            write_template(args.format, args.output)
            return 0

    except KeyboardInterrupt:
        print("\nInterrupted")
        return 130

    return 0


if __name__ == "__main__":
    sys.exit(main())
