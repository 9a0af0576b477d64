"""Batch processing for product imports."""

import logging
from collections.abc import Awaitable, Callable, Sequence
from typing import Any

from storefront.schemas.import_schemas import ImportResult, ImportRowError
from storefront.schemas.product import ProductInput, ValidationResult
from storefront.services.product_validation import format_validation_errors, validate_product

from .converters import transform_record
from .detection import detect_format
from .parsers import parse_csv, parse_json
from .report import build_import_result, file_error_result

logger = logging.getLogger(__name__)

PersistFn = Callable[[ProductInput], Awaitable[Any]]
ValidateFn = Callable[[ProductInput], ValidationResult]


async def _import_row(
    row: int,
    product: ProductInput,
    persist: PersistFn,
    validate: ValidateFn,
) -> ImportRowError | None:
    """Validate and persist one product.

    Returns:
        None when the product was stored, otherwise the row's error entry.
    """
    product_id = product.product_id or None
    try:
        validation = validate(product)
        if not validation.valid:
            return ImportRowError(
                row=row,
                product_id=product_id,
                errors=format_validation_errors(validation.errors),
            )
        await persist(product)
    except Exception as e:
        return ImportRowError(row=row, product_id=product_id, errors=[str(e) or type(e).__name__])
    return None


async def import_records(
    records: Sequence[Any],
    persist: PersistFn,
    validate: ValidateFn = validate_product,
) -> ImportResult:
    """Import parsed records one at a time.

    Rows are processed strictly in order and each persist call is awaited
    before the next row starts. A failing row is recorded and skipped; it
    never stops later rows and never undoes earlier ones.

    Args:
        records: Raw records from parse_csv or parse_json.
        persist: Coroutine that stores one validated product.
        validate: Validation function for canonical products.

    Returns:
        ImportResult with 1-based row numbers in its errors.
    """
    imported = 0
    errors: list[ImportRowError] = []

    for row, record in enumerate(records, start=1):
        product = transform_record(record)
        error = await _import_row(row, product, persist, validate)
        if error is None:
            imported += 1
            continue

        errors.append(error)
        logger.warning("Import error on row %d: %s", row, "; ".join(error.errors))

    result = build_import_result(len(records), imported, errors)
    logger.info("Product import finished: %s", result.summary)
    return result


async def import_from_file(
    filename: str | None,
    content: str,
    persist: PersistFn,
    validate: ValidateFn = validate_product,
) -> ImportResult:
    """Detect, parse and import an uploaded file.

    A file that cannot be read at all yields a zero-row result carrying a
    single row 0 error instead of raising.
    """
    check = detect_format(filename, content)
    if not check.valid:
        message = check.error or "Invalid file format"
        logger.warning("Rejected import file %s: %s", filename, message)
        return file_error_result(message)

    try:
        records = parse_csv(content) if check.format == "csv" else parse_json(content)
    except ValueError as e:
        logger.warning("Failed to parse import file %s: %s", filename, e)
        return file_error_result(str(e), summary=f"Failed to parse file: {e}")

    logger.info("Importing %d records from %s", len(records), filename)
    return await import_records(records, persist, validate)
