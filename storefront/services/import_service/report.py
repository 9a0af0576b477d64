"""Assembly of ImportResult reports."""

from collections.abc import Sequence

from storefront.schemas.import_schemas import ImportResult, ImportRowError


def build_summary(imported: int, total: int, failed: int) -> str:
    return f"Imported {imported} of {total} products. {failed} failed."


def build_import_result(
    total: int,
    imported: int,
    errors: Sequence[ImportRowError],
) -> ImportResult:
    """Build the report for a completed batch.

    Every attempted row is either counted as imported or has exactly one
    entry in errors, so failed is derived from the error list.
    """
    failed = len(errors)
    return ImportResult(
        success=failed == 0,
        total=total,
        imported=imported,
        failed=failed,
        errors=list(errors),
        summary=build_summary(imported, total, failed),
    )


def file_error_result(message: str, summary: str | None = None) -> ImportResult:
    """Build the report for a file rejected before any row was read.

    The failure is reported as a synthetic row 0 error.
    """
    return ImportResult(
        success=False,
        total=0,
        imported=0,
        failed=0,
        errors=[ImportRowError(row=0, errors=[message])],
        summary=summary or message,
    )
