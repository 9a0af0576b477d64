"""Admin endpoints for bulk product import."""

import logging

from fastapi import APIRouter, Depends, File, HTTPException, Query, UploadFile, status
from fastapi.responses import JSONResponse, Response

from storefront.config import settings
from storefront.schemas.import_schemas import ImportResponse
from storefront.services.import_service import (
    EMPTY_FILE_MESSAGE,
    SUPPORTED_FORMATS,
    decode_content,
    get_file_extension,
    get_sample_template,
    import_from_file,
)
from storefront.services.import_service.processor import PersistFn
from storefront.services.product_store import create_product

logger = logging.getLogger(__name__)

router = APIRouter()

READ_CHUNK_SIZE = 64 * 1024


def get_persist() -> PersistFn:
    """Dependency returning the product creation coroutine."""
    return create_product


async def _read_upload(file: UploadFile, max_bytes: int) -> bytes:
    """Read an upload in chunks, rejecting it once it exceeds max_bytes."""
    chunks: list[bytes] = []
    total_size = 0
    while True:
        chunk = await file.read(READ_CHUNK_SIZE)
        if not chunk:
            break
        total_size += len(chunk)
        if total_size > max_bytes:
            raise HTTPException(
                status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
                detail=f"File too large. Maximum size is {settings.max_upload_size_mb}MB",
            )
        chunks.append(chunk)
    return b"".join(chunks)


@router.post(
    "",
    response_model=ImportResponse,
    responses={207: {"model": ImportResponse, "description": "Import completed with errors"}},
)
async def import_products(
    file: UploadFile | None = File(None, description="CSV or JSON product file"),
    persist: PersistFn = Depends(get_persist),
) -> JSONResponse:
    """Import products from an uploaded CSV or JSON file.

    Returns 200 when every row was imported, 207 otherwise. Row failures are
    listed in the result; they do not fail the request.
    """
    if file is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="No file provided",
        )

    ext = get_file_extension(file.filename)
    if ext not in SUPPORTED_FORMATS:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid file type. Only CSV and JSON files are supported.",
        )

    raw = await _read_upload(file, settings.max_upload_size_bytes)
    logger.info("Received product import file %s (%d bytes)", file.filename, len(raw))

    content = decode_content(raw)
    if not content.strip():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=EMPTY_FILE_MESSAGE,
        )

    result = await import_from_file(file.filename, content, persist)

    if result.success:
        body = ImportResponse(success=True, message="Import completed successfully", result=result)
        status_code = status.HTTP_200_OK
    else:
        body = ImportResponse(success=False, message="Import completed with errors", result=result)
        status_code = status.HTTP_207_MULTI_STATUS

    return JSONResponse(status_code=status_code, content=body.model_dump())


@router.get("/template")
async def download_template(
    fmt: str = Query("csv", alias="format", description="Template format: csv or json"),
) -> Response:
    """Download a sample import file."""
    try:
        template = get_sample_template(fmt)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )

    return Response(
        content=template.content,
        media_type=template.media_type,
        headers={"Content-Disposition": f'attachment; filename="{template.filename}"'},
    )
