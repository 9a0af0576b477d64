"""Pydantic schemas for bulk product import."""

from typing import Literal, Optional

from pydantic import BaseModel, Field


class FormatCheck(BaseModel):
    """Result of the up-front "can we read this file" check."""

    valid: bool
    format: Optional[Literal["csv", "json"]] = None
    error: Optional[str] = None


class ImportRowError(BaseModel):
    """Failure report for one input row.

    Row 0 is reserved for whole-file failures raised before any row is read.
    """

    row: int = Field(..., ge=0)
    product_id: Optional[str] = None
    errors: list[str] = Field(default_factory=list)


class ImportResult(BaseModel):
    """Outcome of an import run."""

    success: bool
    total: int
    imported: int
    failed: int
    errors: list[ImportRowError] = Field(default_factory=list)
    summary: str


class ImportResponse(BaseModel):
    """Response body of the import endpoint."""

    success: bool
    message: str
    result: ImportResult
