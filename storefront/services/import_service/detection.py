"""Up-front format detection for uploaded import files."""

from storefront.schemas.import_schemas import FormatCheck

from .constants import EMPTY_FILE_MESSAGE, SUPPORTED_FORMATS, UNSUPPORTED_FORMAT_MESSAGE
from .parsers import parse_csv, parse_json

_PARSERS = {
    "csv": parse_csv,
    "json": parse_json,
}


def get_file_extension(filename: str | None) -> str:
    """Extract the lower-cased file extension from a filename."""
    if not filename:
        return ""
    return filename.rsplit(".", 1)[-1].lower() if "." in filename else ""


def detect_format(filename: str | None, content: str) -> FormatCheck:
    """Decide whether an upload can be read, and as which format.

    The extension picks the format; a full trial parse confirms the content
    is readable. Parse failures are reported, not raised.
    """
    ext = get_file_extension(filename)
    if ext not in SUPPORTED_FORMATS:
        return FormatCheck(valid=False, error=UNSUPPORTED_FORMAT_MESSAGE)

    if not content or not content.strip():
        return FormatCheck(valid=False, error=EMPTY_FILE_MESSAGE)

    try:
        _PARSERS[ext](content)
    except ValueError as e:
        return FormatCheck(valid=False, error=str(e))

    return FormatCheck(valid=True, format=ext)
