"""Import service package for parsing product files and creating catalog entries."""

from .constants import (
    EMPTY_FILE_MESSAGE,
    FIELD_ALIASES,
    SUPPORTED_FORMATS,
    TEMPLATE_COLUMNS,
    UNSUPPORTED_FORMAT_MESSAGE,
)
from .converters import decode_images, decode_specs, transform_record
from .detection import detect_format, get_file_extension
from .parsers import FieldState, decode_content, parse_csv, parse_json, split_fields, split_rows
from .processor import import_from_file, import_records
from .report import build_import_result, build_summary, file_error_result
from .templates import (
    SampleTemplate,
    generate_sample_csv,
    generate_sample_json,
    get_sample_template,
)

__all__ = [
    # Constants
    "EMPTY_FILE_MESSAGE",
    "FIELD_ALIASES",
    "SUPPORTED_FORMATS",
    "TEMPLATE_COLUMNS",
    "UNSUPPORTED_FORMAT_MESSAGE",
    # Parsers
    "FieldState",
    "decode_content",
    "parse_csv",
    "parse_json",
    "split_fields",
    "split_rows",
    # Detection
    "detect_format",
    "get_file_extension",
    # Converters
    "decode_images",
    "decode_specs",
    "transform_record",
    # Processor
    "import_from_file",
    "import_records",
    # Report
    "build_import_result",
    "build_summary",
    "file_error_result",
    # Templates
    "SampleTemplate",
    "generate_sample_csv",
    "generate_sample_json",
    "get_sample_template",
]
