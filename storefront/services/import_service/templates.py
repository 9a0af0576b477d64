"""Sample import files offered for download."""

import csv
import io
import json
from dataclasses import dataclass
from typing import Any

from .constants import TEMPLATE_COLUMNS, TEMPLATE_FILENAMES, TEMPLATE_MEDIA_TYPES

SAMPLE_PRODUCT: dict[str, Any] = {
    "product_id": "PROD001",
    "name_en": "Sample Product",
    "sku": "SKU001",
    "category": "Health",
    "description_en": "This is a sample product description",
    "specs_json": {"type": "simple", "tags": ["sample"]},
    "image_url": "https://example.com/image.jpg",
}


@dataclass(frozen=True)
class SampleTemplate:
    """A downloadable template file."""

    content: str
    media_type: str
    filename: str


def generate_sample_csv() -> str:
    """Return a header plus one product row, every field quoted.

    The specs column holds a JSON object, escaped the way spreadsheet
    tools write it.
    """
    row = [
        json.dumps(value, separators=(",", ":")) if isinstance(value, dict) else value
        for value in (SAMPLE_PRODUCT[column] for column in TEMPLATE_COLUMNS)
    ]

    output = io.StringIO()
    writer = csv.writer(output, quoting=csv.QUOTE_ALL, lineterminator="\n")
    output.write(",".join(TEMPLATE_COLUMNS) + "\n")
    writer.writerow(row)
    return output.getvalue()


def generate_sample_json() -> str:
    """Return a products document holding the sample product."""
    return json.dumps({"products": [SAMPLE_PRODUCT]}, indent=2)


_GENERATORS = {
    "csv": generate_sample_csv,
    "json": generate_sample_json,
}


def get_sample_template(fmt: str) -> SampleTemplate:
    """Select the sample template for a format.

    Raises:
        ValueError: If the format is not csv or json.
    """
    generator = _GENERATORS.get(fmt)
    if generator is None:
        raise ValueError('Invalid format. Use "csv" or "json"')
    return SampleTemplate(
        content=generator(),
        media_type=TEMPLATE_MEDIA_TYPES[fmt],
        filename=TEMPLATE_FILENAMES[fmt],
    )
