"""Constants for the product import service."""

# Supported upload formats, keyed by lower-cased file extension
SUPPORTED_FORMATS = ("csv", "json")

UNSUPPORTED_FORMAT_MESSAGE = "Unsupported file format. Only CSV and JSON are supported."
EMPTY_FILE_MESSAGE = "File is empty"

# Canonical product field -> raw record keys, first truthy value wins
FIELD_ALIASES: dict[str, tuple[str, ...]] = {
    "product_id": ("product_id", "id"),
    "name": ("name_en", "name"),
    "sku": ("sku",),
    "category": ("category",),
    "description": ("description_en", "description"),
    "image_url": ("image_url", "image"),
}

SPECS_KEYS = ("specs_json", "specs")
DESCRIPTION_HTML_KEY = "description_html"
IMAGES_KEY = "images"

# Column order of the downloadable CSV template
TEMPLATE_COLUMNS = (
    "product_id",
    "name_en",
    "sku",
    "category",
    "description_en",
    "specs_json",
    "image_url",
)

TEMPLATE_FILENAMES = {
    "csv": "product-import-template.csv",
    "json": "product-import-template.json",
}

TEMPLATE_MEDIA_TYPES = {
    "csv": "text/csv",
    "json": "application/json",
}
