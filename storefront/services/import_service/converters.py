"""Conversion of raw import records into canonical product inputs."""

import json
import logging
from typing import Any, Callable

from storefront.schemas.product import ProductInput

from .constants import DESCRIPTION_HTML_KEY, FIELD_ALIASES, IMAGES_KEY, SPECS_KEYS

logger = logging.getLogger(__name__)


def _collapse_doubled_quotes(text: str) -> str:
    """Undo CSV quote escaping left inside a cell."""
    return text.replace('""', '"')


def _single_to_double_quotes(text: str) -> str:
    """Accept hand-written pseudo-JSON such as {'a': 'b'}."""
    return text.replace("'", '"')


# Tried left to right; the first rewrite that loads as a JSON object wins
SPECS_REWRITES: tuple[Callable[[str], str], ...] = (
    lambda text: text,
    _collapse_doubled_quotes,
    _single_to_double_quotes,
)


def _load_object(text: str) -> dict[str, Any] | None:
    """Return text decoded as a JSON object, or None."""
    try:
        parsed = json.loads(text)
    except (ValueError, RecursionError):
        return None
    return parsed if isinstance(parsed, dict) else None


def _strip_wrapping_quotes(text: str) -> str:
    if len(text) >= 2 and text[0] == text[-1] and text[0] in ("'", '"'):
        return text[1:-1]
    return text


def decode_specs(value: Any) -> dict[str, Any]:
    """Decode a raw specs value into a plain dict.

    Never raises: values that cannot be recovered become an empty dict, and
    the row is left to validation.
    """
    if not value:
        return {}

    if isinstance(value, dict):
        return value

    if not isinstance(value, str):
        logger.warning("Ignoring specs value of type %s", type(value).__name__)
        return {}

    text = value.strip()
    if not text or text == "{}":
        return {}

    text = _strip_wrapping_quotes(text)
    for rewrite in SPECS_REWRITES:
        parsed = _load_object(rewrite(text))
        if parsed is not None:
            return parsed

    logger.warning("Failed to parse specs: %s", text)
    return {}


def decode_images(value: Any) -> list[Any]:
    """Return the images list, decoding a JSON array held in a CSV cell."""
    if isinstance(value, list):
        return value
    if isinstance(value, str) and value.strip().startswith("["):
        try:
            parsed = json.loads(value)
        except (ValueError, RecursionError):
            return []
        if isinstance(parsed, list):
            return parsed
    return []


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, (dict, list)):
        return json.dumps(value, ensure_ascii=False)
    return str(value)


def _first_present(raw: dict[str, Any], keys: tuple[str, ...]) -> Any:
    for key in keys:
        value = raw.get(key)
        if value:
            return value
    return None


def transform_record(raw: Any) -> ProductInput:
    """Map a raw CSV/JSON record onto the canonical product shape.

    Args:
        raw: One record from parse_csv or parse_json. Non-dict JSON elements
            are treated as empty records.

    Returns:
        ProductInput with every missing field defaulted.
    """
    if not isinstance(raw, dict):
        raw = {}

    fields = {
        name: _as_text(_first_present(raw, keys))
        for name, keys in FIELD_ALIASES.items()
    }

    description_html = raw.get(DESCRIPTION_HTML_KEY)

    return ProductInput(
        **fields,
        description_html=_as_text(description_html) if description_html is not None else None,
        specs=decode_specs(_first_present(raw, SPECS_KEYS)),
        images=decode_images(raw.get(IMAGES_KEY)),
    )
