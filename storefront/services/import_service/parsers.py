"""File parsing functions for CSV and JSON product imports.

The CSV reader is hand-rolled rather than built on the csv module because
product exports routinely put raw JSON objects and arrays into a cell
without quoting them, e.g.::

    PROD001,"Sample, Product",{"type":"simple","tags":["a","b"]},https://x/y.jpg

Commas and quotes inside such a value must not split the cell.
"""

import json
from enum import Enum
from typing import Any

CSV_ERROR_PREFIX = "CSV parsing failed: "
JSON_ERROR_PREFIX = "JSON parsing failed: "


class FieldState(Enum):
    """Tokenizer state while splitting one CSV row into fields."""

    NORMAL = "normal"
    QUOTED = "quoted"
    EMBEDDED_JSON = "embedded_json"


def decode_content(raw: bytes) -> str:
    """Decode uploaded file bytes.

    Tries UTF-8 first (dropping a leading BOM), falls back to Latin-1.
    """
    try:
        return raw.decode("utf-8-sig")
    except UnicodeDecodeError:
        return raw.decode("latin-1")


def split_rows(content: str) -> list[str]:
    """Split CSV text into raw row strings.

    Line endings are normalised to ``\\n``. A newline inside a double-quoted
    region is part of the row. Rows that are blank after trimming are dropped.
    """
    normalized = content.replace("\r\n", "\n").replace("\r", "\n")

    rows: list[str] = []
    current: list[str] = []
    in_quotes = False

    for char in normalized:
        if char == '"':
            in_quotes = not in_quotes

        if char == "\n" and not in_quotes:
            line = "".join(current)
            if line.strip():
                rows.append(line)
            current = []
        else:
            current.append(char)

    line = "".join(current)
    if line.strip():
        rows.append(line)

    return rows


def split_fields(line: str) -> list[str]:
    """Split one CSV row into trimmed field values.

    Handles standard CSV quoting (``""`` is an escaped quote) and cells that
    hold an unquoted JSON object or array.
    """
    fields: list[str] = []
    buffer: list[str] = []
    state = FieldState.NORMAL
    brace_depth = 0
    bracket_depth = 0

    i = 0
    length = len(line)
    while i < length:
        char = line[i]

        if state is FieldState.QUOTED:
            if char == '"':
                if i + 1 < length and line[i + 1] == '"':
                    buffer.append('"')
                    i += 1
                else:
                    state = FieldState.NORMAL
            else:
                buffer.append(char)

        elif state is FieldState.EMBEDDED_JSON:
            buffer.append(char)
            if char == "{":
                brace_depth += 1
            elif char == "}":
                brace_depth -= 1
            elif char == "[":
                bracket_depth += 1
            elif char == "]":
                bracket_depth -= 1
            if brace_depth <= 0 and bracket_depth <= 0:
                state = FieldState.NORMAL

        else:
            at_field_start = not buffer or (i > 0 and line[i - 1] == ",")
            if char == '"' and at_field_start:
                state = FieldState.QUOTED
            elif char in "{[":
                brace_depth = 1 if char == "{" else 0
                bracket_depth = 1 if char == "[" else 0
                state = FieldState.EMBEDDED_JSON
                buffer.append(char)
            elif char == ",":
                fields.append("".join(buffer).strip())
                buffer = []
            else:
                buffer.append(char)

        i += 1

    # An unterminated quote or JSON value runs to the end of the row
    fields.append("".join(buffer).strip())
    return fields


def parse_csv(content: str) -> list[dict[str, str]]:
    """Parse CSV text into records keyed by header name.

    Data rows are zipped with the header by position: missing trailing
    fields become empty strings and surplus fields are dropped.

    Args:
        content: Decoded CSV text.

    Returns:
        One dict per non-blank data row, in file order.

    Raises:
        ValueError: If the file is empty or the header row has no names.
    """
    rows = split_rows(content)
    if not rows:
        raise ValueError(f"{CSV_ERROR_PREFIX}CSV file is empty")

    headers = split_fields(rows[0])
    if not any(headers):
        raise ValueError(f"{CSV_ERROR_PREFIX}CSV file has no headers")

    records: list[dict[str, str]] = []
    for line in rows[1:]:
        values = split_fields(line)
        if len(values) == 1 and not values[0]:
            continue

        records.append({
            header: values[j] if j < len(values) else ""
            for j, header in enumerate(headers)
        })

    return records


def parse_json(content: str) -> list[Any]:
    """Parse JSON text into a list of product records.

    Accepts a top-level array, or an object with a ``products`` array.

    Raises:
        ValueError: On invalid JSON or an unexpected document shape.
    """
    try:
        data = json.loads(content)
    except (json.JSONDecodeError, RecursionError) as e:
        # Deeply nested input exhausts the decoder stack
        raise ValueError(f"{JSON_ERROR_PREFIX}{e}") from e

    if isinstance(data, list):
        return data
    if isinstance(data, dict) and isinstance(data.get("products"), list):
        return data["products"]

    raise ValueError(f'{JSON_ERROR_PREFIX}JSON must be an array or object with "products" array')
