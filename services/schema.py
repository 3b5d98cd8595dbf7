"""Docs frontmatter rules and validation.

Required: title, date (YYYY-MM-DD, not in the future).
Recommended: tags (non-empty array); problems there are warnings only.
"""

import os
import re
from datetime import date

from services.frontmatter import extract_frontmatter, parse_fields

FILE_NOT_FOUND = "file not found"
CANNOT_READ = "cannot read file"

MISSING_TAGS = "missing tags"
TAGS_NOT_ARRAY = "tags must be an array"
TAGS_EMPTY = "tags array cannot be empty"

MISSING_DATE = "missing date"
INVALID_DATE_FORMAT = "invalid date format - use YYYY-MM-DD"
INVALID_DATE_VALUE = "invalid date value"
FUTURE_DATE = "date cannot be in the future"

MISSING_TITLE = "missing title"
EMPTY_TITLE = "title cannot be empty"

DATE_RE = re.compile(r"^[0-9]{4}-[0-9]{2}-[0-9]{2}$")
EMPTY_ARRAY_RE = re.compile(r"^\[\s*\]$")
EMPTY_LITERALS = {"", '""', "''"}


def check_tags(fields: dict) -> list[str]:
    if "tags" not in fields:
        return [MISSING_TAGS]
    value = fields["tags"]
    if "[" not in value:
        return [TAGS_NOT_ARRAY]
    if EMPTY_ARRAY_RE.match(value):
        return [TAGS_EMPTY]
    return []


def check_date(fields: dict, today: date | None = None) -> list[str]:
    """Return at most one date error: format gates value, value gates the future check."""
    if "date" not in fields:
        return [MISSING_DATE]

    value = re.sub(r"['\"]", "", fields["date"]).strip()
    if not DATE_RE.match(value):
        return [INVALID_DATE_FORMAT]

    try:
        parsed = date.fromisoformat(value)
    except ValueError:
        return [INVALID_DATE_VALUE]

    today = today or date.today()
    if parsed > today:
        return [FUTURE_DATE]
    return []


def check_title(fields: dict) -> list[str]:
    if "title" not in fields:
        return [MISSING_TITLE]
    if fields["title"].strip() in EMPTY_LITERALS:
        return [EMPTY_TITLE]
    return []


def validate_fields(fields: dict, today: date | None = None) -> dict:
    """Apply all field rules to a parsed field map."""
    return {
        "errors": check_date(fields, today) + check_title(fields),
        "warnings": check_tags(fields),
    }


def validate_metadata(path: str, today: date | None = None) -> dict:
    """Validate one docs file. Returns {errors, warnings}; never raises for bad input."""
    if not os.path.exists(path):
        return {"errors": [FILE_NOT_FOUND], "warnings": []}

    frontmatter = extract_frontmatter(path)
    if frontmatter is None:
        return {"errors": [CANNOT_READ], "warnings": []}

    return validate_fields(parse_fields(frontmatter), today)
