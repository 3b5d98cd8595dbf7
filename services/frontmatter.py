"""Frontmatter extraction: the flat `key: value` block between the first two `---` lines."""

import re

FIELD_RE = re.compile(r"^(\w+):\s*(.*)$", re.ASCII)

DELIMITER = "---"


def extract_frontmatter(path: str) -> str | None:
    """Return the frontmatter text of a file, "" when it has none, or None if unreadable.

    An opening delimiter with no closing one yields whatever was collected
    up to the end of the file.
    """
    try:
        with open(path, encoding="utf-8-sig", errors="replace") as f:
            content = f.read()
    except OSError:
        return None

    collected = []
    opened = False
    for line in content.split("\n"):
        if line.strip() == DELIMITER:
            if opened:
                break
            opened = True
            continue
        if opened:
            collected.append(line)

    return "\n".join(collected)


def parse_fields(text: str) -> dict[str, str]:
    """Parse frontmatter text into {field: trimmed value}. Later duplicates win."""
    fields = {}
    for line in text.split("\n"):
        match = FIELD_RE.match(line)
        if match:
            fields[match.group(1)] = match.group(2).strip()
    return fields
