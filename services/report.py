"""Batch validation and the console summary printed by the commit/PR gate."""

import sys
from datetime import date

from services.schema import validate_metadata

REQUIRED_FIELDS_HELP = """\
Required fields:
  - date: Date in YYYY-MM-DD format
  - title: Non-empty title field
  - tags: Array of tags (recommended)"""

TAGS_HINT = "Consider adding tags to improve documentation discoverability."


def check_files(paths: list[str], today: date | None = None) -> dict:
    """Validate each path. Returns {ok, files: [{file, errors, warnings}]}."""
    files = []
    for path in paths:
        result = validate_metadata(path, today=today)
        files.append({"file": path, **result})
    return {
        "ok": not any(f["errors"] for f in files),
        "files": files,
    }


def example_frontmatter(today: date | None = None) -> str:
    today = today or date.today()
    return (
        "---\n"
        "title: My Documentation Page\n"
        f"date: {today.isoformat()}\n"
        'tags: ["SigNoz Cloud", "Self-Host"]\n'
        "---"
    )


def _issues(entry: dict, key: str) -> str:
    return "; ".join(entry[key])


def render_report(report: dict, today: date | None = None, out=None, err=None) -> None:
    """Print per-file status lines, then the warnings and failure summaries."""
    out = out or sys.stdout
    err = err or sys.stderr
    files = report["files"]

    for entry in files:
        if entry["errors"]:
            print(f"❌ {entry['file']}: {_issues(entry, 'errors')}", file=err)
        if entry["warnings"]:
            print(f"⚠️  {entry['file']}: {_issues(entry, 'warnings')}", file=err)
        if not entry["errors"] and not entry["warnings"]:
            print(f"✅ {entry['file']}", file=out)

    print("", file=out)

    warned = [e for e in files if e["warnings"]]
    if warned:
        print("Documentation metadata warnings:", file=err)
        for entry in warned:
            print(f"  • {entry['file']}: {_issues(entry, 'warnings')}", file=err)
        print(f"\n{TAGS_HINT}\n", file=err)

    if not report["ok"]:
        print("Documentation metadata validation failed:", file=err)
        for entry in files:
            if entry["errors"]:
                print(f"  • {entry['file']}: {_issues(entry, 'errors')}", file=err)
        print(f"\n{REQUIRED_FIELDS_HELP}", file=err)
        print("\nExample:", file=err)
        print(f"{example_frontmatter(today)}\n", file=err)
        return

    print("✅ All documentation files have valid metadata\n", file=out)
