#!/usr/bin/env python3
"""Commit/PR gate: check frontmatter metadata of changed documentation files.

Exit codes: 0 all files valid (warnings allowed), 1 metadata errors, 2 git failure.
"""

import argparse
import logging
import sys

from config import get_base_ref, is_pre_commit
from services.changes import GitError, get_changed_doc_files, get_staged_doc_files
from services.report import check_files, render_report

log = logging.getLogger(__name__)


def _parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Validate date/title/tags frontmatter in documentation files."
    )
    parser.add_argument(
        "paths", nargs="*", help="Files to check (default: docs files changed in git)"
    )
    parser.add_argument(
        "--staged", action="store_true", help="Check staged files (implied by HUSKY_PRE_COMMIT=true)"
    )
    parser.add_argument("--base", help="Ref to diff against (default: PR base or origin/main)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser.parse_args(argv)


def discover_files(args) -> list[str]:
    """Explicit paths win; otherwise ask git for staged or changed docs files."""
    if args.paths:
        return list(args.paths)
    if args.staged or is_pre_commit():
        log.debug("Pre-commit mode: checking staged files")
        return get_staged_doc_files()
    base_ref = args.base or get_base_ref()
    log.debug("Checking docs changed against %s", base_ref)
    return get_changed_doc_files(base_ref)


def main(argv=None) -> int:
    """Entry point for `docs-metadata-check`."""
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        files = discover_files(args)
    except GitError as e:
        print(str(e), file=sys.stderr)
        return 2

    if not files:
        print("No documentation files to check")
        return 0

    print(f"Checking {len(files)} documentation file(s) for required metadata...\n")
    report = check_files(files)
    render_report(report)
    return 0 if report["ok"] else 1


if __name__ == "__main__":
    sys.exit(main())
