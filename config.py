"""Shared constants and settings for the docs metadata checker."""

import json
import os

_SETTINGS_FILE = os.environ.get("DOCS_METADATA_SETTINGS", ".docs-metadata.json")


def _read_setting(*keys, default=None):
    """Read a nested setting from the settings file."""
    try:
        with open(_SETTINGS_FILE) as f:
            data = json.load(f)
        for k in keys:
            data = data[k]
        return data
    except (FileNotFoundError, json.JSONDecodeError, KeyError, TypeError):
        return default


def is_pre_commit() -> bool:
    """True when running from the husky pre-commit hook."""
    return os.environ.get("HUSKY_PRE_COMMIT") == "true"


def get_base_ref() -> str:
    """Resolve the ref to diff against: PR base branch, then DEFAULT_BRANCH, then origin/main."""
    github_base = os.environ.get("GITHUB_BASE_REF")
    if github_base:
        return f"origin/{github_base}"
    return os.environ.get("DEFAULT_BRANCH") or DEFAULT_BASE_REF


DEFAULT_BASE_REF = "origin/main"
DOCS_ROOT = _read_setting("docs_root", default=".")
DOCS_PATTERN = _read_setting("docs_pattern", default=r"^data/docs/.*\.mdx$")
GIT_TIMEOUT_SECONDS = _read_setting("git", "timeout_seconds", default=30)
PORT = _read_setting("server", "port", default=4250)
