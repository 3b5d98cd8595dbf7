"""Docs metadata endpoints: validate paths, list changed files, check the changeset."""

import os

from flask import Blueprint, jsonify, request

from config import DOCS_ROOT, get_base_ref
from services.changes import GitError, get_changed_doc_files, get_staged_doc_files, repo_root
from services.report import check_files

bp = Blueprint("docs", __name__)


def _safe_path(rel_path: str, docs_root: str = None) -> tuple[str, str | None]:
    """Resolve and validate that path stays within docs_root. Returns (abs_path, error)."""
    docs_root = docs_root or DOCS_ROOT
    abs_path = os.path.realpath(os.path.join(docs_root, rel_path))
    root_real = os.path.realpath(docs_root)
    if abs_path != root_real and not abs_path.startswith(root_real + os.sep):
        return abs_path, "Path traversal detected"
    return abs_path, None


def _check(rel_paths: list[str], base_dir: str = None) -> dict:
    """Validate paths relative to base_dir (default: docs root), reported under their relative names."""
    report = check_files([_safe_path(p, base_dir)[0] for p in rel_paths])
    for entry, rel_path in zip(report["files"], rel_paths):
        entry["file"] = rel_path
    return report


def _discover() -> list[str]:
    if request.args.get("staged") in ("1", "true"):
        return get_staged_doc_files(cwd=DOCS_ROOT)
    return get_changed_doc_files(request.args.get("base") or get_base_ref(), cwd=DOCS_ROOT)


@bp.route("/api/docs/validate", methods=["POST"])
def docs_validate():
    """Validate the given list of paths (relative to the docs root)."""
    data = request.get_json(silent=True) or {}
    paths = data.get("paths")
    if not isinstance(paths, list) or not all(isinstance(p, str) for p in paths):
        return jsonify({"error": "paths must be a list of strings"}), 400

    for rel_path in paths:
        _abs, err = _safe_path(rel_path)
        if err:
            return jsonify({"error": err, "path": rel_path}), 400

    return jsonify(_check(paths))


@bp.route("/api/docs/changed")
def docs_changed():
    """Docs files touched by the current branch (or staged, with ?staged=1)."""
    try:
        return jsonify({"files": _discover()})
    except GitError as e:
        return jsonify({"error": str(e)}), 500


@bp.route("/api/docs/check")
def docs_check():
    """Discover changed docs files and validate them in one call."""
    try:
        paths = _discover()
        root = repo_root(cwd=DOCS_ROOT)
    except GitError as e:
        return jsonify({"error": str(e)}), 500
    return jsonify(_check(paths, root))
