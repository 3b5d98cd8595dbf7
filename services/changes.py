"""Git change discovery: which docs files a commit or PR touches."""

import logging
import re
import subprocess

from config import DEFAULT_BASE_REF, DOCS_PATTERN, GIT_TIMEOUT_SECONDS

log = logging.getLogger(__name__)

# Added, copied, modified, renamed. Deleted files have nothing to validate.
_DIFF_FILTER = "--diff-filter=ACMR"


class GitError(RuntimeError):
    """A git command failed, timed out, or git is not installed."""


def _git(args: list[str], cwd: str = None) -> str:
    cmd = ["git", *args]
    log.debug("Running %s", " ".join(cmd))
    try:
        result = subprocess.run(
            cmd,
            cwd=cwd,
            capture_output=True,
            text=True,
            timeout=GIT_TIMEOUT_SECONDS,
        )
    except FileNotFoundError as e:
        raise GitError("git executable not found") from e
    except subprocess.TimeoutExpired as e:
        raise GitError(f"Timed out after {GIT_TIMEOUT_SECONDS}s: {' '.join(cmd)}") from e

    if result.returncode != 0:
        raise GitError(f"Failed to execute: {' '.join(cmd)}\n{result.stderr.strip()}")
    return result.stdout.strip()


def _filter_docs(output: str, pattern: str = None) -> list[str]:
    docs_re = re.compile(pattern or DOCS_PATTERN)
    return [line for line in output.split("\n") if line and docs_re.match(line)]


def merge_base(base_ref: str, cwd: str = None) -> str:
    """Merge base of HEAD and base_ref, falling back to origin/main for custom refs."""
    try:
        return _git(["merge-base", "HEAD", base_ref], cwd=cwd)
    except GitError:
        if base_ref == DEFAULT_BASE_REF:
            raise
        log.warning("No merge base with %s, falling back to %s", base_ref, DEFAULT_BASE_REF)
        return _git(["merge-base", "HEAD", DEFAULT_BASE_REF], cwd=cwd)


def get_changed_doc_files(base_ref: str = DEFAULT_BASE_REF, cwd: str = None) -> list[str]:
    """Docs files changed since the merge base plus uncommitted changes, in first-seen order."""
    base = merge_base(base_ref, cwd=cwd)
    committed = _filter_docs(_git(["diff", "--name-only", _DIFF_FILTER, base, "HEAD"], cwd=cwd))
    working = _filter_docs(_git(["diff", "--name-only", _DIFF_FILTER, "HEAD"], cwd=cwd))

    files = list(dict.fromkeys(committed + working))
    log.debug("Found %d changed docs file(s) against %s", len(files), base_ref)
    return files


def get_staged_doc_files(cwd: str = None) -> list[str]:
    """Docs files in the index (pre-commit mode)."""
    files = _filter_docs(_git(["diff", "--cached", "--name-only", _DIFF_FILTER], cwd=cwd))
    log.debug("Found %d staged docs file(s)", len(files))
    return files


def repo_root(cwd: str = None) -> str:
    """Top-level directory of the work tree; git reports changed paths relative to it."""
    return _git(["rev-parse", "--show-toplevel"], cwd=cwd)
