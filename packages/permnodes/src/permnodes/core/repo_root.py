"""Repository root detection helpers.

`Path.cwd()` is only allowed in this module.
"""

from __future__ import annotations

from pathlib import Path

from ..errors import ScriptError
from ..exit_codes import ERR_CONTEXT

ROOT_MARKERS = (".git", "pom.xml")


def find_repo_root(start: Path | None = None) -> Path:
    cur = (start or Path.cwd()).resolve()
    if cur.is_file():
        cur = cur.parent
    while True:
        if any((cur / marker).exists() for marker in ROOT_MARKERS):
            return cur
        if cur.parent == cur:
            raise ScriptError("unable to resolve repository root", ERR_CONTEXT, kind="repo_root")
        cur = cur.parent


def try_find_repo_root(start: Path | None = None) -> Path | None:
    try:
        return find_repo_root(start)
    except ScriptError:
        return None
