"""Utilities for working with project-relative scene paths."""

from __future__ import annotations

import fnmatch
import re
from pathlib import Path
from typing import Iterable, Iterator


def _expand(pattern: str) -> Iterator[str]:
    match = re.search(r"\{([^{}]*,[^{}]*)\}", pattern)
    if not match:
        yield pattern
        return
    prefix = pattern[: match.start()]
    suffix = pattern[match.end() :]
    for option in match.group(1).split(","):
        yield from _expand(prefix + option + suffix)


def to_project_path(path: Path, root: Path) -> str:
    """Return *path* relative to *root* as a POSIX string ("Assets/Main.unity")."""

    return path.relative_to(root).as_posix()


def is_excluded(rel: str, globs: Iterable[str]) -> bool:
    """Return ``True`` if the project path *rel* matches one of *globs*.

    Patterns use ``fnmatch`` syntax plus ``{a,b}`` alternation; a leading
    ``**/`` also matches at the project root.
    """

    for pattern in globs:
        for expanded in _expand(pattern):
            if fnmatch.fnmatch(rel, expanded):
                return True
            if expanded.startswith("**/") and fnmatch.fnmatch(rel, expanded[3:]):
                return True
    return False
