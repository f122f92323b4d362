"""Ignore pattern matching helper."""

import fnmatch
import re
from pathlib import Path

from ._constants import REGEX_PATTERN_PREFIX


def _matches_pattern(patterns: list[str], path: Path, relative: Path) -> bool:
    """Match globs against the full path, the relative path and every component.

    Patterns prefixed with ``re:`` are regular expressions searched in the relative path.
    """
    if not patterns:
        return False
    path_str = path.as_posix()
    relative_str = relative.as_posix()
    for pattern in patterns:
        if not pattern:
            continue
        if pattern.startswith(REGEX_PATTERN_PREFIX):
            try:
                if re.search(pattern[len(REGEX_PATTERN_PREFIX) :], relative_str):
                    return True
            except re.error:
                continue
            continue
        if fnmatch.fnmatchcase(path_str, pattern) or fnmatch.fnmatchcase(relative_str, pattern):
            return True
        if any(fnmatch.fnmatchcase(part, pattern) for part in relative.parts):
            return True
    return False
