"""Wildcard patterns matched against directory entry names.

Only ``*`` is special: it matches any run of characters, including none.
Every other character matches itself, and the pattern has to match the whole
name. As with shell globs, names starting with a dot are only matched by
patterns that start with a dot too.
"""

import re
from functools import lru_cache
from typing import Optional

from .utils import is_empty

WILDCARD = "*"


@lru_cache
def compile_pattern(pattern: str) -> re.Pattern[str]:
    return re.compile(
        ".*".join(re.escape(part) for part in pattern.split(WILDCARD)), re.DOTALL
    )


def matches(pattern: str, name: str) -> bool:
    if name.startswith(".") and not pattern.startswith("."):
        return False
    return compile_pattern(pattern).fullmatch(name) is not None


def search_pattern(name: Optional[str]) -> str:
    """Turn a name into a substring search unless it is a pattern already."""
    if not name:
        return WILDCARD
    if WILDCARD in name:
        return name
    return f"{WILDCARD}{name}{WILDCARD}"


def target_pattern(name: Optional[str]) -> Optional[str]:
    """Pattern for destructive operations; nothing to select if empty."""
    if is_empty(name):
        return None
    return name
