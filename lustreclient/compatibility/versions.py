"""
Version ordering for kernel and OS release strings.

Versions are compared the way `sort -V` orders them: digit runs compare
numerically, alphabetic runs compare as strings and sort after numbers,
and separators ('.', '-', '_') only delimit tokens. A version that is a
strict prefix of another sorts first, so '5.10.144-127' < '5.10.144-127.601'.

Examples:
    >>> compare_versions("4.18.0-553.el8", "4.18.0-80.el8")
    1
    >>> version_at_least("5.10.144-127.601.amzn2.x86_64", "5.10.144-127.601.amzn2")
    True
    >>> has_prefix("5.14.0-427.13.1.el9_4.x86_64", "5.14.0-427")
    True
"""

import re
from typing import Tuple, Union

_TOKEN = re.compile(r"\d+|[A-Za-z]+")

VersionKey = Tuple[Tuple[int, Union[int, str]], ...]


def version_key(version: str) -> VersionKey:
    """Split a version into comparable tokens.

    Numeric tokens become (0, int) and alphabetic tokens (1, str), so tuple
    comparison gives the ordering described in the module docstring.
    """
    key = []
    for token in _TOKEN.findall(version):
        if token.isdigit():
            key.append((0, int(token)))
        else:
            key.append((1, token))
    return tuple(key)


def compare_versions(left: str, right: str) -> int:
    """Return -1, 0 or 1 as left sorts before, equal to or after right."""
    left_key = version_key(left)
    right_key = version_key(right)
    if left_key < right_key:
        return -1
    if left_key > right_key:
        return 1
    return 0


def version_at_least(version: str, minimum: str) -> bool:
    return compare_versions(version, minimum) >= 0


def has_prefix(version: str, prefix: str) -> bool:
    """Check whether the leading tokens of version equal all tokens of prefix.

    Tokens are compared numerically, so '4.18.0-5530' does not start with
    '4.18.0-553'.
    """
    prefix_key = version_key(prefix)
    if not prefix_key:
        return True
    return version_key(version)[:len(prefix_key)] == prefix_key
