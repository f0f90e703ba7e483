"""
Wildcard language shared by provider adapters and the filter stage.

Supported metacharacters are ``*``, ``?`` and ``[...]``. A backtick escapes the
character that follows it, so ```*`` matches a literal asterisk.
"""

from wcmatch import fnmatch

WILDCARD_CHARS = frozenset("*?[")
ESCAPE_CHAR = "`"

_GLOB_SPECIAL = frozenset("*?[]\\")
_BASE_FLAGS = fnmatch.FORCEUNIX | fnmatch.DOTMATCH


def has_wildcard(text: str) -> bool:
    """Return True if text contains an unescaped wildcard metacharacter"""
    index = 0
    while index < len(text):
        char = text[index]
        if char == ESCAPE_CHAR:
            index += 2
            continue
        if char in WILDCARD_CHARS:
            return True
        index += 1
    return False


def unescape(text: str) -> str:
    """Drop escape characters, keeping the characters they protect"""
    out: list[str] = []
    index = 0
    while index < len(text):
        char = text[index]
        if char == ESCAPE_CHAR and index + 1 < len(text):
            out.append(text[index + 1])
            index += 2
            continue
        out.append(char)
        index += 1
    return "".join(out)


def to_glob(pattern: str) -> str:
    """Translate a backtick-escaped pattern into wcmatch glob syntax"""
    out: list[str] = []
    index = 0
    while index < len(pattern):
        char = pattern[index]
        if char == ESCAPE_CHAR and index + 1 < len(pattern):
            out.append(_escape_glob_char(pattern[index + 1]))
            index += 2
            continue
        if char == "\\":
            out.append("\\\\")
        else:
            out.append(char)
        index += 1
    return "".join(out)


def matches(name: str, pattern: str, case_sensitive: bool = False) -> bool:
    """Match one name (not a full path) against a wildcard pattern"""
    flags = _BASE_FLAGS if case_sensitive else _BASE_FLAGS | fnmatch.IGNORECASE
    return fnmatch.fnmatch(name, to_glob(pattern), flags=flags)


def matches_any(name: str, patterns: list[str], case_sensitive: bool = False) -> bool:
    return any(matches(name, pattern, case_sensitive) for pattern in patterns)


def _escape_glob_char(char: str) -> str:
    if char in _GLOB_SPECIAL:
        return "\\" + char
    return char
