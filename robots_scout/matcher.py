# robots_scout/matcher.py
"""
Path pattern compilation and URL normalization for Allow/Disallow rules.

A rule value is split into literal segments by the wildcard ``*`` (any
sequence of characters) and may end with ``$`` (end of input). Segments and
the candidate path are brought to the same canonical form before
comparison: Unicode NFC, then canonical percent-encoding. So ``/%70ath`` and
``/path`` are the same rule, and a non-ASCII rule matches its
percent-encoded form in a request.

Matching scans the segments left to right with ``str.find``; there is no
backtracking, so the cost is linear in the candidate length for every rule.
"""
from __future__ import annotations

import re
import string
import unicodedata
from functools import lru_cache
from typing import NamedTuple, Optional, Tuple
from urllib.parse import quote, unquote_to_bytes

__all__ = [
    "is_valid_path_pattern",
    "normalize_encoding",
    "normalize_path_and_query",
    "compile_pattern",
    "match_length",
    "PathPattern",
]

# RFC 3986 character classes
_UNRESERVED = frozenset(string.ascii_letters + string.digits + "-._~")
_SUB_DELIMS = frozenset("!$&'()*+,;=")
_DECODABLE = _UNRESERVED | _SUB_DELIMS | {":", "@"}
_LITERAL = _DECODABLE | {"/", "?"}

_TOKEN_RE = re.compile(r"%[0-9A-Fa-f]{2}|.", re.DOTALL)
_ENCODED_NON_ASCII_RE = re.compile(r"(?:%[89A-Fa-f][0-9A-Fa-f])+")
_WILDCARDS_RE = re.compile(r"\*+")

# RFC 3986 appendix B. Unlike urlsplit, keeps whitespace and controls intact.
_URI_REFERENCE_RE = re.compile(
    r"\A(?:[^:/?#]+:)?(?://[^/?#]*)?(?P<path>[^?#]*)(?:\?(?P<query>[^#]*))?",
    re.DOTALL,
)

# Empty, or starts with "/" or "*", no controls, spaces or "#", "$" only at the end.
_PATH_PATTERN_RE = re.compile(r"\A(?:[/*][^\x00-\x20#$]*\$?)?\Z")


def is_valid_path_pattern(value: str) -> bool:
    """Return True if *value* is an acceptable Allow/Disallow value."""
    return _PATH_PATTERN_RE.match(value) is not None


def _decode_non_ascii(run: re.Match) -> str:
    try:
        return unquote_to_bytes(run.group(0)).decode("utf-8")
    except UnicodeDecodeError:
        return run.group(0)


def _normalize_token(token: re.Match) -> str:
    text = token.group(0)
    if len(text) == 3:
        byte = int(text[1:], 16)
        char = chr(byte)
        return char if char in _DECODABLE else f"%{byte:02X}"
    if text in _LITERAL:
        return text
    return quote(text, safe="", errors="replace")


def normalize_encoding(text: str) -> str:
    """Bring *text* to canonical form.

    Escaped UTF-8 sequences are decoded and the text is put into Unicode
    NFC. Then escapes of unreserved and sub-delimiter characters are decoded,
    all other escapes are kept with upper-case hex digits, and characters
    that may not appear literally in a URI (including every non-ASCII
    character) are encoded as UTF-8. A stray ``%`` becomes ``%25``.
    Idempotent.
    """
    text = unicodedata.normalize("NFC", _ENCODED_NON_ASCII_RE.sub(_decode_non_ascii, text))
    return _TOKEN_RE.sub(_normalize_token, text)


def _remove_dot_segments(path: str) -> str:
    if "." not in path:
        return path
    segments = path.split("/")
    resolved: list[str] = []
    for segment in segments:
        if segment == "..":
            if resolved and resolved != [""]:
                resolved.pop()
        elif segment != ".":
            resolved.append(segment)
    if segments[-1] in (".", ".."):
        resolved.append("")
    return "/".join(resolved)


@lru_cache(maxsize=1024)
def normalize_path_and_query(candidate: str) -> str:
    """Reduce a request URI (or a bare path) to its normalized path and query.

    Scheme, authority and fragment are dropped, dot segments are resolved,
    and encoding is made canonical. Whitespace and control characters are
    percent-encoded, never removed.
    """
    reference = _URI_REFERENCE_RE.match(candidate)
    has_authority = reference.start("path") > 0
    path = _remove_dot_segments(normalize_encoding(reference.group("path")))
    if not path and has_authority:
        path = "/"
    query = reference.group("query")
    if query is None:
        return path
    return f"{path}?{normalize_encoding(query)}"


class PathPattern(NamedTuple):
    """Compiled rule value: literal segments separated by ``*``."""

    segments: Tuple[str, ...]
    anchored: bool

    def match(self, text: str) -> Optional[int]:
        """Return the end of the match at the start of *text*, or ``None``.

        Inner segments take their first occurrence, which leaves the most
        room for the rest. The last segment takes its last occurrence, so
        the span is as long as a greedy wildcard would make it.
        """
        first, *rest = self.segments
        if not text.startswith(first):
            return None
        pos = len(first)
        if not rest:
            if self.anchored and pos != len(text):
                return None
            return pos

        *middle, last = rest
        for segment in middle:
            found = text.find(segment, pos)
            if found < 0:
                return None
            pos = found + len(segment)

        if self.anchored:
            if len(text) - len(last) < pos or not text.endswith(last):
                return None
            return len(text)
        found = text.rfind(last, pos)
        if found < 0:
            return None
        return found + len(last)


def compile_pattern(value: str) -> PathPattern:
    """Compile a valid rule value; runs of ``*`` collapse into one wildcard."""
    anchored = value.endswith("$")
    body = value[:-1] if anchored else value
    segments = tuple(normalize_encoding(part) for part in _WILDCARDS_RE.split(body))
    return PathPattern(segments, anchored)


def match_length(pattern: PathPattern, path_and_query: str) -> Optional[int]:
    """Match *pattern* against a candidate and return the matched span in UTF-8 bytes."""
    normalized = normalize_path_and_query(path_and_query)
    end = pattern.match(normalized)
    if end is None:
        return None
    return len(normalized[:end].encode("utf-8"))
