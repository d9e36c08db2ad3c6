"""
Path pattern and name mapping helpers.

Request paths may carry wildcard markers of the form ``/{name}`` (one path
segment) or ``/{*name}`` (the remaining sub-path). Header, parameter and
body keys may use the ``attribute:element`` notation to map an attribute
name onto a different HTTP element name.
"""

from __future__ import annotations

import posixpath
import re

# Captures the name of a path wildcard, with or without the catch-all star.
WILDCARD_RE = re.compile(r"/\{(\*?)([a-zA-Z0-9_]+)\}")


def extract_wildcards(path: str) -> list[str]:
    """
    Return the names of the wildcards that appear in path.

    Names are returned in order of appearance, duplicates included. Both
    ``/{id}`` and ``/{*filepath}`` contribute their bare name.

    Examples:
        >>> extract_wildcards("/users/{id}/files/{*path}")
        ['id', 'path']
        >>> extract_wildcards("/static")
        []
    """
    return [m.group(2) for m in WILDCARD_RE.finditer(path)]


def extract_wildcard_markers(path: str) -> list[tuple[str, bool]]:
    """Return ``(name, catch_all)`` for each wildcard in path."""
    return [(m.group(2), m.group(1) == "*") for m in WILDCARD_RE.finditer(path)]


def has_wildcard(path: str) -> bool:
    return WILDCARD_RE.search(path) is not None


def name_map(encoded: str) -> tuple[str, str]:
    """
    Return the attribute and HTTP element names encoded in ``encoded``.

    The element part is optional, in which case both names are the same.
    Only the first colon separates the two parts; anything after it belongs
    to the element name.

    Examples:
        >>> name_map("id")
        ('id', 'id')
        >>> name_map("id:X-User-Id")
        ('id', 'X-User-Id')
        >>> name_map("a:b:c")
        ('a', 'b:c')
    """
    att_name, sep, element = encoded.partition(":")
    if not sep:
        return att_name, att_name
    return att_name, element


def clean_path(path: str) -> str:
    """Lexically clean a slash separated path.

    Repeated separators and ``.`` elements are removed, ``..`` elements are
    resolved and trailing slashes dropped. An empty path cleans to ``"."``.
    """
    if not path:
        return "."
    cleaned = posixpath.normpath(path)
    # normpath keeps a leading "//" intact
    if cleaned.startswith("//"):
        cleaned = "/" + cleaned.lstrip("/")
    return cleaned


def join_paths(*elems: str) -> str:
    """Join path elements with ``/`` and clean the result.

    Empty elements are ignored; joining only empty elements yields ``""``.
    """
    parts = [e for e in elems if e]
    if not parts:
        return ""
    return clean_path("/".join(parts))


def absolute_path(*elems: str) -> str:
    """Join path elements and make sure the result starts with a single ``/``."""
    joined = join_paths(*elems)
    if not joined.startswith("/"):
        joined = "/" + joined
    return joined
