"""Case-insensitive header container with deterministic wire output.

Header names are stored in canonical form (``content-type`` becomes
``Content-Type``) and written sorted case-insensitively, one
``Name: value\\r\\n`` line per value.
"""

from __future__ import annotations

import string
from collections.abc import Iterable, Iterator, Mapping
from typing import Protocol

CRLF = b"\r\n"

# RFC 7230 token characters
_TOKEN_CHARS = frozenset(string.ascii_letters + string.digits + "!#$%&'*+-.^_`|~")


class ByteSink(Protocol):
    """Anything accepting sequential byte writes."""

    def write(self, data: bytes, /) -> object:
        """Append ``data`` to the destination."""


def canonical_header_name(name: str) -> str:
    """Return the canonical form of a header name.

    The first letter and every letter after a hyphen are upper-cased, the
    rest lower-cased. Names holding characters outside the token alphabet
    are returned unchanged.

    Examples:
        >>> canonical_header_name("content-type")
        'Content-Type'
        >>> canonical_header_name("MIME-Version")
        'Mime-Version'
        >>> canonical_header_name("Bad Name")
        'Bad Name'
    """
    if not name or any(char not in _TOKEN_CHARS for char in name):
        return name

    chars = []
    upper = True
    for char in name:
        chars.append(char.upper() if upper else char.lower())
        upper = char == "-"
    return "".join(chars)


def _clean_value(value: str) -> str:
    # A value can never open a new header line
    return value.replace("\r", " ").replace("\n", " ").strip()


class HeaderSet:
    """Mapping of canonical header names to their values.

    Args:
        headers: Optional initial ``name -> value`` pairs.

    Examples:
        >>> headers = HeaderSet({"subject": "Hi", "from": "a@example.com"})
        >>> headers.get("SUBJECT")
        'Hi'
        >>> headers.to_bytes()
        b'From: a@example.com\\r\\nSubject: Hi\\r\\n'
    """

    def __init__(self, headers: Mapping[str, str] | None = None) -> None:
        self._fields: dict[str, list[str]] = {}
        if headers:
            self.update(headers)

    def set(self, name: str, value: str) -> None:
        """Store ``value`` as the only value of ``name``."""
        self._fields[canonical_header_name(name)] = [value]

    def add(self, name: str, value: str) -> None:
        """Append ``value`` to the values of ``name``."""
        self._fields.setdefault(canonical_header_name(name), []).append(value)

    def get(self, name: str) -> str:
        """Return the first value of ``name``, or an empty string."""
        values = self._fields.get(canonical_header_name(name))
        return values[0] if values else ""

    def values(self, name: str) -> list[str]:
        """Return every value stored for ``name``."""
        return list(self._fields.get(canonical_header_name(name), []))

    def delete(self, name: str) -> None:
        """Remove ``name`` if present."""
        self._fields.pop(canonical_header_name(name), None)

    def update(self, headers: Mapping[str, str]) -> None:
        """Set every ``name -> value`` pair of ``headers``."""
        for name, value in headers.items():
            self.set(name, value)

    def copy(self) -> HeaderSet:
        """Return an independent copy."""
        clone = HeaderSet()
        clone._fields = {name: list(values) for name, values in self._fields.items()}
        return clone

    def names(self) -> list[str]:
        """Return canonical names in write order."""
        return sorted(self._fields, key=str.casefold)

    def items(self) -> Iterable[tuple[str, str]]:
        """Yield ``(name, value)`` pairs in write order."""
        for name in self.names():
            for value in self._fields[name]:
                yield name, value

    def to_bytes(self) -> bytes:
        """Serialize every header as ``Name: value`` lines ending in CRLF."""
        return b"".join(f"{name}: {_clean_value(value)}".encode() + CRLF for name, value in self.items())

    def write_to(self, sink: ByteSink) -> None:
        """Write the serialized headers to ``sink``; no trailing blank line."""
        data = self.to_bytes()
        if data:
            sink.write(data)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and canonical_header_name(name) in self._fields

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())

    def __len__(self) -> int:
        return len(self._fields)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HeaderSet):
            return NotImplemented
        return self._fields == other._fields

    def __repr__(self) -> str:
        return f"HeaderSet({dict(self.items())!r})"


__all__ = ["CRLF", "ByteSink", "HeaderSet", "canonical_header_name"]
