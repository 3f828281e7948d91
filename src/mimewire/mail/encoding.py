"""Content-Transfer-Encoding transforms for body parts.

Both encoders take raw bytes and return wire-ready bytes:

- ``encode_base64``: standard alphabet, ``=`` padding, no line breaks.
- ``encode_quoted_printable``: RFC 2045, ``=XX`` escapes, lines soft-wrapped
  at 76 columns with ``=`` CRLF continuations. CRLF pairs in the input stay
  hard line breaks; lone CR or LF bytes are escaped so decoding returns the
  exact input.
"""

from __future__ import annotations

import base64
import binascii

from mimewire.mail.exceptions import EncodingError

BASE64 = "base64"
QUOTED_PRINTABLE = "quoted-printable"

#: Longest encoded line allowed by RFC 2045, soft-break marker included.
MAX_LINE_LENGTH = 76


def encode_base64(data: bytes) -> bytes:
    """Encode ``data`` with standard base64.

    Raises:
        EncodingError: If ``data`` is not bytes-like.

    Examples:
        >>> encode_base64(b"See you tomorrow")
        b'U2VlIHlvdSB0b21vcnJvdw=='
    """
    try:
        return base64.b64encode(data)
    except (TypeError, binascii.Error) as exc:
        raise EncodingError(BASE64, str(exc)) from exc


def _soft_wrap(escaped: bytes) -> bytes:
    """Split one escaped line into ``=`` CRLF continuations of at most 76 columns.

    ``=XX`` escapes are never split. Every line but the last keeps one column
    free for the trailing ``=``.
    """
    lines: list[bytes] = []
    current = bytearray()
    i = 0
    while i < len(escaped):
        size = 3 if escaped[i] == ord("=") else 1
        limit = MAX_LINE_LENGTH if i + size >= len(escaped) else MAX_LINE_LENGTH - 1
        if len(current) + size > limit:
            lines.append(bytes(current) + b"=")
            current.clear()
        current += escaped[i : i + size]
        i += size
    lines.append(bytes(current))
    return b"\r\n".join(lines)


def encode_quoted_printable(data: bytes) -> bytes:
    """Encode ``data`` with quoted-printable.

    Raises:
        EncodingError: If ``data`` is not bytes-like.

    Examples:
        >>> encode_quoted_printable("Hélló world".encode())
        b'H=C3=A9ll=C3=B3 world'
    """
    try:
        lines = bytes(data).split(b"\r\n")
        # Binary mode escapes every CR and LF, so the only newlines left are soft breaks
        escaped = [binascii.b2a_qp(line, quotetabs=False, istext=False, header=False) for line in lines]
    except (TypeError, binascii.Error) as exc:
        raise EncodingError(QUOTED_PRINTABLE, str(exc)) from exc
    # b2a_qp miscounts the soft break before an escaped LF, so wrap again from scratch
    return b"\r\n".join(_soft_wrap(line.replace(b"=\n", b"")) for line in escaped)


__all__ = ["BASE64", "MAX_LINE_LENGTH", "QUOTED_PRINTABLE", "encode_base64", "encode_quoted_printable"]
