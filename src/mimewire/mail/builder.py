"""MIME message builder producing wire-format bytes.

``MessageBuilder`` collects top-level headers and up to two body parts
(text/plain and text/html), then writes them as a single-part message or
as a ``multipart/alternative`` envelope.

Examples:
    >>> import io
    >>> builder = (
    ...     MessageBuilder()
    ...     .set_from("hello@example.com")
    ...     .set_recipients(["alice@example.com", "Bob <bob@example.com>"])
    ...     .set_subject("See you tomorrow")
    ...     .set_plain_charset("utf-8")
    ...     .encode_base64_plain(b"See you tomorrow")
    ... )
    >>> sink = io.BytesIO()
    >>> builder.write(sink)
    >>> b"U2VlIHlvdSB0b21vcnJvdw==" in sink.getvalue()
    True
"""

from __future__ import annotations

import errno
import io
import logging
from collections.abc import Callable, Iterable, Mapping
from datetime import datetime
from email.utils import format_datetime
from typing import Any

from mimewire.logging import TRACE_LEVEL
from mimewire.mail.encoding import (
    BASE64,
    QUOTED_PRINTABLE,
    encode_base64,
    encode_quoted_printable,
)
from mimewire.mail.exceptions import (
    EmptyBoundaryError,
    MailConfigurationError,
    MissingBoundaryMarkerError,
    SinkWriteError,
    UnterminatedBoundaryError,
)
from mimewire.mail.headers import CRLF, ByteSink, HeaderSet

log = logging.getLogger(__name__)

#: Boundary used when neither the Content-Type header nor the builder sets one.
DEFAULT_BOUNDARY = "110000000000863a1705ddeb4f86"

PLAIN_CONTENT_TYPE = "text/plain; charset=utf-8"
HTML_CONTENT_TYPE = "text/html; charset=utf-8"

_BOUNDARY_MARKER = 'boundary="'


def _local_now() -> datetime:
    return datetime.now().astimezone()


class _GuardedSink:
    """Forward writes to the caller's sink, turning OSError into SinkWriteError.

    Raw sinks may accept only part of a chunk and return the count. The rest
    is written again until the chunk is done. A sink that returns anything
    other than an int is taken to have accepted the whole chunk.
    """

    def __init__(self, sink: ByteSink) -> None:
        self._sink = sink
        self.written = 0

    def write(self, data: bytes) -> None:
        remaining = bytes(data)
        while remaining:
            try:
                count = self._sink.write(remaining)
            except OSError as exc:
                raise SinkWriteError(exc) from exc
            if not isinstance(count, int) or count >= len(remaining):
                count = len(remaining)
            elif count <= 0:
                error = OSError(errno.EIO, f"sink accepted none of the remaining {len(remaining)} bytes")
                raise SinkWriteError(error) from error
            self.written += count
            remaining = remaining[count:]


class MessageBuilder:
    """Assemble a MIME message and serialize it in wire format.

    The builder owns three header sets (top-level, plain part, html part)
    which callers may mutate directly to add or override any header,
    including ``Content-Type``, ``Mime-Version``, ``Date`` and
    ``Message-Id``. Setters return the builder so calls can be chained.

    Args:
        boundary: Explicit boundary token, used when the top-level headers
            carry no ``Content-Type``.
        clock: Zero-argument callable returning the time used for the
            ``Date`` header. Defaults to the local time with its zone.

    Examples:
        >>> builder = MessageBuilder(boundary="abc123")
        >>> builder.resolve_boundary()
        'abc123'
        >>> builder.headers.set("Content-Type", 'multipart/alternative; boundary="xyz"')
        >>> builder.resolve_boundary()
        'xyz'
    """

    def __init__(self, *, boundary: str = "", clock: Callable[[], datetime] | None = None) -> None:
        self.headers = HeaderSet()
        self.plain_headers = HeaderSet()
        self.html_headers = HeaderSet()
        self.boundary = boundary
        self._clock = clock or _local_now
        self._plain = bytearray()
        self._html = bytearray()

    @classmethod
    def from_config(cls, **overrides: Any) -> MessageBuilder:
        """Create a builder from the ``mail.builder`` configuration section.

        Recognized keys are ``boundary``, ``plain_charset``, ``html_charset``
        and ``headers`` (top-level headers applied to the message).

        Args:
            **overrides: Values taking precedence over the configuration,
                plus an optional ``clock``.

        Returns:
            Configured MessageBuilder.

        Raises:
            MailConfigurationError: If a configured value has the wrong type.
        """
        from mimewire.config import get_config  # pylint: disable=import-outside-toplevel

        mail_section = get_config().get("mail") or {}
        section: dict[str, Any] = dict(mail_section.get("builder") or {})
        clock = overrides.pop("clock", None)
        section.update(overrides)

        for key in ("boundary", "plain_charset", "html_charset"):
            value = section.get(key)
            if value is not None and not isinstance(value, str):
                raise MailConfigurationError(f"mail.builder.{key} must be a string, got {type(value).__name__}")

        headers = section.get("headers") or {}
        if not isinstance(headers, Mapping):
            raise MailConfigurationError(f"mail.builder.headers must be a mapping, got {type(headers).__name__}")

        builder = cls(boundary=section.get("boundary") or "", clock=clock)
        for name, value in headers.items():
            if value is None:
                raise MailConfigurationError(f"mail.builder.headers.{name} has no value")
            builder.headers.set(str(name), str(value))
        if section.get("plain_charset"):
            builder.set_plain_charset(section["plain_charset"])
        if section.get("html_charset"):
            builder.set_html_charset(section["html_charset"])

        log.debug("MessageBuilder created from config (%d default headers)", len(builder.headers))
        return builder

    @property
    def plain(self) -> bytes:
        """Return the encoded text/plain body."""
        return bytes(self._plain)

    @property
    def html(self) -> bytes:
        """Return the encoded text/html body."""
        return bytes(self._html)

    # ------------------------------------------------------------------
    # Top-level headers
    # ------------------------------------------------------------------

    def set_from(self, address: str) -> MessageBuilder:
        """Set the From header."""
        self.headers.set("From", address)
        return self

    def set_recipients(self, addresses: Iterable[str] | str) -> MessageBuilder:
        """Set the To header from a list of addresses joined with ``", "``.

        Addresses are passed through unchanged, bare or ``Name <addr>``. A
        single string is treated as one address.
        """
        if isinstance(addresses, str):
            addresses = [addresses]
        self.headers.set("To", ", ".join(addresses))
        return self

    set_to = set_recipients

    def set_subject(self, subject: str) -> MessageBuilder:
        """Set the Subject header."""
        self.headers.set("Subject", subject)
        return self

    # ------------------------------------------------------------------
    # Body parts
    # ------------------------------------------------------------------

    def set_plain_charset(self, charset: str) -> MessageBuilder:
        """Set the text/plain part Content-Type with ``charset``."""
        self.plain_headers.set("Content-Type", f"text/plain; charset={charset}")
        return self

    def set_html_charset(self, charset: str) -> MessageBuilder:
        """Set the text/html part Content-Type with ``charset``."""
        self.html_headers.set("Content-Type", f"text/html; charset={charset}")
        return self

    def encode_base64_plain(self, data: bytes) -> MessageBuilder:
        """Replace the text/plain body with the base64 encoding of ``data``."""
        self._encode(self._plain, self.plain_headers, BASE64, encode_base64, data)
        return self

    def encode_base64_html(self, data: bytes) -> MessageBuilder:
        """Replace the text/html body with the base64 encoding of ``data``."""
        self._encode(self._html, self.html_headers, BASE64, encode_base64, data)
        return self

    def encode_quoted_printable_plain(self, data: bytes) -> MessageBuilder:
        """Replace the text/plain body with the quoted-printable encoding of ``data``.

        Raises:
            EncodingError: If the transform fails.
        """
        self._encode(self._plain, self.plain_headers, QUOTED_PRINTABLE, encode_quoted_printable, data)
        return self

    def encode_quoted_printable_html(self, data: bytes) -> MessageBuilder:
        """Replace the text/html body with the quoted-printable encoding of ``data``.

        Raises:
            EncodingError: If the transform fails.
        """
        self._encode(self._html, self.html_headers, QUOTED_PRINTABLE, encode_quoted_printable, data)
        return self

    @staticmethod
    def _encode(
        buffer: bytearray,
        headers: HeaderSet,
        scheme: str,
        encoder: Callable[[bytes], bytes],
        data: bytes,
    ) -> None:
        buffer.clear()
        headers.set("Content-Transfer-Encoding", scheme)
        buffer.extend(encoder(data))

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    def resolve_boundary(self) -> str:
        """Return the boundary token used for a multipart message.

        The ``boundary="..."`` parameter of a top-level Content-Type header
        wins, then the ``boundary`` attribute, then :data:`DEFAULT_BOUNDARY`.

        Raises:
            MissingBoundaryMarkerError: Content-Type has no ``boundary="``.
            UnterminatedBoundaryError: The boundary has no closing quote.
            EmptyBoundaryError: The quoted boundary is empty.
        """
        content_type = self.headers.get("Content-Type")
        if content_type:
            start = content_type.find(_BOUNDARY_MARKER)
            if start == -1:
                raise MissingBoundaryMarkerError(content_type)
            start += len(_BOUNDARY_MARKER)
            end = content_type.find('"', start)
            if end == -1:
                raise UnterminatedBoundaryError(content_type)
            boundary = content_type[start:end]
            if not boundary:
                raise EmptyBoundaryError(content_type)
            log.log(TRACE_LEVEL, "Boundary %r taken from Content-Type header", boundary)
            return boundary

        if self.boundary:
            return self.boundary
        return DEFAULT_BOUNDARY

    def write(self, sink: ByteSink) -> None:
        """Write the message in wire format to ``sink``.

        Top-level headers are written before the boundary is resolved, so a
        malformed Content-Type leaves them in the sink. Nothing is rolled
        back on failure; use :meth:`as_bytes` when atomicity matters.

        Args:
            sink: Object with a ``write(bytes)`` method.

        Raises:
            BoundaryError: If the top-level Content-Type boundary is malformed.
            SinkWriteError: If the sink raises ``OSError``.
        """
        out = _GuardedSink(sink)
        has_plain = bool(self._plain)
        has_html = bool(self._html)
        multipart = has_plain and has_html

        self.headers.write_to(out)

        derived = HeaderSet()
        if not self.headers.get("Mime-Version"):
            derived.set("Mime-Version", "1.0")
        if not self.headers.get("Date"):
            derived.set("Date", format_datetime(self._clock()))

        boundary = ""
        if multipart:
            boundary = self.resolve_boundary()
            if not self.headers.get("Content-Type"):
                derived.set("Content-Type", f'multipart/alternative; boundary="{boundary}"')
        derived.write_to(out)

        if multipart:
            out.write(CRLF)
            self._write_part(out, self.plain_headers, PLAIN_CONTENT_TYPE, self._plain, boundary)
            self._write_part(out, self.html_headers, HTML_CONTENT_TYPE, self._html, boundary)
            out.write(f"--{boundary}--".encode())
        elif has_html:
            self._write_part(out, self.html_headers, HTML_CONTENT_TYPE, self._html)
        else:
            self._write_part(out, self.plain_headers, PLAIN_CONTENT_TYPE, self._plain)

        log.debug(
            "Wrote %s message (%d bytes, plain=%d, html=%d)",
            "multipart/alternative" if multipart else "single-part",
            out.written,
            len(self._plain),
            len(self._html),
        )

    @staticmethod
    def _write_part(
        out: _GuardedSink,
        headers: HeaderSet,
        default_content_type: str,
        body: bytes | bytearray,
        boundary: str = "",
    ) -> None:
        if boundary:
            out.write(f"--{boundary}".encode() + CRLF)
        headers.write_to(out)
        if not headers.get("Content-Type"):
            HeaderSet({"Content-Type": default_content_type}).write_to(out)
        out.write(CRLF)
        out.write(bytes(body))
        out.write(CRLF)

    def as_bytes(self) -> bytes:
        """Serialize the message into memory and return it."""
        buffer = io.BytesIO()
        self.write(buffer)
        return buffer.getvalue()


__all__ = [
    "DEFAULT_BOUNDARY",
    "HTML_CONTENT_TYPE",
    "PLAIN_CONTENT_TYPE",
    "MessageBuilder",
]
