"""MIME message assembly.

Build a text/plain and/or text/html message and write it in wire format:

    >>> from mimewire.mail import MessageBuilder
    >>> builder = MessageBuilder().set_from("hello@example.com").set_subject("Hi")
    >>> message = builder.encode_base64_plain(b"Hello").as_bytes()  # doctest: +SKIP
"""

from mimewire.mail.builder import (
    DEFAULT_BOUNDARY,
    HTML_CONTENT_TYPE,
    PLAIN_CONTENT_TYPE,
    MessageBuilder,
)
from mimewire.mail.encoding import encode_base64, encode_quoted_printable
from mimewire.mail.exceptions import (
    BoundaryError,
    EmptyBoundaryError,
    EncodingError,
    MailConfigurationError,
    MailError,
    MissingBoundaryMarkerError,
    SinkWriteError,
    UnterminatedBoundaryError,
)
from mimewire.mail.headers import HeaderSet, canonical_header_name

__all__ = [
    "DEFAULT_BOUNDARY",
    "HTML_CONTENT_TYPE",
    "PLAIN_CONTENT_TYPE",
    "BoundaryError",
    "EmptyBoundaryError",
    "EncodingError",
    "HeaderSet",
    "MailConfigurationError",
    "MailError",
    "MessageBuilder",
    "MissingBoundaryMarkerError",
    "SinkWriteError",
    "UnterminatedBoundaryError",
    "canonical_header_name",
    "encode_base64",
    "encode_quoted_printable",
]
