"""Specialized exceptions raised by the mimewire.mail module.

Exception hierarchy::

    MimewireError
        MailError (base for all mail errors)
            MailConfigurationError (invalid builder configuration, also ValueError)
            EncodingError (base64 / quoted-printable transform failed)
            BoundaryError (malformed Content-Type boundary, also ValueError)
                MissingBoundaryMarkerError
                UnterminatedBoundaryError
                EmptyBoundaryError
            SinkWriteError (output sink rejected a write)
"""

from __future__ import annotations

from mimewire.config.exceptions import MimewireError


class MailError(MimewireError):
    """Base exception for all mail module errors."""


class MailConfigurationError(MailError, ValueError):
    """Builder configuration loaded from ``mail.builder`` is invalid."""


class EncodingError(MailError):
    """A body transfer encoding failed.

    Attributes:
        scheme: Name of the encoding (``base64`` or ``quoted-printable``).
        reason: Description of the failure.
    """

    def __init__(self, scheme: str, reason: str) -> None:
        """Initialize EncodingError.

        Args:
            scheme: Name of the encoding.
            reason: Description of the failure.
        """
        super().__init__(f"{scheme} encoding failed: {reason}")
        self.scheme = scheme
        self.reason = reason


class BoundaryError(MailError, ValueError):
    """The boundary could not be read from the top-level Content-Type header.

    Attributes:
        content_type: The offending header value.
    """

    description = "invalid boundary in Content-Type header"

    def __init__(self, content_type: str) -> None:
        """Initialize BoundaryError.

        Args:
            content_type: The Content-Type header value that failed to parse.
        """
        super().__init__(f"{self.description}: {content_type!r}")
        self.content_type = content_type


class MissingBoundaryMarkerError(BoundaryError):
    """No ``boundary="`` marker in the Content-Type header."""

    description = "beginning of the boundary not found in Content-Type header"


class UnterminatedBoundaryError(BoundaryError):
    """The boundary parameter has no closing quote."""

    description = "end of the boundary not found in Content-Type header"


class EmptyBoundaryError(BoundaryError):
    """The boundary parameter is an empty string."""

    description = "empty boundary in Content-Type header"


class SinkWriteError(MailError):
    """The output sink rejected a write.

    Bytes written before the failure stay in the sink.

    Attributes:
        original: The exception raised by the sink.
    """

    def __init__(self, original: OSError) -> None:
        """Initialize SinkWriteError.

        Args:
            original: The exception raised by the sink.
        """
        super().__init__(f"Writing to the output sink failed: {original}")
        self.original = original


__all__ = [
    "BoundaryError",
    "EmptyBoundaryError",
    "EncodingError",
    "MailConfigurationError",
    "MailError",
    "MissingBoundaryMarkerError",
    "SinkWriteError",
    "UnterminatedBoundaryError",
]
