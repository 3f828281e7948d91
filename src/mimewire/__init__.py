"""mimewire: build MIME mail messages and write them in wire format.

Examples:
    >>> from mimewire import MessageBuilder
    >>> builder = MessageBuilder().set_from("hello@example.com")
    >>> builder.headers.get("from")
    'hello@example.com'
"""

from mimewire.config import (
    MimewireError,
    clear_config,
    get_config,
    load_config,
    load_from_env,
    load_from_file,
    require_config,
)
from mimewire.logging import LogManager
from mimewire.mail import (
    DEFAULT_BOUNDARY,
    BoundaryError,
    EmptyBoundaryError,
    EncodingError,
    HeaderSet,
    MailError,
    MessageBuilder,
    MissingBoundaryMarkerError,
    SinkWriteError,
    UnterminatedBoundaryError,
)
from mimewire.meta import __app_name__, __version__

__all__ = [
    "DEFAULT_BOUNDARY",
    "BoundaryError",
    "EmptyBoundaryError",
    "EncodingError",
    "HeaderSet",
    "LogManager",
    "MailError",
    "MessageBuilder",
    "MimewireError",
    "MissingBoundaryMarkerError",
    "SinkWriteError",
    "UnterminatedBoundaryError",
    "__app_name__",
    "__version__",
    "clear_config",
    "get_config",
    "load_config",
    "load_from_env",
    "load_from_file",
    "require_config",
]
