"""Package metadata for mimewire."""

__app_name__ = "mimewire"
__version__ = "0.3.0"
__author__ = "mimewire contributors"
__description__ = "Build MIME multipart/alternative messages and write them in wire format."

__all__ = ["__app_name__", "__author__", "__description__", "__version__"]
