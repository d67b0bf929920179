"""Metadata for the Project."""

from importlib.metadata import PackageNotFoundError, metadata, version

__all__ = ("__project__", "__version__")

try:
    __version__ = version("dscore-cli")
    """Version of the project."""
    __project__ = metadata("dscore-cli")["Name"]
    """Name of the project."""
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"
    __project__ = "dscore-cli"
finally:
    del version, PackageNotFoundError, metadata
