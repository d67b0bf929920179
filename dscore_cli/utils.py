"""Utility helpers for dscore-cli."""

from importlib.util import find_spec
from pathlib import Path

from rich.console import Console

__all__ = ("console", "display_path", "err_console", "get_package_path", "read_text_file")

console = Console()
err_console = Console(stderr=True)


def get_package_path(*parts: str) -> Path:
    """Resolve a path inside the installed dscore-cli package.

    Args:
        *parts: Path segments relative to the package root.

    Returns:
        The resolved package path.
    """
    spec = find_spec("dscore_cli")
    if spec and spec.origin:
        return Path(spec.origin).parent.joinpath(*parts)
    # Fallback for uncommon import contexts.
    return Path(__file__).resolve().parent.joinpath(*parts)


def read_text_file(path: Path, *, encoding: str = "utf-8") -> str:
    """Read a text file with consistent encoding.

    Args:
        path: File path to read.
        encoding: Text encoding.

    Returns:
        File contents.
    """
    return path.read_text(encoding=encoding)


def display_path(path: Path, cwd: Path) -> str:
    """Format ``path`` relative to ``cwd`` with forward slashes.

    Paths outside ``cwd`` are returned unchanged.

    Returns:
        The path as shown to the user.
    """
    try:
        return path.relative_to(cwd).as_posix()
    except ValueError:
        return str(path)
