"""Page name validation."""

import re
from pathlib import Path

from dscore_cli.exceptions import (
    DirectoryExistsError,
    EmptyNameError,
    InvalidCharactersError,
    ReservedSuffixError,
)
from dscore_cli.options import PageDirectory
from dscore_cli.utils import display_path

__all__ = ("PAGE_NAME_PATTERN", "get_page_dir", "validate_page_name")

PAGE_NAME_PATTERN = re.compile(r"^[a-z][a-z0-9-]*$")
RESERVED_SUFFIX_PATTERN = re.compile(r"-?page$")


def get_page_dir(cwd: Path, directory: "PageDirectory | str", page_name: str) -> Path:
    """Return ``<cwd>/src/<directory>/<page_name>``."""
    return cwd / "src" / PageDirectory(directory).value / page_name


def validate_page_name(raw: "str | None", directory: "PageDirectory | str", *, cwd: Path) -> str:
    """Validate a user supplied page name.

    Rules are checked in order and the first failure is raised:

    1. The name must not be empty or blank.
    2. The name must not end with ``page`` or ``-page`` (case-insensitive).
    3. The name must be lowercase kebab-case starting with a letter.
    4. ``src/<directory>/<name>`` must not exist below ``cwd``.

    Args:
        raw: The name as typed by the user.
        directory: Base directory under ``src/``.
        cwd: Project root the page is generated in.

    Raises:
        EmptyNameError: The name is empty.
        ReservedSuffixError: The name ends with the ``page`` suffix.
        InvalidCharactersError: The name contains characters outside ``[a-z0-9-]``.
        DirectoryExistsError: The target directory is already present.

    Returns:
        The normalized page name.
    """
    if raw is None or not raw.strip():
        raise EmptyNameError

    stripped = raw.strip()
    page_name = stripped.lower()

    if page_name.endswith("page"):
        raise ReservedSuffixError(page_name, RESERVED_SUFFIX_PATTERN.sub("", page_name))

    if not PAGE_NAME_PATTERN.fullmatch(stripped):
        raise InvalidCharactersError(stripped)

    target_dir = get_page_dir(cwd, directory, page_name)
    if target_dir.exists():
        raise DirectoryExistsError(target_dir, display_path(target_dir, cwd))

    return page_name
