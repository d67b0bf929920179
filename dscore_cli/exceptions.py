"""dscore-cli exception classes."""

from pathlib import Path

__all__ = [
    "DirectoryExistsError",
    "DscoreCliError",
    "EmptyNameError",
    "InvalidCharactersError",
    "InvalidSkillChoiceError",
    "PageNameError",
    "ReservedSuffixError",
    "ScaffoldWriteError",
    "SkillSourceNotFoundError",
]


class DscoreCliError(Exception):
    """Base exception for dscore-cli related errors."""


class PageNameError(DscoreCliError):
    """Base class for page names rejected during validation.

    These errors are recoverable: the interactive prompt asks again, while
    argument mode reports them and exits.
    """


class EmptyNameError(PageNameError):
    """Raised when no page name was given."""

    def __init__(self) -> None:
        super().__init__("Please enter a page name.")


class ReservedSuffixError(PageNameError):
    """Raised when the page name ends with the reserved ``page`` suffix."""

    def __init__(self, page_name: str, suggestion: str) -> None:
        """Initialize the exception.

        Args:
            page_name: The normalized name that was rejected.
            suggestion: The name with the trailing ``-page``/``page`` removed.
        """
        super().__init__(
            f"Names ending with 'page' are not allowed, the suffix is added automatically. "
            f"Try {suggestion!r} instead."
        )
        self.page_name = page_name
        self.suggestion = suggestion


class InvalidCharactersError(PageNameError):
    """Raised when the page name is not lowercase kebab-case."""

    def __init__(self, page_name: str) -> None:
        super().__init__(
            f"Invalid page name {page_name!r}. Use lowercase letters, digits and hyphens, "
            "starting with a letter (e.g. user-mgt, product)."
        )
        self.page_name = page_name


class DirectoryExistsError(PageNameError):
    """Raised when the target page directory is already present."""

    def __init__(self, path: Path, display_path: str) -> None:
        """Initialize the exception.

        Args:
            path: Absolute path of the colliding entry.
            display_path: The same path relative to the working directory.
        """
        super().__init__(f"Directory already exists: {display_path}")
        self.path = path
        self.display_path = display_path


class ScaffoldWriteError(DscoreCliError):
    """Raised when a directory or file of the scaffold cannot be written.

    Writes are not rolled back, ``written`` lists the files left on disk.
    """

    def __init__(self, path: Path, written: list[Path], reason: str) -> None:
        super().__init__(f"Failed to write {path}: {reason}")
        self.path = path
        self.written = written
        self.reason = reason


class InvalidSkillChoiceError(DscoreCliError):
    """Raised when the selected skill number is outside the menu."""

    def __init__(self, choice: int, limit: int) -> None:
        super().__init__(f"Invalid selection {choice}. Enter a number between 1 and {limit}.")
        self.choice = choice
        self.limit = limit


class SkillSourceNotFoundError(DscoreCliError):
    """Raised when the bundled markdown for a skill is missing."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"Skill source file not found: {path}")
        self.path = path
