"""Argument handling for the ``generate-page`` command.

The command accepts a flat list of tokens rather than declaring click options
so that repeated and unknown flags follow the rules below:

- ``--vue``/``--vuejs`` and ``--react``/``--reactjs`` select the framework.
- ``--pages`` and ``--page`` select the base directory under ``src/``.
- ``--base-components`` and ``--styles`` enable the optional file roles.
- Any other token not starting with ``--`` is the page name.

The last token wins for each axis and unknown ``--`` flags are ignored.
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass, replace
from enum import Enum

__all__ = ("Framework", "GenerationConfig", "PageDirectory", "parse_generate_args")

logger = logging.getLogger("dscore_cli")


class Framework(str, Enum):
    """Supported UI frameworks."""

    VUE = "vue"
    REACT = "react"


class PageDirectory(str, Enum):
    """Base directories under ``src/`` that hold generated pages."""

    PAGES = "pages"
    PAGE = "page"


@dataclass(frozen=True)
class GenerationConfig:
    """Settings for a single ``generate-page`` run.

    Attributes:
        framework: Target UI framework.
        directory: Base directory under ``src/``.
        page_name: Raw page name from the command line, if any.
        include_base_components: Also emit the shared table and pagination components.
        include_stylesheets: Emit CSS modules for the React components.
    """

    framework: Framework = Framework.VUE
    directory: PageDirectory = PageDirectory.PAGES
    page_name: "str | None" = None
    include_base_components: bool = False
    include_stylesheets: bool = False


def parse_generate_args(tokens: Sequence[str]) -> GenerationConfig:
    """Parse ``generate-page`` tokens into a :class:`GenerationConfig`.

    Args:
        tokens: Command-line tokens following the command name.

    Returns:
        The parsed configuration, using defaults for any axis not given.
    """
    config = GenerationConfig()
    for token in tokens:
        match token:
            case "--vue" | "--vuejs":
                config = replace(config, framework=Framework.VUE)
            case "--react" | "--reactjs":
                config = replace(config, framework=Framework.REACT)
            case "--pages":
                config = replace(config, directory=PageDirectory.PAGES)
            case "--page":
                config = replace(config, directory=PageDirectory.PAGE)
            case "--base-components":
                config = replace(config, include_base_components=True)
            case "--styles":
                config = replace(config, include_stylesheets=True)
            case _ if token.startswith("--"):
                logger.debug("Ignoring unknown option %s", token)
            case _:
                config = replace(config, page_name=token)
    return config
