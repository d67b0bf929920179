"""Framework template definitions for page scaffolding.

This module defines which files each framework generates, where they are
written inside the page directory and which Jinja2 template renders them.
"""

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum

from dscore_cli.options import Framework

__all__ = (
    "FRAMEWORK_TEMPLATES",
    "FileRole",
    "FrameworkTemplate",
    "TemplateFile",
    "get_available_templates",
    "get_template",
)


class FileRole(str, Enum):
    """Logical purpose of a generated file."""

    PAGE = "page"
    CONSTANTS = "constants"
    API = "api"
    HOOK = "hook"
    COMPOSABLE = "composable"
    SEARCH = "search"
    LIST = "list"
    BASE_TABLE = "base_table"
    BASE_PAGINATION = "base_pagination"
    PAGE_STYLE = "page_style"
    SEARCH_STYLE = "search_style"
    LIST_STYLE = "list_style"


class Requirement(str, Enum):
    """Optional feature a template file depends on."""

    BASE_COMPONENTS = "base_components"
    STYLESHEETS = "stylesheets"


@dataclass(frozen=True)
class TemplateFile:
    """A single file emitted for a page.

    Attributes:
        role: Logical purpose of the file.
        path: Output path relative to the page directory, formatted with ``pascal_name``.
        template: Jinja2 template name.
        styled_template: Template used instead of ``template`` when stylesheets are enabled.
        requires: Feature that must be enabled for the file to be emitted.
    """

    role: FileRole
    path: str
    template: str
    styled_template: "str | None" = None
    requires: "Requirement | None" = None

    def output_path(self, pascal_name: str) -> str:
        return self.path.format(pascal_name=pascal_name)


def _str_list_factory() -> list[str]:
    return []


def _template_file_list_factory() -> list[TemplateFile]:
    return []


_ListStrFactory: Callable[[], list[str]] = _str_list_factory
_ListTemplateFileFactory: Callable[[], list[TemplateFile]] = _template_file_list_factory


@dataclass
class FrameworkTemplate:
    """Configuration for a framework's page scaffold.

    Attributes:
        name: Display name for the framework
        type: Framework enum
        description: Brief description shown in the guide
        extension: File extension of the page and component files
        directories: Subdirectories created before any file is written
        files: Files to generate, in write order
        next_steps: Follow-up hints printed after generation, formatted with
            ``page_name``, ``pascal_name`` and ``directory``
    """

    name: str
    type: Framework
    description: str
    extension: str
    directories: list[str] = field(default_factory=_ListStrFactory)
    files: list[TemplateFile] = field(default_factory=_ListTemplateFileFactory)
    next_steps: list[str] = field(default_factory=_ListStrFactory)

    def select_files(self, *, include_base_components: bool, include_stylesheets: bool) -> list[TemplateFile]:
        """Return the files enabled by the given options, in write order."""
        enabled = {
            None: True,
            Requirement.BASE_COMPONENTS: include_base_components,
            Requirement.STYLESHEETS: include_stylesheets,
        }
        return [template_file for template_file in self.files if enabled[template_file.requires]]


FRAMEWORK_TEMPLATES: dict[Framework, FrameworkTemplate] = {
    Framework.VUE: FrameworkTemplate(
        name="Vue 3",
        type=Framework.VUE,
        description="Vue 3 single file components with a composable",
        extension=".vue",
        directories=["composables", "components"],
        files=[
            TemplateFile(FileRole.PAGE, "{pascal_name}Page.vue", "page.vue.j2"),
            TemplateFile(FileRole.CONSTANTS, "constants.js", "constants.js.j2"),
            TemplateFile(FileRole.API, "api.js", "api.js.j2"),
            TemplateFile(FileRole.COMPOSABLE, "composables/use{pascal_name}.js", "composable.js.j2"),
            TemplateFile(FileRole.SEARCH, "components/{pascal_name}Search.vue", "search.vue.j2"),
            TemplateFile(FileRole.LIST, "components/{pascal_name}List.vue", "list.vue.j2"),
            TemplateFile(
                FileRole.BASE_TABLE,
                "components/BaseTable.vue",
                "base_table.vue.j2",
                requires=Requirement.BASE_COMPONENTS,
            ),
            TemplateFile(
                FileRole.BASE_PAGINATION,
                "components/BasePagination.vue",
                "base_pagination.vue.j2",
                requires=Requirement.BASE_COMPONENTS,
            ),
        ],
        next_steps=[
            "Register a route for src/{directory}/{page_name}/{pascal_name}Page.vue in src/router",
            "Set the real API paths in api.js",
            "Adjust the table headers and constants in constants.js",
        ],
    ),
    Framework.REACT: FrameworkTemplate(
        name="React",
        type=Framework.REACT,
        description="React function components with a custom hook",
        extension=".jsx",
        directories=["components/hooks", "components/ui"],
        files=[
            TemplateFile(FileRole.PAGE, "{pascal_name}Page.jsx", "page.jsx.j2", styled_template="styled/page.jsx.j2"),
            TemplateFile(FileRole.CONSTANTS, "components/constants.js", "constants.js.j2"),
            TemplateFile(FileRole.API, "components/api.js", "api.js.j2"),
            TemplateFile(FileRole.HOOK, "components/hooks/use{pascal_name}.js", "hook.js.j2"),
            TemplateFile(
                FileRole.SEARCH,
                "components/ui/{pascal_name}Search.jsx",
                "search.jsx.j2",
                styled_template="styled/search.jsx.j2",
            ),
            TemplateFile(
                FileRole.LIST,
                "components/ui/{pascal_name}List.jsx",
                "list.jsx.j2",
                styled_template="styled/list.jsx.j2",
            ),
            TemplateFile(
                FileRole.BASE_TABLE,
                "components/ui/BaseTable.jsx",
                "base_table.jsx.j2",
                requires=Requirement.BASE_COMPONENTS,
            ),
            TemplateFile(
                FileRole.BASE_PAGINATION,
                "components/ui/BasePagination.jsx",
                "base_pagination.jsx.j2",
                requires=Requirement.BASE_COMPONENTS,
            ),
            TemplateFile(
                FileRole.PAGE_STYLE,
                "{pascal_name}Page.module.css",
                "page.module.css.j2",
                requires=Requirement.STYLESHEETS,
            ),
            TemplateFile(
                FileRole.SEARCH_STYLE,
                "components/ui/{pascal_name}Search.module.css",
                "search.module.css.j2",
                requires=Requirement.STYLESHEETS,
            ),
            TemplateFile(
                FileRole.LIST_STYLE,
                "components/ui/{pascal_name}List.module.css",
                "list.module.css.j2",
                requires=Requirement.STYLESHEETS,
            ),
        ],
        next_steps=[
            "Create the route file src/app/(next-router)/om/{page_name}/page.js",
            "Set the real API paths in components/api.js",
            "Adjust the table headers and constants in components/constants.js",
        ],
    ),
}


def get_available_templates() -> list[FrameworkTemplate]:
    """Get all available framework templates.

    Returns:
        List of available FrameworkTemplate instances.
    """
    return list(FRAMEWORK_TEMPLATES.values())


def get_template(framework: "Framework | str") -> "FrameworkTemplate | None":
    """Get the template definition for a framework.

    Args:
        framework: The framework (enum or string).

    Returns:
        The FrameworkTemplate if found, None otherwise.
    """
    if isinstance(framework, Framework):
        return FRAMEWORK_TEMPLATES.get(framework)
    try:
        return FRAMEWORK_TEMPLATES.get(Framework(framework))
    except ValueError:
        return None
