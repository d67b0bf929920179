"""Page scaffolding generator.

This module renders the framework templates for a validated page name and
writes them below ``src/<directory>/<page_name>``.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader

from dscore_cli.exceptions import ScaffoldWriteError
from dscore_cli.naming import NameCasings, derive_casings
from dscore_cli.options import Framework, GenerationConfig, PageDirectory
from dscore_cli.scaffolding.templates import FileRole, FrameworkTemplate, get_template
from dscore_cli.validation import get_page_dir

__all__ = (
    "GenerationResult",
    "PlannedFile",
    "ScaffoldPlan",
    "TemplateContext",
    "build_template_set",
    "generate_page",
    "get_framework_template",
    "get_template_dir",
    "plan_scaffold",
    "write_scaffold",
)

logger = logging.getLogger("dscore_cli")

TemplateSet = dict[FileRole, str]


@dataclass(frozen=True)
class TemplateContext:
    """Context variables for template rendering.

    Attributes:
        page_name: Validated kebab-case page name
        pascal_name: PascalCase form of the page name
        camel_name: camelCase form of the page name
        framework: Target framework
        directory: Base directory under ``src/``
        include_base_components: Whether the base table/pagination components are emitted
        include_stylesheets: Whether CSS modules are emitted
    """

    page_name: str
    pascal_name: str
    camel_name: str
    framework: Framework = Framework.VUE
    directory: PageDirectory = PageDirectory.PAGES
    include_base_components: bool = False
    include_stylesheets: bool = False

    @classmethod
    def from_config(cls, page_name: str, config: GenerationConfig) -> "TemplateContext":
        casings = derive_casings(page_name)
        return cls(
            page_name=page_name,
            pascal_name=casings.pascal,
            camel_name=casings.camel,
            framework=config.framework,
            directory=config.directory,
            include_base_components=config.include_base_components,
            include_stylesheets=config.include_stylesheets,
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert context to dictionary for Jinja2 rendering.

        Returns:
            Dictionary of template variables.
        """
        return {
            "page_name": self.page_name,
            "pascal_name": self.pascal_name,
            "camel_name": self.camel_name,
            "framework": self.framework.value,
            "directory": self.directory.value,
        }


@dataclass(frozen=True)
class PlannedFile:
    """A rendered file and its path relative to the page directory."""

    role: FileRole
    relative_path: str
    content: str


@dataclass(frozen=True)
class ScaffoldPlan:
    """Directories to create and files to write, both in order."""

    directories: tuple[str, ...]
    files: tuple[PlannedFile, ...]


@dataclass
class GenerationResult:
    """Outcome of a successful page generation."""

    page_name: str
    casings: NameCasings
    framework: Framework
    directory: PageDirectory
    target_dir: Path
    written: list[Path] = field(default_factory=list)


def get_template_dir() -> Path:
    """Get the directory containing framework templates.

    Returns:
        Path to the templates directory.
    """
    return Path(__file__).parent.parent / "templates"


def get_framework_template(framework: "Framework | str") -> FrameworkTemplate:
    template = get_template(framework)
    if template is None:
        msg = f"No templates registered for framework {framework!r}"
        raise ValueError(msg)
    return template


def _get_environment(framework: Framework) -> Environment:
    """Build the Jinja2 environment for a framework.

    Framework templates take precedence over ``base`` templates of the same
    name. Autoescaping is disabled because the output is source code, not HTML.
    """
    template_dir = get_template_dir()
    return Environment(
        loader=FileSystemLoader([str(template_dir / framework.value), str(template_dir / "base")]),
        keep_trailing_newline=True,
        autoescape=False,  # noqa: S701
    )


def build_template_set(context: TemplateContext) -> TemplateSet:
    """Render every file enabled for the context.

    Args:
        context: Names and options for the page.

    Returns:
        Mapping of file role to rendered content, in write order.
    """
    framework_template = get_framework_template(context.framework)
    env = _get_environment(context.framework)
    context_dict = context.to_dict()

    template_set: TemplateSet = {}
    for template_file in framework_template.select_files(
        include_base_components=context.include_base_components,
        include_stylesheets=context.include_stylesheets,
    ):
        template_name = template_file.template
        if context.include_stylesheets and template_file.styled_template:
            template_name = template_file.styled_template
        template_set[template_file.role] = env.get_template(template_name).render(**context_dict)
    return template_set


def plan_scaffold(framework: Framework, template_set: TemplateSet, pascal_name: str) -> ScaffoldPlan:
    """Map rendered content to output paths.

    Roles are laid out in the order the framework declares them. Roles missing
    from ``template_set`` are skipped.

    Raises:
        ValueError: If ``template_set`` holds a role the framework does not define.

    Returns:
        The ordered scaffold plan.
    """
    framework_template = get_framework_template(framework)
    known_roles = {template_file.role for template_file in framework_template.files}
    unknown_roles = set(template_set) - known_roles
    if unknown_roles:
        names = ", ".join(sorted(role.value for role in unknown_roles))
        msg = f"Roles not supported by {framework_template.name}: {names}"
        raise ValueError(msg)

    files = tuple(
        PlannedFile(
            role=template_file.role,
            relative_path=template_file.output_path(pascal_name),
            content=template_set[template_file.role],
        )
        for template_file in framework_template.files
        if template_file.role in template_set
    )
    return ScaffoldPlan(directories=tuple(framework_template.directories), files=files)


def _write_file(path: Path, content: str) -> None:
    path.write_text(content, encoding="utf-8")


def write_scaffold(target_root: Path, plan: ScaffoldPlan) -> list[Path]:
    """Create the plan's directories, then write its files in order.

    Nothing is rolled back when a write fails.

    Args:
        target_root: The page directory.
        plan: Directories and files to write.

    Raises:
        ScaffoldWriteError: On the first directory or file that cannot be written.

    Returns:
        The written file paths, in order.
    """
    written: list[Path] = []

    for directory in plan.directories:
        path = target_root / directory
        try:
            path.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise ScaffoldWriteError(path, list(written), e.strerror or str(e)) from e
        logger.debug("Created directory %s", path)

    for planned_file in plan.files:
        path = target_root / planned_file.relative_path
        try:
            _write_file(path, planned_file.content)
        except OSError as e:
            raise ScaffoldWriteError(path, list(written), e.strerror or str(e)) from e
        logger.debug("Wrote %s (%s)", path, planned_file.role.value)
        written.append(path)

    return written


def generate_page(cwd: Path, page_name: str, config: GenerationConfig) -> GenerationResult:
    """Render and write the scaffold for a validated page name.

    Args:
        cwd: Project root containing ``src/``.
        page_name: Name returned by :func:`~dscore_cli.validation.validate_page_name`.
        config: Framework, directory and optional roles.

    Raises:
        ScaffoldWriteError: If a directory or file cannot be written.

    Returns:
        The generation result including the written paths.
    """
    context = TemplateContext.from_config(page_name, config)
    target_dir = get_page_dir(cwd, config.directory, page_name)
    logger.debug("Generating %s page %r in %s", config.framework.value, page_name, target_dir)

    template_set = build_template_set(context)
    plan = plan_scaffold(config.framework, template_set, context.pascal_name)
    written = write_scaffold(target_dir, plan)

    return GenerationResult(
        page_name=page_name,
        casings=NameCasings(pascal=context.pascal_name, camel=context.camel_name),
        framework=config.framework,
        directory=config.directory,
        target_dir=target_dir,
        written=written,
    )
