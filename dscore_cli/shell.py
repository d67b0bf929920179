"""Interactive console helpers for the CLI commands."""

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from pathlib import Path

from rich.markup import escape
from rich.panel import Panel
from rich.prompt import Prompt
from rich.table import Table

from dscore_cli.exceptions import PageNameError, ScaffoldWriteError
from dscore_cli.naming import to_pascal_case
from dscore_cli.options import PageDirectory
from dscore_cli.scaffolding.generator import GenerationResult
from dscore_cli.scaffolding.templates import FrameworkTemplate
from dscore_cli.skills import Skill
from dscore_cli.utils import console, display_path, err_console
from dscore_cli.validation import validate_page_name

__all__ = (
    "QUIT_WORDS",
    "ShellContext",
    "print_skill_installed",
    "print_summary",
    "print_write_error",
    "prompt_for_page_name",
    "show_guide",
    "show_skill_menu",
)

QUIT_WORDS = frozenset({"q", "quit"})
GUIDE_EXAMPLES = ("user-mgt", "product", "order-history")


def _default_ask(prompt: str) -> str:
    return Prompt.ask(prompt, console=console)


@dataclass
class ShellContext:
    """Working directory and line reader used by the interactive flow.

    Attributes:
        cwd: Project root that pages and skills are written below.
        ask: Reads one line of input after showing the given prompt.
    """

    cwd: Path = field(default_factory=Path.cwd)
    ask: Callable[[str], str] = field(default=_default_ask)


def show_guide(framework_template: FrameworkTemplate, directory: PageDirectory) -> None:
    """Print the naming rules for the interactive page prompt."""
    lines = [
        f"Creates a new page folder and starter files in [bold]src/{directory.value}/[/].",
        "",
        "[bold]Rules[/]",
        "  • Enter the domain name only, in kebab-case",
        '  • Do not add a "-page" suffix, it is added automatically',
        "",
        "[green]Valid[/]",
    ]
    lines.extend(
        f"  • {name:<14} → {to_pascal_case(name)}Page{framework_template.extension}" for name in GUIDE_EXAMPLES
    )
    lines.extend(
        [
            "",
            "[red]Invalid[/]",
            "  • user-page      (page suffix)",
            "  • UserMgt        (use lowercase kebab-case)",
        ]
    )
    console.print(Panel("\n".join(lines), title=f"Page Generator ({framework_template.name})", expand=False))


def prompt_for_page_name(context: ShellContext, directory: PageDirectory) -> "str | None":
    """Ask for a page name until a valid one is entered.

    Args:
        context: Working directory and line reader.
        directory: Base directory the page will be generated in.

    Returns:
        The validated page name, or None if the user quit or input ended.
    """
    while True:
        try:
            answer = context.ask("Page name (q to quit)")
        except EOFError:
            return None
        if answer.strip().lower() in QUIT_WORDS:
            return None
        try:
            return validate_page_name(answer, directory, cwd=context.cwd)
        except PageNameError as e:
            console.print(f"[red]✗ {escape(str(e))}[/]")


def print_summary(result: GenerationResult, framework_template: FrameworkTemplate, cwd: Path) -> None:
    """Print the written files and the framework's next steps."""
    fmt = {
        "page_name": result.page_name,
        "pascal_name": result.casings.pascal,
        "directory": result.directory.value,
    }
    console.rule("[green]Page created[/]", align="left")
    console.print(f"Path: [bold]{display_path(result.target_dir, cwd)}/[/]")
    console.print("Files:")
    for path in result.written:
        console.print(f"  [green]✓[/] {escape(display_path(path, result.target_dir))}")
    console.print("Next steps:")
    for index, step in enumerate(framework_template.next_steps, start=1):
        console.print(f"  {index}. {step.format(**fmt)}", markup=False)


def print_write_error(error: ScaffoldWriteError, cwd: Path) -> None:
    err_console.print(f"[red]Error: {escape(str(error))}[/]")
    if error.written:
        err_console.print("[yellow]Files left on disk:[/]")
        for path in error.written:
            err_console.print(f"  {display_path(path, cwd)}", markup=False)


def show_skill_menu(skills: Sequence[Skill]) -> None:
    table = Table(title="Available skills", show_header=False, box=None)
    for index, skill in enumerate(skills, start=1):
        table.add_row(f"{index}.", skill.name, skill.description)
    table.add_row("0.", "Cancel", "")
    console.print(table)


def print_skill_installed(skill: Skill, path: Path, cwd: Path) -> None:
    console.rule("[green]Skill installed[/]", align="left")
    console.print(f"Skill: [bold]{skill.name}[/]")
    console.print(f"File: {display_path(path, cwd)}")
    console.print(f"Invoke it with /{skill.id} or ask a related question to load it automatically.")
