import logging
import sys

from click import UNPROCESSED, Command, Context, Group, argument, echo, group, option, pass_context, version_option
from rich.logging import RichHandler
from rich.markup import escape

from dscore_cli.__metadata__ import __project__, __version__
from dscore_cli.utils import console, err_console

COMMAND_ALIASES: dict[str, str] = {"gp": "generate-page", "as": "add-skill"}


class DscoreGroup(Group):
    """Command group that resolves aliases and exits with 1 on unknown commands."""

    def get_command(self, ctx: Context, cmd_name: str) -> "Command | None":
        return super().get_command(ctx, COMMAND_ALIASES.get(cmd_name, cmd_name))

    def resolve_command(self, ctx: Context, args: list[str]) -> "tuple[str | None, Command | None, list[str]]":
        cmd_name = args[0]
        command = self.get_command(ctx, cmd_name)
        if command is None:
            if ctx.resilient_parsing:
                return None, None, args[1:]
            err_console.print(f"[red]Unknown command: {escape(cmd_name)}[/]")
            echo(ctx.get_help())
            ctx.exit(1)
        return command.name, command, args[1:]


def _apply_cli_log_level(verbose: bool) -> None:
    """Route package logging to stderr, at debug level when ``verbose`` is set."""
    logger = logging.getLogger("dscore_cli")
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    if not any(isinstance(handler, RichHandler) for handler in logger.handlers):
        logger.addHandler(RichHandler(console=err_console, show_path=False))


@group(
    cls=DscoreGroup,
    name="dscore-cli",
    invoke_without_command=True,
    context_settings={"help_option_names": ["-h", "--help"], "ignore_unknown_options": True},
)
@option("-v", "--verbose", type=bool, help="Enable verbose output.", default=False, is_flag=True)
@version_option(__version__, "--version", prog_name=__project__)
@pass_context
def dscore_group(ctx: Context, verbose: bool) -> None:
    """Scaffold front-end pages and install skill documents.

    \b
    Examples:
      dscore-cli generate-page
      dscore-cli generate-page user-mgt
      dscore-cli gp order-history --react --page
      dscore-cli add-skill
    """
    _apply_cli_log_level(verbose)
    if ctx.invoked_subcommand is None:
        echo(ctx.get_help())


@dscore_group.command(
    name="generate-page",
    help="""Create a new page structure (alias: gp).

    \b
    Options:
      --vue, --vuejs      Generate Vue 3 files (default)
      --react, --reactjs  Generate React files
      --pages             Generate under src/pages/ (default)
      --page              Generate under src/page/
      --base-components   Also generate BaseTable and BasePagination
      --styles            Also generate CSS modules (React)

    Without NAME the page name is asked for interactively.
    """,
    context_settings={"ignore_unknown_options": True},
)
@argument("tokens", nargs=-1, type=UNPROCESSED, metavar="[NAME] [OPTIONS]")
def generate_page_command(tokens: "tuple[str, ...]") -> None:
    """Run the page generator."""
    from dscore_cli.exceptions import PageNameError, ScaffoldWriteError
    from dscore_cli.options import parse_generate_args
    from dscore_cli.scaffolding.generator import generate_page, get_framework_template
    from dscore_cli.shell import ShellContext, print_summary, print_write_error, prompt_for_page_name, show_guide
    from dscore_cli.validation import validate_page_name

    config = parse_generate_args(tokens)
    framework_template = get_framework_template(config.framework)
    context = ShellContext()

    if config.page_name is not None:
        try:
            page_name = validate_page_name(config.page_name, config.directory, cwd=context.cwd)
        except PageNameError as e:
            err_console.print(f"[red]Error: {escape(str(e))}[/]")
            sys.exit(1)
    else:
        show_guide(framework_template, config.directory)
        page_name = prompt_for_page_name(context, config.directory)
        if page_name is None:
            console.print("Bye.")
            return

    console.rule(f"[yellow]Creating {framework_template.name} page structure for {page_name!r}[/]", align="left")
    try:
        result = generate_page(context.cwd, page_name, config)
    except ScaffoldWriteError as e:
        print_write_error(e, context.cwd)
        sys.exit(1)
    print_summary(result, framework_template, context.cwd)


@dscore_group.command(
    name="add-skill",
    help="Install a skill document into .claude/skills (alias: as).",
)
def add_skill_command() -> None:
    """Run the skill installer."""
    from dscore_cli.exceptions import InvalidSkillChoiceError, SkillSourceNotFoundError
    from dscore_cli.shell import ShellContext, print_skill_installed, show_skill_menu
    from dscore_cli.skills import AVAILABLE_SKILLS, install_skill, select_skill

    context = ShellContext()
    show_skill_menu(AVAILABLE_SKILLS)
    try:
        answer = context.ask("Skill number to install")
    except EOFError:
        answer = "0"

    try:
        skill = select_skill(answer)
    except InvalidSkillChoiceError as e:
        err_console.print(f"[red]Error: {e}[/]")
        sys.exit(1)
    if skill is None:
        console.print("Cancelled.")
        return

    console.print(f"Installing the {skill.name} skill...")
    try:
        skill_file = install_skill(skill, context.cwd)
    except (SkillSourceNotFoundError, OSError) as e:
        err_console.print(f"[red]Error: {escape(str(e))}[/]")
        sys.exit(1)
    print_skill_installed(skill, skill_file, context.cwd)


@dscore_group.command(name="help", help="Show this message and exit.")
@pass_context
def help_command(ctx: Context) -> None:
    """Print the top-level usage."""
    echo(ctx.find_root().get_help())


def main() -> None:
    dscore_group(prog_name="dscore-cli")
