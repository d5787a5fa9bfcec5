import sys
from typing import List, Tuple

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from aliasmenu import __version__
from aliasmenu.config import Config
from aliasmenu.loader import AliasLoadError, AliasLoader
from aliasmenu.logger import setup_logging
from aliasmenu.models import AliasEntry

console = Console()
err_console = Console(stderr=True)


def load_or_exit() -> Tuple[List[AliasEntry], int]:
    """Load ~/.bash_aliases, exiting with status 1 on any load error.

    Returns the aliases and the number of alias lines skipped for lacking '='.
    """
    loader = AliasLoader()
    try:
        aliases = loader.load()
    except AliasLoadError as e:
        err_console.print(f"[red]Error:[/] {escape(str(e))}", highlight=False, soft_wrap=True)
        sys.exit(1)
    return aliases, len(loader.skipped)


@click.group(invoke_without_command=True)
@click.option("--verbose", "-v", is_flag=True, help="Show debug output")
@click.pass_context
@click.version_option(version=__version__, prog_name="aliasmenu")
def main(ctx, verbose):
    """aliasmenu - browse the aliases in your ~/.bash_aliases

    Run without commands to launch the interactive menu.
    """
    setup_logging(verbose)
    if ctx.invoked_subcommand is None:
        from aliasmenu.tui import AliasMenu

        aliases, skipped = load_or_exit()
        app = AliasMenu(aliases, Config(), skipped=skipped)
        try:
            app.run()
        except Exception as e:
            err_console.print(f"There has been an error: {e}", markup=False, soft_wrap=True)
            sys.exit(1)
        sys.exit(app.return_code or 0)


@main.command(name="list")
@click.option("--raw", is_flag=True, help="Print the alias lines as they appear in the file")
def list_aliases(raw):
    """List the aliases found in ~/.bash_aliases"""
    aliases, _ = load_or_exit()
    if not aliases:
        console.print("[yellow]No aliases found in ~/.bash_aliases[/]")
        return

    if raw:
        for entry in aliases:
            console.print(str(entry), markup=False, highlight=False, soft_wrap=True)
        return

    theme = Config().get_theme()
    table = Table(title=f"Your Aliases ({len(aliases)} total)")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Alias", style=theme["header_color"], no_wrap=True)
    table.add_column("Command")
    for entry in aliases:
        table.add_row(str(entry.line_number), entry.short_name, Text(entry.unquoted_command))

    console.print(table)
    console.print("\n[dim]Tip: Run 'aliasmenu' for interactive mode![/]")


@main.command()
@click.argument("name", required=False, type=click.Choice(sorted(Config.THEMES)))
def theme(name):
    """Show the current colour theme, or switch to NAME"""
    config = Config()
    if name is None:
        console.print(f"Current theme: [cyan]{config.get('theme')}[/]")
        console.print(f"[dim]Available: {', '.join(sorted(Config.THEMES))}[/]")
        return

    config.set("theme", name)
    console.print(f"[green]✔[/] Theme set to [cyan]{name}[/]")
