# themekit/cli.py
"""
Command-line interface (CLI) for themekit.

`new-theme` is the terminal counterpart of the IDE "New Theme" action: it
asks for a theme name and a dark/light flag (or takes them as options) and
writes `<name>.theme.json` into the chosen directory. `preview` and
`list-templates` help when customizing templates.
"""
import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from typing_extensions import Annotated

from themekit.action import NewThemeAction
from themekit.exceptions import ConfigurationError, ThemeKitError
from themekit.generator import ThemeFileNameGenerator
from themekit.providers import PromptThemeDetailsProvider, StaticThemeDetailsProvider
from themekit.schemas.config import ThemeKitSettings
from themekit.schemas.theme import ThemeRequest
from themekit.utils.config import load_settings
from themekit.utils.logger import set_level, setup_logger
from themekit.utils.template_renderer import TemplateRenderer
from themekit.utils.template_store import TemplateStore

app = typer.Typer(
    name="themekit",
    help="Create theme JSON files from templates.",
    add_completion=False,
)
console = Console()
err_console = Console(stderr=True)
logger = setup_logger(__name__)


@app.callback()
def main_callback(
        debug: Annotated[
            bool, typer.Option("--debug", help="Log at DEBUG level.")
        ] = False,
) -> None:
    """themekit command-line interface."""
    if debug:
        set_level(logging.DEBUG)


def _load_settings_or_exit() -> ThemeKitSettings:
    try:
        return load_settings()
    except ConfigurationError as e:
        err_console.print(f"[bold red]Configuration error:[/bold red] {escape(str(e))}")
        raise typer.Exit(code=1)


@app.command(name="new-theme")
def new_theme(
        directory: Annotated[
            Path,
            typer.Argument(
                file_okay=False,
                dir_okay=True,
                help="Directory to create the theme file in (created if missing).",
            ),
        ] = Path("."),
        name: Annotated[
            Optional[str],
            typer.Option("--name", "-n", help="Theme name. Prompted for when omitted."),
        ] = None,
        dark: Annotated[
            Optional[bool],
            typer.Option("--dark/--light", help="Whether the theme is dark. Defaults to config."),
        ] = None,
) -> None:
    """
    Creates a new <name>.theme.json file from the theme template.
    """
    settings = _load_settings_or_exit()
    generator = ThemeFileNameGenerator(settings.themes)
    is_dark = settings.themes.default_dark if dark is None else dark

    if name is None:
        provider = PromptThemeDetailsProvider(generator, default_dark=is_dark)
    else:
        provider = StaticThemeDetailsProvider(name, is_dark)

    action = NewThemeAction.from_settings(settings, provider, generator=generator)

    try:
        path = action.perform(directory)
    except ThemeKitError as e:
        err_console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(code=1)

    if path is None:
        err_console.print("[yellow]Cancelled.[/yellow]")
        raise typer.Exit(code=1)

    console.print(f"✅ Created theme file: [bold cyan]{escape(str(path))}[/bold cyan]")


@app.command(name="preview")
def preview(
        name: Annotated[str, typer.Option("--name", "-n", help="Theme name.")],
        dark: Annotated[
            Optional[bool],
            typer.Option("--dark/--light", help="Whether the theme is dark. Defaults to config."),
        ] = None,
) -> None:
    """
    Prints the theme JSON that new-theme would write, without writing it.
    """
    settings = _load_settings_or_exit()
    generator = ThemeFileNameGenerator(settings.themes)
    is_dark = settings.themes.default_dark if dark is None else dark

    try:
        generated = generator.generate(ThemeRequest(name=name, is_dark=is_dark))
        template = TemplateStore(settings.templates.dir).get_template(settings.templates.theme_json)
        content = TemplateRenderer().render(template, generated.properties)
    except ThemeKitError as e:
        err_console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(code=1)

    err_console.print(f"📄 File name: [bold cyan]{escape(generated.file_name)}[/bold cyan]")
    typer.echo(content, nl=False)


@app.command(name="list-templates")
def list_templates() -> None:
    """
    Lists the templates available to themekit.
    """
    settings = _load_settings_or_exit()
    store = TemplateStore(settings.templates.dir)

    templates = store.list_templates()
    if not templates:
        console.print("[yellow]No templates found.[/yellow]")
        return

    table = Table(title="🎨 themekit Templates")
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Source", style="magenta")
    table.add_column("Used for new themes", style="yellow")

    for template_name, source in templates:
        in_use = "✅" if template_name == settings.templates.theme_json else ""
        table.add_row(template_name, source, in_use)

    console.print(table)
