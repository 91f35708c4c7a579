"""
permalert command line.

Launch the demo app and inspect string tables and settings.
"""

from pathlib import Path
from typing import Optional

import typer
import yaml
from rich.console import Console
from rich.table import Table

from permalert.config.settings import ConfigService
from permalert.errors import PermalertError
from permalert.localization import StringTable, available_locales
from permalert.permissions import PermissionStatus, SimulatedPermission, coerce_type
from permalert.utils.logging import configure_from_settings

app = typer.Typer(help="Permission status alerts for Textual applications.")
console = Console()


def _load_settings(overrides: dict):
    try:
        return ConfigService().load(overrides)
    except PermalertError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


@app.command("demo")
def demo(
    permission_type: str = typer.Option("contacts", "--type", "-t", help="Permission type tag"),
    status: PermissionStatus = typer.Option(
        PermissionStatus.DENIED, "--status", "-s", help="Initial permission status"
    ),
    locale: Optional[str] = typer.Option(None, "--locale", "-l", help="Alert locale"),
    app_name: Optional[str] = typer.Option(None, "--app-name", help="Displayed app name"),
    settings_url: Optional[str] = typer.Option(
        None, "--settings-url", help="URL opened by the Settings action"
    ),
    log_file: Path = typer.Option(
        Path("permalert.log"), "--log-file", help="Log destination while the TUI runs"
    ),
    theme: str = typer.Option("dark", "--theme", help="Dialog theme (dark|light)"),
) -> None:
    """Launch the demo app with a simulated permission."""
    alerts = {
        key: value
        for key, value in {
            "locale": locale,
            "app_name": app_name,
            "settings_url": settings_url,
        }.items()
        if value is not None
    }
    settings = _load_settings({"alerts": alerts} if alerts else {})
    configure_from_settings(settings, log_file=log_file)

    try:
        from permalert.tui.app import PermissionDemoApp
        from permalert.tui.styles import set_theme
    except ImportError as e:
        typer.echo(f"TUI dependencies not installed: {e}", err=True)
        typer.echo("Install with: pip install textual rich", err=True)
        raise typer.Exit(1)

    set_theme(theme)
    permission = SimulatedPermission(coerce_type(permission_type), status)
    PermissionDemoApp(permission, settings=settings).run()


@app.command("strings")
def strings(
    locale: str = typer.Option("en", "--locale", "-l", help="Locale to show"),
    strings_file: Optional[Path] = typer.Option(
        None, "--strings-file", help="YAML file with string overrides"
    ),
) -> None:
    """Print the resolved string table for a locale."""
    overrides = {"alerts": {"locale": locale}}
    if strings_file is not None:
        overrides["alerts"]["strings_file"] = str(strings_file)
    settings = _load_settings(overrides)

    try:
        table_source = StringTable.from_settings(settings.alerts)
    except PermalertError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    if locale not in available_locales() and strings_file is None:
        console.print(f"[yellow]No built-in table for {locale!r}; showing fallbacks[/yellow]")

    table = Table(title=f"Strings ({locale})")
    table.add_column("Key", style="cyan", no_wrap=True)
    table.add_column("Template")
    for key, template in table_source.entries().items():
        table.add_row(key, template)
    console.print(table)


@app.command("config")
def show_config() -> None:
    """Print the effective settings as YAML."""
    settings = _load_settings({})
    typer.echo(yaml.safe_dump(settings.model_dump(mode="json"), sort_keys=False))


if __name__ == "__main__":
    app()
