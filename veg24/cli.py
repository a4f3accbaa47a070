"""Thin CLI wrapper for veg24.

This module provides the command-line interface using Typer.
All business logic is delegated to core modules.
"""

import json
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from veg24 import __version__
from veg24.config import configure_logging, get_settings, print_settings_json

app = typer.Typer(
    name="veg24",
    help="VEG24 Fresh - demo grocery storefront backend",
    no_args_is_help=True,
)
console = Console()


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"veg24 version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """VEG24 Fresh - demo grocery storefront backend."""


@app.command()
def config(
    json_output: Annotated[
        bool,
        typer.Option("--json", help="Output as JSON"),
    ] = False,
) -> None:
    """Show effective configuration."""
    settings = get_settings()
    if json_output:
        console.print(print_settings_json(settings))
        return

    console.print("[bold]Effective Configuration:[/bold]")
    console.print()
    console.print("[bold]Server:[/bold]")
    console.print(f"  Host:                {settings.host}")
    console.print(f"  Port:                {settings.port}")
    console.print(f"  CORS origins:        {', '.join(settings.cors_origins)}")
    console.print()
    console.print("[bold]Paths:[/bold]")
    console.print(f"  Locales directory:   {settings.locales_dir}")
    console.print(f"  Static directory:    {settings.static_dir}")
    console.print()
    console.print("[bold]Localization:[/bold]")
    console.print(f"  Default locale:      {settings.default_locale}")
    console.print(f"  Supported locales:   {', '.join(settings.supported_locales)}")
    console.print()
    console.print("[bold]Demo OTP:[/bold]")
    console.print(f"  Expires in (s):      {settings.otp_expires_in}")
    console.print(f"  Log level:           {settings.log_level}")


@app.command()
def serve(
    host: Annotated[
        str | None,
        typer.Option("--host", help="Interface to bind"),
    ] = None,
    port: Annotated[
        int | None,
        typer.Option("--port", "-p", help="Port to listen on"),
    ] = None,
    reload: Annotated[
        bool,
        typer.Option("--reload", help="Reload on code changes"),
    ] = False,
) -> None:
    """Run the HTTP server."""
    import uvicorn

    settings = get_settings()
    configure_logging(settings.log_level)
    uvicorn.run(
        "web.app:app",
        host=host or settings.host,
        port=port or settings.port,
        reload=reload,
        log_level=settings.log_level.lower(),
    )


locales_app = typer.Typer(help="Manage translation bundles")
app.add_typer(locales_app, name="locales")


@locales_app.command("init")
def locales_init(
    directory: Annotated[
        Path | None,
        typer.Option("--dir", "-d", help="Target directory (default: settings)"),
    ] = None,
) -> None:
    """Write the built-in translation bundles to disk."""
    from veg24.i18n.io import write_bundles

    target = directory or get_settings().locales_dir
    paths = write_bundles(target)
    console.print(f"[green]Wrote {len(paths)} bundle(s) to {target}[/green]")
    for path in paths:
        console.print(f"  {path}")


products_app = typer.Typer(help="Inspect the product catalog")
app.add_typer(products_app, name="products")


@products_app.command("list")
def products_list(
    lang: Annotated[
        str | None,
        typer.Option("--lang", "-l", help="Locale for product names"),
    ] = None,
    json_output: Annotated[
        bool,
        typer.Option("--json", help="Output as JSON"),
    ] = False,
) -> None:
    """List the seed catalog."""
    from veg24.catalog.service import list_products, seed_products
    from veg24.i18n.detect import detect_locale

    settings = get_settings()
    locale = detect_locale(
        query=lang,
        cookie=None,
        accept_language=None,
        supported=settings.supported_locales,
        fallback=settings.default_locale,
    )
    products = list_products(seed_products(), locale)

    if json_output:
        console.print(json.dumps(products, indent=2, ensure_ascii=False))
        return

    console.print(f"[bold]Found {len(products)} product(s) ({locale}):[/bold]")
    console.print()
    for p in products:
        console.print(f"  [green]{p['id']}[/green] {p['name']}")
        console.print(f"    Price: {p['price']}")
        console.print(f"    Stock: {p['stock']}")
        if p["tags"]:
            console.print(f"    Tags: {', '.join(p['tags'])}")
        console.print()


if __name__ == "__main__":
    app()
