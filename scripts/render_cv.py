#!/usr/bin/env python3
"""
Curriculum Vitae Rendering CLI

Renders the newest profile to a static HTML page and runs the liveness service.

Commands:
    render  - Fetch the newest profile and render it to HTML
    layouts - List available layouts
    serve   - Start the liveness HTTP service

Examples:\n

    render_cv.py render                                   # Fetch from Supabase, default layout

    render_cv.py render --from-yaml data/profile.yaml     # Render a local profile

    render_cv.py render --layout classic --theme dark     # Pick layout and initial theme

    render_cv.py serve --port 8080                        # Liveness endpoint on port 8080
"""

import os
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from typing_extensions import Annotated

from vitae.contexts.intake.sources import SupabaseProfileSource, YAMLProfileSource
from vitae.contexts.rendering import ThemeState, render_resume
from vitae.contexts.rendering.renderer import DEFAULT_LAYOUT
from vitae.contexts.serving import run
from vitae.contexts.serving.app import PORT
from vitae.contexts.templating import TemplateRegistry

load_dotenv()
PROJECT_ROOT = Path(os.getenv("PROJECT_ROOT", str(Path.cwd())))


def display_path(path: Path) -> str:
    """Return path relative to PROJECT_ROOT for cleaner display."""
    try:
        return str(Path(path).resolve().relative_to(PROJECT_ROOT.resolve()))
    except ValueError:
        return str(path)


app = typer.Typer(
    help="Render the online curriculum vitae and run its liveness service",
    add_completion=False,
    invoke_without_command=True,
)


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


@app.command("render")
def render_command(
    from_yaml: Annotated[
        Optional[Path],
        typer.Option(
            "--from-yaml",
            "-y",
            help="Read the profile from a local YAML file instead of Supabase",
            exists=True,
            dir_okay=False,
        ),
    ] = None,
    output: Annotated[
        Optional[Path],
        typer.Option(
            "--output",
            "-o",
            help="Output HTML file (default: outs/results/<date>/index.html)",
        ),
    ] = None,
    layout: Annotated[
        str,
        typer.Option("--layout", "-l", help="Layout name (see 'layouts' command)"),
    ] = DEFAULT_LAYOUT,
    theme: Annotated[
        Optional[str],
        typer.Option(
            "--theme",
            "-t",
            help="Initial theme: 'light' or 'dark' (default: host preference)",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Write the rendered HTML to the log"),
    ] = False,
):
    """
    Fetch the newest profile and render it to HTML.

    Examples:\n

        $ render_cv.py render                                # Supabase, default layout

        $ render_cv.py render -y tests/fixtures/profile_full.yaml -o out/index.html
    """
    try:
        source = YAMLProfileSource(from_yaml) if from_yaml else SupabaseProfileSource()
        theme_state = ThemeState.from_name(theme) if theme else ThemeState()
    except ValueError as e:
        typer.secho(f"Error: {e}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    typer.secho(f"\nRendering: {source.describe()}", fg=typer.colors.BLUE, bold=True)
    typer.echo(f"Layout: {layout}")
    typer.echo(f"Theme: {theme_state.value}")
    typer.echo("")

    result = render_resume(
        source=source,
        output_path=output,
        layout=layout,
        theme=theme_state,
        verbose=verbose,
    )

    typer.echo("")
    if result.success:
        typer.secho("✓ Render succeeded", fg=typer.colors.GREEN, bold=True)
    elif result.error:
        typer.secho("✗ Render failed", fg=typer.colors.RED, bold=True)
        typer.secho(f"  - {result.error}", fg=typer.colors.RED)
    else:
        typer.secho(f"✗ Profile not loaded: {result.state.message}", fg=typer.colors.YELLOW, bold=True)

    if result.output_path:
        typer.echo(f"  HTML: {display_path(result.output_path)}")
    if result.log_dir:
        typer.echo(f"  Log: {display_path(result.log_dir / 'render.log')}")
    typer.echo("")

    raise typer.Exit(code=0 if result.success else 1)


@app.command("layouts")
def layouts_command():
    """List the available page layouts."""
    registry = TemplateRegistry()
    for name in registry.available_layouts():
        marker = " (default)" if name == DEFAULT_LAYOUT else ""
        typer.echo(f"  {name}{marker}")


@app.command("serve")
def serve_command(
    port: Annotated[
        int,
        typer.Option("--port", "-p", help="Port to listen on (default: $PORT or 3000)"),
    ] = PORT,
    host: Annotated[
        str,
        typer.Option("--host", help="Interface to bind"),
    ] = "0.0.0.0",
):
    """Start the liveness HTTP service."""
    run(host=host, port=port)


if __name__ == "__main__":
    app()
