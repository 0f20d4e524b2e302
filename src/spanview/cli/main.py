"""SpanView CLI: thin Typer wrapper over library calls."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
import yaml
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from spanview import __version__

app = typer.Typer(
    name="spanview",
    help="Render the four-span job design diagram and its gap/balance indicators.",
    no_args_is_help=True,
)
console = Console()


def _state_from_options(
    control: int, accountability: int, influence: int, support: int
) -> "SurveyState":
    from spanview.models.survey import SurveyState

    return SurveyState.from_mapping({
        "control": control,
        "accountability": accountability,
        "influence": influence,
        "support": support,
    })


def _load_diagram_config(config_file: Optional[Path], policy: Optional[str]) -> "DiagramConfig":
    from spanview.config import load_config
    from spanview.models.enums import BalancePolicy

    config = load_config(config_file)
    if policy:
        config.balance.policy = BalancePolicy(policy)
    return config


@app.command()
def version() -> None:
    """Show SpanView version."""
    console.print(f"spanview {__version__}")


@app.command()
def status(
    control: int = typer.Option(5, "--control", "-c", help="Span of control (1-10)"),
    accountability: int = typer.Option(5, "--accountability", "-a", help="Span of accountability (1-10)"),
    influence: int = typer.Option(5, "--influence", "-i", help="Span of influence (1-10)"),
    support: int = typer.Option(5, "--support", "-s", help="Span of support (1-10)"),
    policy: Optional[str] = typer.Option(None, "--policy", "-p", help="Balance policy: threshold, geometric"),
    config_file: Optional[Path] = typer.Option(None, "--config", help="Diagram config YAML"),
) -> None:
    """Show the gap and balance classification for a set of values."""
    from spanview.metrics.balance import compute_indicators
    from spanview.rendering.renderer import SceneRenderer

    try:
        config = _load_diagram_config(config_file, policy)
    except (OSError, ValueError, ValidationError, yaml.YAMLError) as e:
        console.print(f"[red]Invalid configuration:[/red] {e}")
        raise typer.Exit(1)

    state = _state_from_options(control, accountability, influence, support)
    points = SceneRenderer(config).mapper.points_for(state)
    indicators = compute_indicators(
        state, points, policy=config.balance.policy, tolerance=config.balance.tolerance
    )

    table = Table(title="Spans", show_header=True)
    table.add_column("Dimension")
    table.add_column("Value", justify="right")
    for name, value in state.as_dict().items():
        table.add_row(name, str(value))
    console.print(table)

    console.print(f"Gap: [bold]{indicators.gap_text}[/bold]")
    console.print(
        f"Supply: {indicators.supply}  Demand: {indicators.demand}  Delta: {indicators.delta:+d}"
    )
    console.print(f"Policy: {indicators.policy.value}")
    console.print(f"Status: [bold]{indicators.balance_class.value}[/bold] ({indicators.status_text})")


@app.command()
def render(
    control: int = typer.Option(5, "--control", "-c", help="Span of control (1-10)"),
    accountability: int = typer.Option(5, "--accountability", "-a", help="Span of accountability (1-10)"),
    influence: int = typer.Option(5, "--influence", "-i", help="Span of influence (1-10)"),
    support: int = typer.Option(5, "--support", "-s", help="Span of support (1-10)"),
    width: float = typer.Option(960, "--width", "-W", help="Surface width in pixels"),
    height: float = typer.Option(600, "--height", "-H", help="Surface height in pixels"),
    policy: Optional[str] = typer.Option(None, "--policy", "-p", help="Balance policy: threshold, geometric"),
    config_file: Optional[Path] = typer.Option(None, "--config", help="Diagram config YAML"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write SVG to file"),
) -> None:
    """Render the diagram as SVG."""
    from spanview.models.geometry import SurfaceSize
    from spanview.rendering.renderer import SceneRenderer
    from spanview.rendering.svg import SvgSceneWriter

    try:
        config = _load_diagram_config(config_file, policy)
    except (OSError, ValueError, ValidationError, yaml.YAMLError) as e:
        console.print(f"[red]Invalid configuration:[/red] {e}")
        raise typer.Exit(1)

    state = _state_from_options(control, accountability, influence, support)
    scene = SceneRenderer(config).render(state, SurfaceSize(width=width, height=height))
    if scene is None:
        console.print(f"[yellow]Nothing to draw on a {width:g}x{height:g} surface[/yellow]")
        raise typer.Exit(1)

    svg = SvgSceneWriter().render(scene, output_path=output)
    if output:
        console.print(f"[green]SVG written to {output}[/green]")
        console.print(f"  Gap: {scene.gap_text}  Status: {scene.status_text}")
    else:
        typer.echo(svg)


@app.command()
def validate(survey_file: Path = typer.Argument(..., help="Path to survey YAML")) -> None:
    """Validate a survey YAML file."""
    from spanview.session.recording import load_survey

    try:
        state = load_survey(survey_file)
        console.print("[green]Valid survey:[/green]")
        for name, value in state.as_dict().items():
            console.print(f"  {name}: {value}")
    except Exception as e:
        console.print(f"[red]Validation failed:[/red] {e}")
        raise typer.Exit(1)


@app.command()
def replay(
    session_file: Path = typer.Argument(..., help="Path to recorded session YAML"),
    policy: Optional[str] = typer.Option(None, "--policy", "-p", help="Balance policy: threshold, geometric"),
    config_file: Optional[Path] = typer.Option(None, "--config", help="Diagram config YAML"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write the last scene as SVG"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log every render pass"),
) -> None:
    """Replay a recorded event session through the render loop."""
    from spanview.rendering.renderer import SceneRenderer
    from spanview.rendering.svg import SvgSceneWriter
    from spanview.session.loop import RenderLoop
    from spanview.session.recording import load_session
    from spanview.utils.logging import configure_logging

    configure_logging(logging.DEBUG if verbose else logging.WARNING)

    try:
        config = _load_diagram_config(config_file, policy)
        session = load_session(session_file)
    except (OSError, ValueError, ValidationError, yaml.YAMLError) as e:
        console.print(f"[red]Cannot replay session:[/red] {e}")
        raise typer.Exit(1)

    loop = RenderLoop(SceneRenderer(config), session.values, session.surface)
    records = [loop.render_now("initial")]
    for event in session.events:
        loop.post(event)
    records.extend(loop.process_pending())

    table = Table(title=f"Session {session.name or session_file.name}", show_header=True)
    table.add_column("#", justify="right")
    table.add_column("Trigger")
    table.add_column("Gap", justify="right")
    table.add_column("Status")
    table.add_column("Scene")
    for record in records:
        if record.failed:
            outcome = "[red]failed[/red]"
        elif record.skipped:
            outcome = "[yellow]skipped[/yellow]"
        else:
            outcome = record.status_text
        table.add_row(
            str(record.pass_number), record.trigger, record.gap_text, outcome, record.fingerprint
        )
    console.print(table)
    console.print(f"Passes: {loop.pass_count}  Skipped: {loop.skipped_passes}")

    if output:
        if loop.last_scene is None:
            console.print("[yellow]No scene was drawn; nothing written[/yellow]")
            raise typer.Exit(1)
        SvgSceneWriter().render(loop.last_scene, output_path=output)
        console.print(f"[green]Last scene written to {output}[/green]")


if __name__ == "__main__":
    app()
