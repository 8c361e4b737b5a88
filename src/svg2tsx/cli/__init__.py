from __future__ import annotations

import sys
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from ..batch import BatchOrchestrator
from ..client import HttpOptimizerClient, LocalOptimizerClient
from ..config import AppConfig, dump_config, load_config
from ..errors import InvalidInputShapeError, OptimizerUnavailableError, Svg2TsxError
from ..icons import create_icon, validate_icon_name
from ..logging import RunLogger
from ..optimizer import ScourOptimizer
from ..rules import PLUGIN_CATALOGUE
from ..service import OptimizationService
from ..transcoder import component_source_to_svg, extract_svg, looks_like_svg

console = Console()
err_console = Console(stderr=True)

app = typer.Typer(help="Convert SVG markup to React components and optimize it")

ConfigOption = typer.Option(None, "--config", help="Path to config.toml")


def _load_config(path: Path | None) -> AppConfig:
    return load_config(path)


def _fail(exc: Svg2TsxError) -> typer.Exit:
    err_console.print(f"[red]{exc.code}[/red]: {exc}")
    return typer.Exit(1)


def _build_client(cfg: AppConfig, local: bool) -> HttpOptimizerClient | LocalOptimizerClient:
    if local:
        return LocalOptimizerClient(OptimizationService(ScourOptimizer()))
    return HttpOptimizerClient(cfg.svg_optimize.url, timeout=cfg.runtime.request_timeout_s)


@app.command()
def serve(
    port: int | None = typer.Option(None, "--port", min=0, help="Port to listen on"),
    host: str | None = typer.Option(None, "--host", help="Interface to bind"),
    config: Path | None = ConfigOption,
) -> None:
    """Run the optimization HTTP service until interrupted."""

    from api.app import create_app
    from api.server import OptimizationServer

    cfg = _load_config(config)
    server = OptimizationServer(
        create_app(cfg),
        host=host or cfg.api.host,
        port=cfg.optimization_server_port if port is None else port,
        startup_timeout_s=cfg.runtime.startup_timeout_s,
        log_level=cfg.runtime.log_level,
    )
    try:
        server.start()
    except Svg2TsxError as exc:
        raise _fail(exc) from exc
    console.print(f"[green]SVG Optimization Server running on port {server.port}[/green]")
    try:
        server.wait()
    except KeyboardInterrupt:
        pass
    finally:
        server.stop()
        console.print("SVG Optimization Server stopped")


@app.command()
def convert(
    svg_file: Path = typer.Argument(..., help="SVG file, or '-' to read stdin"),
    name: str = typer.Option(..., "--name", help="Icon component name (PascalCase)"),
    icon_type: str = typer.Option("Outline", "--type", help="Icon type, e.g. Outline, Fill, Color, 3D"),
    root: Path = typer.Option(Path("."), "--root", help="Project root the icon paths are relative to"),
    optimize: bool | None = typer.Option(None, "--optimize/--no-optimize", help="Optimize before converting"),
    local: bool = typer.Option(False, "--local", help="Optimize in-process instead of over HTTP"),
    config: Path | None = ConfigOption,
) -> None:
    """Convert an SVG document into an icon component file."""

    error = validate_icon_name(name)
    if error:
        raise typer.BadParameter(error, param_hint="--name")
    cfg = _load_config(config)
    svg = sys.stdin.read() if str(svg_file) == "-" else svg_file.read_text(encoding="utf-8")
    if not looks_like_svg(svg):
        raise _fail(InvalidInputShapeError("Input content is not an SVG."))

    should_optimize = cfg.svg_optimize.enabled if optimize is None else optimize
    try:
        if should_optimize:
            client = _build_client(cfg, local)
            if not client.is_available():
                raise OptimizerUnavailableError(
                    "SVG Optimization Server is not running. Please start it first (svg2tsx serve)."
                )
            outcome = client.optimize(svg, cfg.svg_optimize_config)
            svg = outcome.optimized_markup or svg
            console.print(
                f"Optimized: {outcome.original_size} -> {outcome.optimized_size} bytes "
                f"({outcome.reduction_percentage}% smaller)"
            )
        icon = create_icon(svg, name, icon_type, cfg, root=root)
    except Svg2TsxError as exc:
        raise _fail(exc) from exc
    console.print(f"[green]Success[/green]: SVG converted to React component and saved as {icon.path}")
    if icon.exported:
        console.print(f"Exported {icon.name}{icon.icon_type} from {icon.path.parent / 'index.ts'}")


@app.command("to-svg")
def to_svg(component_file: Path) -> None:
    """Print the SVG embedded in a component file."""

    source = component_file.read_text(encoding="utf-8")
    span = extract_svg(source)
    if span is None:
        raise _fail(InvalidInputShapeError(f"No SVG found in {component_file.name}"))
    console.print(component_source_to_svg(span), markup=False, highlight=False, soft_wrap=True)


@app.command()
def optimize(
    path: list[Path],
    local: bool = typer.Option(False, "--local", help="Optimize in-process instead of over HTTP"),
    config: Path | None = ConfigOption,
) -> None:
    """Optimize the SVG embedded in component files and folders, in place."""

    cfg = _load_config(config)
    client = _build_client(cfg, local)
    if not client.is_available():
        raise _fail(
            OptimizerUnavailableError("SVG Optimization Server is not running. Please start it first (svg2tsx serve).")
        )
    orchestrator = BatchOrchestrator(
        client,
        config=cfg.svg_optimize_config,
        logger=RunLogger(cfg.runtime.log_path),
    )
    try:
        report = orchestrator.optimize_files(path)
    except KeyboardInterrupt as exc:
        err_console.print("[yellow]Interrupted[/yellow]")
        raise typer.Exit(130) from exc

    table = Table(title="Optimization summary")
    table.add_column("File")
    table.add_column("Status")
    table.add_column("Reduction")
    for item in report.items:
        if item.skipped:
            status = "[dim]skipped[/dim]"
        elif item.outcome.success:
            status = "[green]optimized[/green]"
        else:
            status = f"[red]{item.outcome.error_code}[/red] {item.outcome.error}"
        reduction = item.outcome.reduction_percentage
        table.add_row(item.identifier, status, f"{reduction}%" if reduction is not None else "-")
    console.print(table)
    console.print(
        f"Processed {report.processed} files, "
        f"{report.optimized} optimized, {report.errored} errors, {report.skipped} skipped."
    )
    if report.errored:
        raise typer.Exit(1)


@app.command()
def plugins() -> None:
    """List the supported cleanup rules."""

    for name in PLUGIN_CATALOGUE:
        console.print(name)


@app.command("config")
def show_config(config: Path | None = ConfigOption) -> None:
    """Print the effective configuration as JSON."""

    console.print_json(dump_config(_load_config(config)))


if __name__ == "__main__":
    app()
