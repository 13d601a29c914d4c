"""CLI entry point for videohash.

Usage:
    videohash extract clip.mp4 -n 5          # Extract 5 evenly spaced frames
    videohash plan 100 5                     # Show the planned frame indices
    videohash cache-dir clip.mp4             # Print the cache directory
    videohash sample clip.mp4 --every 30     # Keep every 30th frame
    videohash info                           # Show pipeline steps
    videohash run-step index_plan -i '{"total_frames": 100, "requested_frames": 5}'
"""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from videohash.core.errors import VideoHashError
from videohash.core.logging import setup_logging

app = typer.Typer(name="videohash", help="Deterministic evenly spaced video frame extraction")
console = Console()

DEFAULT_CONFIG = Path("configs/pipeline.yaml")


def _config_or_none(config: Path | None) -> Path | None:
    if config is not None:
        return config
    return DEFAULT_CONFIG if DEFAULT_CONFIG.exists() else None


def _fail(err: Exception) -> None:
    console.print(f"[red]{type(err).__name__}: {err}[/red]")
    raise typer.Exit(1)


@app.command()
def extract(
    video: Path = typer.Argument(..., help="Source video file"),
    frames: int = typer.Option(5, "--frames", "-n", help="Number of frames to extract"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Hide ffmpeg/ffprobe output"),
    config: Path = typer.Option(None, help="Pipeline config path"),
    as_json: bool = typer.Option(False, "--json", help="Print the full result as JSON"),
    log_level: str = typer.Option("INFO", help="Logging level"),
) -> None:
    """Extract exactly N evenly spaced frames."""
    setup_logging("WARNING" if quiet else log_level)
    from videohash.core.pipeline_runner import run_extraction

    try:
        result = run_extraction(video, frames, quiet=quiet, config=_config_or_none(config))
    except VideoHashError as e:
        _fail(e)

    if as_json:
        console.print_json(result.model_dump_json())
        return

    table = Table(title=f"{result.video_path.name}: {result.total_frames} frames")
    table.add_column("#", style="dim")
    table.add_column("Frame index", style="cyan")
    table.add_column("Path", style="green")
    for i, (index, path) in enumerate(zip(result.indices, result.frames)):
        table.add_row(str(i), str(index), str(path))
    console.print(table)


@app.command()
def plan(
    total_frames: int = typer.Argument(..., help="Frames in the video"),
    frames: int = typer.Argument(..., help="Number of frames to select"),
) -> None:
    """Show which frame indices would be extracted."""
    from videohash.steps.s03_index_plan._planner import plan_indices

    try:
        indices = plan_indices(total_frames, frames)
    except VideoHashError as e:
        _fail(e)
    console.print(" ".join(str(i) for i in indices))


@app.command()
def cache_dir(
    video: Path = typer.Argument(..., help="Source video file"),
    config: Path = typer.Option(None, help="Pipeline config path"),
) -> None:
    """Print (and create) the cache directory of a video."""
    from videohash.core.pipeline_runner import (
        import_step_class,
        load_entry_config,
        resolve_pipeline_config,
    )
    from videohash.core.contracts import StepEntry
    from videohash.steps.s01_path_cache._cache import (
        cache_dir_for,
        canonicalize,
        ensure_cache_dir,
        path_digest,
    )

    pipeline_cfg, base_dir = resolve_pipeline_config(_config_or_none(config))
    entry = next((s for s in pipeline_cfg.steps if s.name == "path_cache"), None)
    if entry is None:
        entry = StepEntry(name="path_cache", module="videohash.steps.s01_path_cache")
    step_cls = import_step_class(entry.module)
    step_cfg = load_entry_config(entry, step_cls, base_dir)

    try:
        digest = path_digest(canonicalize(video))
        out = ensure_cache_dir(cache_dir_for(digest, step_cfg.temp_root, step_cfg.dir_prefix))
    except VideoHashError as e:
        _fail(e)
    console.print(str(out))


@app.command()
def sample(
    video: Path = typer.Argument(..., help="Source video file"),
    every: int = typer.Option(30, "--every", "-k", help="Keep every k-th frame"),
    output_dir: Path = typer.Option(None, "--output", "-o", help="Output directory (default: cache dir)"),
    max_frames: int = typer.Option(None, help="Stop after this many frames"),
    log_level: str = typer.Option("INFO", help="Logging level"),
) -> None:
    """Save every k-th frame (decodes the whole video)."""
    setup_logging(log_level)
    from videohash.sampling import sample_every

    try:
        saved = sample_every(video, every, output_dir=output_dir, max_frames=max_frames)
    except VideoHashError as e:
        _fail(e)
    console.print(f"[green]Saved {len(saved)} frames[/green]")
    for path in saved:
        console.print(str(path))


@app.command()
def run_step(
    step_name: str = typer.Argument(..., help="Step name (e.g. index_plan)"),
    config: Path = typer.Option(None, help="Pipeline config path"),
    input_json: str = typer.Option(None, "--input", "-i", help="Input as JSON string"),
) -> None:
    """Run a single pipeline step."""
    import json

    setup_logging()
    from videohash.core.pipeline_runner import (
        build_toolkit,
        import_step_class,
        load_entry_config,
        resolve_pipeline_config,
    )

    pipeline_cfg, base_dir = resolve_pipeline_config(_config_or_none(config))
    entry = next((s for s in pipeline_cfg.steps if s.name == step_name), None)
    if entry is None:
        console.print(f"[red]Step '{step_name}' not found in pipeline config[/red]")
        raise typer.Exit(1)

    step_cls = import_step_class(entry.module)
    step_config = load_entry_config(entry, step_cls, base_dir)
    step_instance = step_cls(config=step_config, tools=build_toolkit(pipeline_cfg.tools))

    if input_json:
        input_data = json.loads(input_json)
    else:
        schema = step_cls.input_type.model_json_schema()
        required = schema.get("required", [])
        if required:
            console.print(f"[yellow]Step '{step_name}' requires input fields: {required}[/yellow]")
            console.print("[yellow]Use --input/-i with JSON string, e.g.:[/yellow]")
            console.print(f'  videohash run-step {step_name} -i \'{{"field": "value"}}\'')
            raise typer.Exit(1)
        input_data = {}

    console.print(f"[green]Running step: {step_name}[/green]")
    step_input = step_cls.input_type(**input_data)
    try:
        output = step_instance.execute(step_input)
    except VideoHashError as e:
        _fail(e)
    console.print(f"[green]Done. Output:[/green] {output.model_dump_json(indent=2)}")


@app.command()
def info(config: Path = typer.Option(None, help="Pipeline config path")) -> None:
    """Show pipeline steps."""
    from videohash.core.pipeline_runner import resolve_pipeline_config

    pipeline_cfg, _ = resolve_pipeline_config(_config_or_none(config))
    table = Table(title=f"Pipeline: {pipeline_cfg.project_name}")
    table.add_column("#", style="dim")
    table.add_column("Step", style="cyan")
    table.add_column("Module", style="green")
    table.add_column("Config", style="dim")

    for i, step in enumerate(pipeline_cfg.steps, 1):
        table.add_row(str(i), step.name, step.module, step.config_file or "-")
    console.print(table)
    console.print(f"ffmpeg: {pipeline_cfg.tools.ffmpeg}  ffprobe: {pipeline_cfg.tools.ffprobe}")


if __name__ == "__main__":
    app()
