"""Typer CLI for sdopt."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

import typer

from sdopt import __version__
from sdopt.io.config import READ_ERROR, ConfigError, RunConfig, load_config, prompt_config
from sdopt.io.report import write_report
from sdopt.logging import configure_logging, get_logger

logger = get_logger(__name__)

app = typer.Typer(help="Steepest descent on the quadratic and Rosenbrock benchmarks")


def _ask(prompt: str) -> str:
    return typer.prompt(prompt, prompt_suffix="\n")


def read_config_fn(config: Path | None = None) -> RunConfig:
    """Load parameters from ``config`` or, when None, ask for them interactively."""
    if config is not None:
        return load_config(config)
    return prompt_config(_ask)


@app.command()
def run(
    config: Optional[Path] = typer.Option(
        None, "--config", "-c", help="Parameter file; prompts for values when omitted"
    ),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Write the report to this file instead of the console"
    ),
    log_level: str = typer.Option("WARNING", help="Logging level for diagnostics"),
) -> None:
    """Run steepest descent and print the optimization report."""
    configure_logging(level=log_level)
    try:
        cfg = read_config_fn(config)
    except ConfigError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(1)

    if output is None:
        write_report(cfg.objective, cfg.params, sys.stdout)
        return

    try:
        handle = output.open("w")
    except OSError as e:
        logger.debug("Cannot open %s: %s", output, e)
        typer.echo(READ_ERROR, err=True)
        raise typer.Exit(1)
    with handle:
        result = write_report(cfg.objective, cfg.params, handle)
    typer.echo(f"{result.message} Report written to {output}")


@app.command()
def version() -> None:
    """Print the installed version."""
    typer.echo(f"sdopt v{__version__}")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
