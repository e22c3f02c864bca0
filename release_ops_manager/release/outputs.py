"""Publishes release outputs for downstream workflow steps."""

from pathlib import Path

import structlog
import typer

logger = structlog.get_logger(__name__)


def write_outputs(outputs: dict[str, str], github_output: Path | None = None) -> None:
    """Echo outputs as name=value lines and append them to the GITHUB_OUTPUT file when set."""
    lines = [f"{name}={value}" for name, value in outputs.items()]
    for line in lines:
        typer.echo(line)
    if github_output is None:
        return
    with open(github_output, "a", encoding="utf-8") as f:
        for line in lines:
            f.write(f"{line}\n")
    logger.debug("Wrote outputs to GITHUB_OUTPUT", github_output=str(github_output), names=list(outputs))
