"""Typer-based command line interface for decoded-char."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import structlog
import typer

from ..config import AppConfig, load_config
from ..errors import EncodingError
from ..logging import configure_logging
from ..models import ErrorPolicy
from ..utils.text import SUPPORTED_ENCODINGS, decode_bytes, iter_spans

app = typer.Typer(help="Inspect encoded files character by character")
logger = structlog.get_logger(__name__)


@app.callback()
def main(ctx: typer.Context, config: Optional[Path] = typer.Option(None, "--config", metavar="PATH")) -> None:
    ctx.obj = load_config(config)
    configure_logging(ctx.obj.logging.normalized_level())


@app.command()
def inspect(
    ctx: typer.Context,
    path: Path = typer.Argument(..., exists=True, readable=True, dir_okay=False),
    encoding: Optional[str] = typer.Option(None, "--encoding", "-e", help=f"One of: {', '.join(SUPPORTED_ENCODINGS)}"),
    errors: Optional[ErrorPolicy] = typer.Option(None, "--errors", help="strict or replace"),
) -> None:
    """Print one JSON line per decoded character with its byte offset and length."""
    config: AppConfig = ctx.obj
    data = path.read_bytes()
    try:
        decoder = decode_bytes(
            data,
            encoding or config.decoding.encoding,
            errors or config.decoding.errors,
        )
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--encoding") from exc
    try:
        for span, char in iter_spans(decoder):
            record = {"offset": span.start, "len": char.len, "char": char.value, "codepoint": f"U+{char.codepoint:04X}"}
            typer.echo(json.dumps(record, ensure_ascii=False))
    except EncodingError as exc:
        logger.error("cli.inspect.failed", path=str(path), position=exc.position, error=str(exc))
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1)


@app.command()
def version() -> None:
    from ..version import __version__

    typer.echo(__version__)


if __name__ == "__main__":  # pragma: no cover
    app()
