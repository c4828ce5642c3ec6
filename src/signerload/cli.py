"""CLI implementation for signerload."""

import json
import logging
import sys
from pathlib import Path
from typing import Optional

import typer

from . import load
from .core.util import credential_asdict
from .parsers import YamlSignerParser

app = typer.Typer(add_completion=False, help="Load signing keys from a directory of metadata files.")


@app.command()
def main(
    directory: Path = typer.Argument(..., envvar="SIGNERLOAD_DIRECTORY", help="Directory holding key metadata files"),
    extension: str = typer.Option("yaml", "--extension", "-e", envvar="SIGNERLOAD_EXTENSION",
                                  help="Metadata file extension (case-insensitive)"),
    fields: Optional[str] = typer.Option(None, "--fields", help="Comma-separated subset of keys to emit"),
    jsonl: bool = typer.Option(False, "--jsonl", help="Emit one JSON object per line"),
    output: Optional[Path] = typer.Option(None, "-o", "--output", help="Write to PATH instead of stdout"),
    sync: bool = typer.Option(False, "--sync", help="Parse files one at a time in the calling thread"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug detail"),
):
    """Load every signer in DIRECTORY and print its identifier."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s - %(message)s",
        stream=sys.stderr,
    )
    sel_fields = set(fields.split(",")) if fields else None

    try:
        signers = load(directory, extension, YamlSignerParser(), concurrent=not sync)
    except ValueError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(code=2)

    records = [credential_asdict(s, fields=sel_fields) for s in signers]

    # open output sink
    sink = open(output, "w", encoding="utf-8") if output else sys.stdout
    try:
        if jsonl:
            for obj in records:
                sink.write(json.dumps(obj))
                sink.write("\n")
        else:
            json.dump(records, sink, indent=2)
            sink.write("\n")
    finally:
        if output:
            sink.close()

    # exit code
    if not signers:
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
