from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Any, Optional

import typer
import yaml

from ..core.config import Config
from ..core.errors import ConfigError
from ..discovery import find_or_create_app_config

app = typer.Typer(help="nestconf CLI")


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v")):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


def _load(base_dir: Optional[Path]) -> Config:
    try:
        return find_or_create_app_config(base_dir)
    except ConfigError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1)


def _to_json(data: Any) -> str:
    return json.dumps(data, indent=2, default=str)


@app.command()
def get(
    key: str,
    base_dir: Optional[Path] = typer.Option(None, "--base-dir"),
    default: Optional[str] = typer.Option(None, "--default"),
    required: bool = typer.Option(False, "--required"),
):
    cfg = _load(base_dir)
    if required and default is None:
        try:
            value = cfg.get_or_raise(key)
        except ConfigError as exc:
            typer.echo(str(exc), err=True)
            raise typer.Exit(code=1)
    else:
        value = cfg.get(key, default)
    typer.echo(_to_json({"key": key, "value": value}))


@app.command()
def dump(
    base_dir: Optional[Path] = typer.Option(None, "--base-dir"),
    fmt: str = typer.Option("json", "--format", help="json or yaml"),
    flat: bool = typer.Option(False, "--flat"),
):
    cfg = _load(base_dir)
    data = cfg.flatten() if flat else cfg.to_dict()
    if fmt == "yaml":
        # round-trip through JSON so non-YAML values are stringified
        typer.echo(yaml.safe_dump(json.loads(_to_json(data)), sort_keys=False), nl=False)
    elif fmt == "json":
        typer.echo(_to_json(data))
    else:
        typer.echo(f"Unsupported format: {fmt}", err=True)
        raise typer.Exit(code=2)


@app.command()
def env(base_dir: Optional[Path] = typer.Option(None, "--base-dir")):
    typer.echo(_load(base_dir).env())


if __name__ == "__main__":
    app()
