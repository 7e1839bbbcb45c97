"""Command-line maintenance entry points over the jsonfiles facade."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import NoReturn, Optional

import typer

from jsonfiles.config import ConfigError, dump_example_config, load_config
from jsonfiles.errors import JsonFilesError
from jsonfiles.facade import JsonFiles
from jsonfiles.io.bundle import DirectoryBundle
from jsonfiles.io.codecs import JsonCodec
from jsonfiles.util.logging import configure_logging
from jsonfiles.util.paths import DEFAULT, DirectoryReference, Named

app = typer.Typer(add_completion=False, help="Inspect and maintain jsonfiles document storage")

DIRECTORY_OPTION = typer.Option(None, "--dir", "-d", help="Directory name (default: configured default directory)")


def _directory(name: Optional[str]) -> DirectoryReference:
    return Named(name) if name else DEFAULT


def _facade(ctx: typer.Context) -> JsonFiles:
    facade = ctx.obj
    if not isinstance(facade, JsonFiles):  # pragma: no cover - callback always sets it
        raise typer.Exit(code=2)
    return facade


def _fail(exc: Exception) -> NoReturn:
    typer.echo(f"Error: {exc}", err=True)
    raise typer.Exit(code=1)


@app.callback()
def main_callback(
    ctx: typer.Context,
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="YAML/TOML/JSON settings file"),
    root: Optional[Path] = typer.Option(None, "--root", help="Override the documents root"),
    default_dir: Optional[str] = typer.Option(None, "--default-dir", help="Override the default directory name"),
    bundle: Optional[Path] = typer.Option(None, "--bundle", help="Directory of bundled *.json resources"),
) -> None:
    """Resolve settings once and share a facade with every command."""

    overrides: dict[str, object] = {}
    if root is not None:
        overrides["storage.documents_root"] = str(root)
    if default_dir:
        overrides["storage.default_directory_name"] = default_dir

    try:
        cfg = load_config(config, overrides=overrides)
    except ConfigError as exc:
        _fail(exc)

    configure_logging(level=cfg.logging.level, log_path=cfg.logging.log_path)
    facade = JsonFiles.from_config(cfg, codec=JsonCodec(indent=2))
    if bundle is not None:
        facade.set_bundle_source(DirectoryBundle(bundle))
    ctx.obj = facade


@app.command()
def path(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Document name without .json"),
    directory: Optional[str] = DIRECTORY_OPTION,
) -> None:
    """Print where a document lives and whether it exists."""

    facade = _facade(ctx)
    try:
        target = facade.file_path(name, _directory(directory))
    except JsonFilesError as exc:
        _fail(exc)
    status = "present" if target.is_file() else "absent"
    typer.echo(f"{target}\t{status}")


@app.command()
def show(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Document name without .json"),
    directory: Optional[str] = DIRECTORY_OPTION,
) -> None:
    """Load a document (seeding from the bundle if needed) and print it."""

    facade = _facade(ctx)
    try:
        payload = facade.load(name, _directory(directory))
    except JsonFilesError as exc:
        _fail(exc)
    typer.echo(json.dumps(payload, indent=2, ensure_ascii=False))


@app.command()
def save(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Document name without .json"),
    source: Optional[Path] = typer.Argument(None, help="JSON file to store (default: stdin)"),
    directory: Optional[str] = DIRECTORY_OPTION,
) -> None:
    """Store JSON read from a file or stdin."""

    facade = _facade(ctx)
    text = source.read_text(encoding="utf-8") if source else sys.stdin.read()
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        _fail(exc)
    try:
        dest = facade.save(payload, name, _directory(directory))
    except JsonFilesError as exc:
        _fail(exc)
    typer.echo(f"Wrote {dest}")


@app.command()
def delete(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Document name without .json"),
    directory: Optional[str] = DIRECTORY_OPTION,
) -> None:
    """Delete one document."""

    facade = _facade(ctx)
    try:
        facade.delete_file(name, _directory(directory))
    except JsonFilesError as exc:
        _fail(exc)
    typer.echo(f"Deleted {name}")


@app.command()
def purge(
    ctx: typer.Context,
    directory: Optional[str] = DIRECTORY_OPTION,
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    """Delete a directory and every document in it."""

    facade = _facade(ctx)
    ref = _directory(directory)
    label = directory or facade.write_directory_name
    if not yes:
        typer.confirm(f"Delete directory {label} and all its documents?", abort=True)
    try:
        facade.delete_directory(ref)
    except JsonFilesError as exc:
        _fail(exc)
    typer.echo(f"Deleted directory {label}")


@app.command()
def seed(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Bundle resource name without .json"),
    directory: Optional[str] = DIRECTORY_OPTION,
) -> None:
    """Copy a bundled resource into storage, replacing any existing document."""

    facade = _facade(ctx)
    try:
        dest = facade.copy_file_from_bundle(name, _directory(directory))
    except JsonFilesError as exc:
        _fail(exc)
    typer.echo(f"Seeded {dest}")


@app.command("init-config")
def init_config(dest: Path = typer.Argument(..., help="Destination .yaml or .json file")) -> None:
    """Write the default settings file."""

    try:
        dump_example_config(dest)
    except ConfigError as exc:
        _fail(exc)
    typer.echo(f"Wrote {dest}")


def main() -> None:
    app()


__all__ = ["main", "app"]
