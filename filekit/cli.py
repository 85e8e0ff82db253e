from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional, Tuple

import typer
import yaml
from pydantic import ValidationError
from rich.logging import RichHandler

from filekit import FileKitConfig, load_config
from filekit.paths import build_path, get_cache_dir, get_config_dir, get_home_dir
from filekit.utils import (
    build_unique_list,
    case_insensitive_find,
    create_temp_file,
    read_file_contents,
    read_lines,
    replace_all,
)

logger = logging.getLogger("filekit.cli")
app = typer.Typer(help="Inspect and exercise the filekit path and text helpers.")


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, markup=False)],
    )


def _config(ctx: typer.Context) -> FileKitConfig:
    return ctx.obj


@app.callback()
def main(
    ctx: typer.Context,
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="Path to filekit config file."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    _setup_logging(verbose)
    try:
        ctx.obj = load_config(config_path)
    except (ValueError, ValidationError, yaml.YAMLError) as exc:
        logger.error("Invalid config: %s", exc)
        raise typer.Exit(code=1)


@app.command()
def dirs(ctx: typer.Context) -> None:
    """Print the home, config and cache directories."""

    cfg = _config(ctx)
    env = cfg.environment()
    typer.echo(f"home\t{get_home_dir(env)}")
    typer.echo(f"config\t{get_config_dir(cfg.namespace, env=env, mode=cfg.dir_mode)}")
    typer.echo(f"cache\t{get_cache_dir(cfg.namespace, env=env, mode=cfg.dir_mode)}")


@app.command()
def cat(ctx: typer.Context, path: Path = typer.Argument(..., help="File to print.")) -> None:
    content = read_file_contents(path, encoding=_config(ctx).encoding)
    if content is None:
        raise typer.Exit(code=1)
    typer.echo(content, nl=False)


@app.command()
def lines(ctx: typer.Context, path: Path = typer.Argument(..., help="File to split into lines.")) -> None:
    for number, line in enumerate(read_lines(path, encoding=_config(ctx).encoding), start=1):
        typer.echo(f"{number}\t{line}")


@app.command()
def unique(
    ctx: typer.Context,
    path: Path = typer.Argument(..., help="File with one entry per line."),
    sep: str = typer.Option(",", "--sep", "-s", help="Key separator; the key is the text before it."),
) -> None:
    """Print entries keyed on their prefix, keeping the last line for each key."""

    def parse(line: str) -> Optional[Tuple[str, str]]:
        key = line.split(sep, 1)[0].strip() if sep else line
        return (key, line) if key else None

    entries = build_unique_list(
        path,
        parse,
        lambda new, existing: new[0] == existing[0],
        encoding=_config(ctx).encoding,
    )
    logger.debug("%d unique entries in %s", len(entries), path)
    for _, line in entries:
        typer.echo(line)


@app.command()
def find(haystack: str, needle: str) -> None:
    """Print the case-insensitive position of NEEDLE in HAYSTACK."""

    position = case_insensitive_find(haystack, needle)
    if position < 0:
        logger.info("%r not found", needle)
        raise typer.Exit(code=1)
    typer.echo(str(position))


@app.command()
def replace(search: str, replacement: str, text: str) -> None:
    typer.echo(replace_all(search, replacement, text))


@app.command()
def tmpfile(
    ctx: typer.Context,
    content: Optional[str] = typer.Argument(None, help="File content; read from stdin when omitted."),
) -> None:
    """Write CONTENT to a new temporary file and print its path."""

    cfg = _config(ctx)
    if content is None:
        content = sys.stdin.read()
    try:
        path = create_temp_file(content, prefix=cfg.temp_prefix, encoding=cfg.encoding, env=cfg.environment())
    except OSError as exc:
        logger.error("%s", exc)
        raise typer.Exit(code=1)
    typer.echo(path)


@app.command("build-path")
def build_path_command(
    ctx: typer.Context,
    path: str = typer.Argument(..., help="Absolute, ~-relative or relative path."),
    base: Optional[str] = typer.Option(None, "--base", "-b", help="Base directory for relative paths."),
) -> None:
    """Print the full path, creating its parent directories."""

    cfg = _config(ctx)
    typer.echo(build_path(path, base, env=cfg.environment(), mode=cfg.path_mode))


def cli() -> None:
    app()


if __name__ == "__main__":
    cli()
