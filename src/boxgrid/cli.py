"""Command-line interface for rendering records as box-drawing tables."""

from __future__ import annotations

import json
import logging
import sys
from typing import IO, Any

import click
import yaml

from .charsets import DEFAULT_CHARSET, PRESETS
from .config import CHARSET_ENV_VAR, PADDING_ENV_VAR, load_config, options_from_dict
from .exceptions import BoxGridError
from .models import TableOptions
from .renderers import STYLED_CELL, STYLED_HEADER, STYLED_SKELETON
from .table import TableRenderer

logger = logging.getLogger(__name__)

SAMPLE_RECORDS = [
    {"name": "Foo", "age": 12},
    {"name": "Bar", "age": 15},
]


@click.group()
@click.version_option(package_name="boxgrid")
@click.option("--verbose", "-v", is_flag=True, help="Log debug output to stderr.")
def cli(verbose: bool) -> None:
    """boxgrid table rendering CLI."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            stream=sys.stderr,
            format="%(levelname)s %(name)s: %(message)s",
        )


@cli.command()
@click.argument("input_file", metavar="INPUT", type=click.File("r", encoding="utf-8"), default="-")
@click.option(
    "--jsonl",
    is_flag=True,
    help="Read one JSON record per line instead of a YAML/JSON list.",
)
@click.option(
    "--padding",
    "-p",
    type=click.IntRange(min=0),
    envvar=PADDING_ENV_VAR,
    help=f"Spaces around each cell's text (default: 1, env: {PADDING_ENV_VAR})",
)
@click.option(
    "--header",
    "-H",
    "headers",
    multiple=True,
    metavar="KEY=LABEL",
    help="Display LABEL as the header of column KEY. Repeatable.",
)
@click.option(
    "--charset",
    "-c",
    type=click.Choice(sorted(PRESETS), case_sensitive=False),
    envvar=CHARSET_ENV_VAR,
    help=f"Border character preset (default: {DEFAULT_CHARSET}, env: {CHARSET_ENV_VAR})",
)
@click.option(
    "--char",
    "chars",
    multiple=True,
    metavar="ROLE=GLYPH",
    help="Override one border character, e.g. --char cross=+. Repeatable.",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    help="YAML file with padding, charset, characters and headers.",
)
@click.option(
    "--color/--no-color",
    default=None,
    help="Style headers and borders (default: only when writing to a terminal)",
)
def render(
    input_file: IO[str],
    jsonl: bool,
    padding: int | None,
    headers: tuple[str, ...],
    charset: str | None,
    chars: tuple[str, ...],
    config_path: str | None,
    color: bool | None,
) -> None:
    """Render records from INPUT (default: stdin) as a table.

    INPUT holds a YAML or JSON list of mappings, one per row. Rows don't
    need to share keys; missing values render as blank cells.
    """
    records = _read_records(input_file, jsonl)

    try:
        config: dict[str, Any] = load_config(config_path) if config_path else {}
    except BoxGridError as e:
        click.echo(f"✗ {e}", err=True)
        sys.exit(1)

    if padding is not None:
        config["padding"] = padding
    if charset is not None:
        config["charset"] = charset
    if headers:
        config["headers"] = {
            **_config_mapping(config, "headers"),
            **_parse_pairs(headers, "--header"),
        }
    if chars:
        config["characters"] = {
            **_config_mapping(config, "characters"),
            **_parse_pairs(chars, "--char"),
        }

    renderers: dict[str, Any] = {}
    if color is not False:
        renderers = {"header": STYLED_HEADER, "cell": STYLED_CELL, "skeleton": STYLED_SKELETON}

    try:
        options = options_from_dict(config, **renderers)
        output = TableRenderer(options).render(records)
    except BoxGridError as e:
        click.echo(f"✗ {e}", err=True)
        sys.exit(1)

    click.echo(output, color=color)


@cli.command()
def charsets() -> None:
    """List the border character presets."""
    for name, characters in PRESETS.items():
        click.echo(name)
        click.echo(TableRenderer(TableOptions(characters=characters)).render(SAMPLE_RECORDS))
        click.echo()


def _read_records(input_file: IO[str], jsonl: bool) -> list[dict[Any, Any]]:
    """Parse the input stream into a list of records."""
    text = input_file.read()
    try:
        if jsonl:
            data: Any = [json.loads(line) for line in text.splitlines() if line.strip()]
        else:
            data = yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise click.ClickException(f"Could not parse input: {e}") from e

    if data is None:
        data = []
    if not isinstance(data, list):
        raise click.ClickException("Input must be a list of records")
    for i, record in enumerate(data):
        if not isinstance(record, dict):
            raise click.ClickException(
                f"Record {i} must be a mapping, got {type(record).__name__}"
            )

    logger.debug("Read %d record(s)", len(data))
    return data


def _config_mapping(config: dict[str, Any], key: str) -> dict[Any, Any]:
    """Return a mapping entry of the config file, exiting if it isn't one."""
    value = config.get(key) or {}
    if not isinstance(value, dict):
        click.echo(f"✗ Configuration key '{key}' must be a mapping", err=True)
        sys.exit(1)
    return value


def _parse_pairs(values: tuple[str, ...], option: str) -> dict[str, str]:
    """Parse repeated KEY=VALUE options."""
    pairs: dict[str, str] = {}
    for value in values:
        key, sep, rest = value.partition("=")
        if not sep or not key:
            raise click.BadParameter(f"expected KEY=VALUE, got {value!r}", param_hint=option)
        pairs[key] = rest
    return pairs


if __name__ == "__main__":
    cli()
