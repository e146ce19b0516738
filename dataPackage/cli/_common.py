from __future__ import annotations

"""Options and helpers shared by the resource-map commands."""

import logging
from pathlib import Path
from typing import Dict, Iterable

import click

from dataPackage.config import PackageConfig, load_config
from dataPackage.errors import DataPackageError
from dataPackage.kg.namespaces import parse_namespace_option
from dataPackage.kg.serializer import SYNTAXES

syntax_option = click.option(
    "--syntax",
    type=click.Choice(sorted(SYNTAXES)),
    default=None,
    help="RDF syntax for the output (defaults to the configured syntax).",
)
namespace_option = click.option(
    "--namespace",
    "namespaces",
    multiple=True,
    metavar="PREFIX=URI",
    help="Additional namespace prefix; may be repeated.",
)
config_option = click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="YAML settings file.",
)


def setup_logging(verbose: bool) -> None:
    logging.basicConfig(level=logging.INFO if verbose else logging.WARNING, format="%(message)s")


def load_settings(config_path: Path | None) -> PackageConfig:
    try:
        return load_config(config_path)
    except ValueError as exc:
        raise click.ClickException(str(exc)) from exc


def parse_namespaces(values: Iterable[str]) -> Dict[str, str]:
    table: Dict[str, str] = {}
    for value in values:
        try:
            uri, prefix = parse_namespace_option(value)
        except DataPackageError as exc:
            raise click.BadParameter(str(exc), param_hint="--namespace") from exc
        table[uri] = prefix
    return table


def write_stdout(data: bytes) -> None:
    stream = click.get_binary_stream("stdout")
    stream.write(data)
    stream.flush()
