from __future__ import annotations

"""Top-level CLI exposing resource-map and package commands."""

import json
import platform
import sys

import click

from dataPackage import __version__
from dataPackage.cli.package_cmd import package
from dataPackage.cli.resmap import resmap
from dataPackage.config import load_config
from dataPackage.kg.namespaces import merge_namespaces
from dataPackage.kg.serializer import SYNTAXES


@click.group()
@click.version_option(__version__)
def cli() -> None:  # pragma: no cover - simple wrapper
    """dataPackage command line."""


@cli.command()
def diagnose() -> None:
    """Print deterministic diagnostic information."""

    cfg = load_config()
    info = {
        "python": sys.version.split()[0],
        "platform": platform.platform(),
        "dataPackage": __version__,
        "resolve_base": cfg.resolve_base,
        "default_syntax": cfg.default_syntax,
        "syntaxes": sorted(SYNTAXES),
        "namespaces": {prefix: uri for uri, prefix in merge_namespaces(cfg.namespaces).items()},
    }
    click.echo(json.dumps(info, sort_keys=True, indent=2))


cli.add_command(resmap)
cli.add_command(package)


def main() -> None:  # pragma: no cover - CLI entrypoint
    cli()


if __name__ == "__main__":  # pragma: no cover
    main()
