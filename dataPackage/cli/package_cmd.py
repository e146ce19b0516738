from __future__ import annotations

"""CLI command that turns a directory of files into a described data package."""

import mimetypes
from pathlib import Path

import click
from tabulate import tabulate

from dataPackage.core import DataObject, DataPackage
from dataPackage.errors import DataPackageError
from dataPackage.kg.serializer import get_syntax

from ._common import (
    config_option,
    load_settings,
    namespace_option,
    parse_namespaces,
    setup_logging,
    syntax_option,
)

DEFAULT_FORMAT = "application/octet-stream"


def _guess_format(path: Path) -> str:
    guessed, _ = mimetypes.guess_type(path.name)
    return guessed or DEFAULT_FORMAT


def collect_package(
    data_dir: Path,
    *,
    user: str | None = None,
    member_node: str | None = None,
    metadata: str | None = None,
    public: bool = False,
) -> DataPackage:
    """Create one file-backed data object per non-empty file under ``data_dir``.

    Identifiers are the POSIX paths relative to ``data_dir``. When
    ``metadata`` names one of them, it is recorded as documenting all others.
    """

    package = DataPackage()
    for path in sorted(p for p in data_dir.rglob("*") if p.is_file()):
        if path.stat().st_size == 0:
            continue
        identifier = path.relative_to(data_dir).as_posix()
        obj = DataObject.from_file(identifier, path, _guess_format(path), user, member_node)
        if public:
            obj.set_public_access()
        package.add_member(obj)
    if metadata is not None:
        if metadata not in package:
            raise click.BadParameter(f"{metadata} is not a file in {data_dir}", param_hint="--metadata")
        others = [i for i in package.get_identifiers() if i != metadata]
        if others:
            package.insert_relation(metadata, others)
    return package


@click.group()
def package() -> None:
    """Assemble data packages from local files."""


@package.command("build")
@click.argument("data_dir", type=click.Path(exists=True, file_okay=False, path_type=Path))
@click.option("--metadata", default=None, help="Member that documents every other member.")
@click.option("--user", default=None, help="Submitter and rights holder subject.")
@click.option("--member-node", default=None, help="Origin/authoritative member node id.")
@click.option("--public", is_flag=True, default=False, help="Grant public read access.")
@click.option("--id", "map_id", default=None, help="Resource map identifier (generated when omitted).")
@syntax_option
@namespace_option
@click.option(
    "--out",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Output file; defaults to resource_map.<ext> in the current directory.",
)
@config_option
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log progress events.")
def build_cmd(
    data_dir: Path,
    metadata: str | None,
    user: str | None,
    member_node: str | None,
    public: bool,
    map_id: str | None,
    syntax: str | None,
    namespaces: tuple[str, ...],
    out: Path | None,
    config_path: Path | None,
    verbose: bool,
) -> None:
    """Describe every file in DATA_DIR with a resource map."""

    setup_logging(verbose)
    cfg = load_settings(config_path)
    extra = parse_namespaces(namespaces)
    syntax = syntax or cfg.default_syntax
    out = out or Path(f"resource_map.{get_syntax(syntax).extension}")
    try:
        pkg = collect_package(
            data_dir, user=user, member_node=member_node, metadata=metadata, public=public
        )
        with pkg.build_resource_map(map_id, config=cfg) as resource_map:
            written = resource_map.serialize_to_file(out, syntax, extra)
    except DataPackageError as exc:
        raise click.ClickException(str(exc)) from exc
    rows = [[m["identifier"], m["formatId"], m["sizeBytes"], m["checksum"]] for m in pkg.summary()]
    click.echo(tabulate(rows, headers=["Identifier", "Format", "Size", "SHA-1"]), err=True)
    click.echo(f"Wrote {written} bytes to {out}", err=True)
