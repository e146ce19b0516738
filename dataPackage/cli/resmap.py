from __future__ import annotations

"""CLI group for building and inspecting resource maps."""

from pathlib import Path

import click
from tabulate import tabulate

from dataPackage.errors import DataPackageError
from dataPackage.kg.relations import load_relations
from dataPackage.kg.resource_map import ResourceMap

from ._common import (
    config_option,
    load_settings,
    namespace_option,
    parse_namespaces,
    setup_logging,
    syntax_option,
    write_stdout,
)

relations_option = click.option(
    "--relations",
    "relations_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Relation table (.csv, .json or .jsonl).",
)
member_option = click.option(
    "-m",
    "--member",
    "members",
    multiple=True,
    help="Package member identifier; may be repeated, order is kept.",
)


@click.group()
def resmap() -> None:
    """Build and inspect OAI-ORE resource maps."""


def _build(config_path: Path | None, map_id: str | None, relations_path: Path | None, members) -> ResourceMap:
    cfg = load_settings(config_path)
    relations = load_relations(relations_path) if relations_path else []
    resource_map = ResourceMap.create(map_id, config=cfg)
    try:
        resource_map.add_relations(relations, list(members))
    except Exception:
        resource_map.release()
        raise
    return resource_map


@resmap.command("build")
@relations_option
@member_option
@click.option("--id", "map_id", default=None, help="Resource map identifier (generated when omitted).")
@syntax_option
@namespace_option
@click.option(
    "--out",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Output file; stdout when omitted.",
)
@config_option
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log progress events.")
def build_cmd(
    relations_path: Path | None,
    members: tuple[str, ...],
    map_id: str | None,
    syntax: str | None,
    namespaces: tuple[str, ...],
    out: Path | None,
    config_path: Path | None,
    verbose: bool,
) -> None:
    """Serialize a resource map for MEMBERS and the relation table."""

    setup_logging(verbose)
    extra = parse_namespaces(namespaces)
    try:
        with _build(config_path, map_id, relations_path, members) as resource_map:
            if out is None:
                write_stdout(resource_map.serialize(syntax, extra))
            else:
                written = resource_map.serialize_to_file(out, syntax, extra)
                click.echo(f"Wrote {written} bytes to {out}", err=True)
    except DataPackageError as exc:
        raise click.ClickException(str(exc)) from exc


@resmap.command("show")
@relations_option
@member_option
@click.option("--id", "map_id", default=None, help="Resource map identifier (generated when omitted).")
@config_option
def show_cmd(
    relations_path: Path | None,
    members: tuple[str, ...],
    map_id: str | None,
    config_path: Path | None,
) -> None:
    """Print the statements of a resource map as a table."""

    try:
        with _build(config_path, map_id, relations_path, members) as resource_map:
            rows = [
                [st.subject, st.predicate, st.object, st.object_kind.value, st.datatype or ""]
                for st in resource_map.triples
            ]
    except DataPackageError as exc:
        raise click.ClickException(str(exc)) from exc
    click.echo(tabulate(rows, headers=["Subject", "Predicate", "Object", "Kind", "Datatype"]))
    click.echo(f"{len(rows)} statements")
