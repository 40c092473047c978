"""CLI entry point for apidoc."""

from pathlib import Path

import click
import yaml

from apidoc.config import load_config
from apidoc.errors import ApiDocError, ConfigurationMissingError
from apidoc.generator.document import DocLookup, generate
from apidoc.generator.paths import normalize_path, normalize_verb
from apidoc.parser.annotations import parse_annotations
from apidoc.routes.lookup import ImportDocLookup, SourceDocLookup, StaticDocLookup
from apidoc.routes.manifest import load_routes

DEFAULT_STORAGE = Path("storage")


def _make_lookup(kind: str, source_root: Path | None, docs: Path | None) -> DocLookup:
    """Build the docstring lookup selected on the command line."""
    if kind == "source":
        return SourceDocLookup(source_root or Path.cwd())
    elif kind == "static":
        if docs is None:
            raise click.UsageError("--lookup static requires --docs")
        return StaticDocLookup.from_file(docs)
    else:
        paths = (source_root,) if source_root else (Path.cwd(),)
        return ImportDocLookup(search_paths=paths)


@click.group()
def main():
    """apidoc: generate Swagger 2.0 documentation from controller docstrings."""
    pass


lookup_options = [
    click.option("--lookup", "lookup_kind", default="import", type=click.Choice(["import", "source", "static"]), help="How controller docstrings are read."),
    click.option("--source-root", default=None, type=click.Path(exists=True, file_okay=False, path_type=Path), help="Root directory of the controller packages."),
    click.option("--docs", default=None, type=click.Path(exists=True, dir_okay=False, path_type=Path), help="YAML/JSON table of docstrings for --lookup static."),
]


def with_lookup_options(func):
    for option in reversed(lookup_options):
        func = option(func)
    return func


@main.command("generate")
@click.argument("routes_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("-c", "--config", "config_path", default=None, type=click.Path(path_type=Path), help="apidoc YAML config file.")
@click.option("--storage", default=DEFAULT_STORAGE, type=click.Path(file_okay=False, path_type=Path), help="Storage root; output goes to <storage>/appDoc/resource.json.")
@click.option("--app-url", envvar="APP_URL", default=None, help="Application base URL (defaults to $APP_URL).")
@with_lookup_options
def generate_cmd(routes_path: Path, config_path: Path | None, storage: Path, app_url: str | None,
                 lookup_kind: str, source_root: Path | None, docs: Path | None):
    """Generate resource.json from a route manifest."""
    try:
        config = load_config(config_path, app_url=app_url)
        if not config.app_url:
            raise ConfigurationMissingError("Please, set APP_URL in your env file")

        routes = load_routes(routes_path)
        lookup = _make_lookup(lookup_kind, source_root, docs)
        output = generate(config, routes, lookup, storage)
    except ApiDocError as e:
        raise click.ClickException(str(e)) from e

    click.echo(f"Documentation saved to {output}")


@main.command("inspect")
@click.argument("routes_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("-c", "--config", "config_path", default=None, type=click.Path(path_type=Path), help="apidoc YAML config file.")
@with_lookup_options
def inspect_cmd(routes_path: Path, config_path: Path | None, lookup_kind: str,
                source_root: Path | None, docs: Path | None):
    """Print the annotations parsed for each route, without writing anything."""
    try:
        config = load_config(config_path)
        routes = load_routes(routes_path)
        lookup = _make_lookup(lookup_kind, source_root, docs)
    except ApiDocError as e:
        raise click.ClickException(str(e)) from e

    for route in routes:
        block = parse_annotations(lookup.get_doc(route.controller_namespace, route.action_name))
        click.echo(f"## {normalize_verb(route).upper()} {normalize_path(route, config)} ({route.handler})")
        if block.is_empty():
            click.echo("  (no annotations)")
            continue
        click.echo(yaml.safe_dump(block.model_dump(), sort_keys=False, allow_unicode=True))
