"""Document builder: walks the route table and assembles the Swagger document."""

from pathlib import Path
from typing import Protocol

import click

from apidoc.config import ApiDocConfig
from apidoc.errors import ConfigurationMissingError
from apidoc.generator.paths import assemble_operation, build_tag, normalize_path, normalize_verb
from apidoc.generator.writer import write_document
from apidoc.parser.annotations import parse_annotations
from apidoc.parser.base import RouteDescriptor, SwaggerDocument, SwaggerInfo
from apidoc.routes.manifest import group_by_controller

SWAGGER_VERSION = "2.0"


class DocLookup(Protocol):
    def get_doc(self, controller: str, action: str) -> str | None: ...


class DocumentBuilder:
    """Owns the document under construction for a single run."""

    def __init__(self, config: ApiDocConfig, lookup: DocLookup, verbose: bool = True):
        if not config.app_url:
            raise ConfigurationMissingError("Please, set APP_URL in your env file")

        self.config = config
        self.lookup = lookup
        self.verbose = verbose
        self.document = SwaggerDocument(
            swagger=SWAGGER_VERSION,
            info=SwaggerInfo(
                description=config.api_description,
                version=config.api_version,
                title=config.api_title,
            ),
            host=config.app_url.replace("http://", "").replace("https://", ""),
            base_path="/" + config.api_base_path.strip("/"),
            tags=[],
            paths={},
        )

    def add_route(self, route: RouteDescriptor) -> None:
        """Record the tag for ``route`` and, when documented, its operation."""
        if self.verbose:
            click.echo(route.handler)

        doc = self.lookup.get_doc(route.controller_namespace, route.action_name)
        block = parse_annotations(doc)

        self.document.tags.append(build_tag(route, self.config))

        operation = assemble_operation(route, block, self.config)
        if operation is None:
            return
        path = normalize_path(route, self.config)
        self.document.paths.setdefault(path, {})[normalize_verb(route)] = operation

    def run(self, routes: list[RouteDescriptor]) -> SwaggerDocument:
        groups = group_by_controller(routes)
        if self.verbose:
            click.echo(f"Found {len(routes)} routes in {len(groups)} controllers.")

        for route in routes:
            self.add_route(route)
        return self.document

    def to_json(self) -> str:
        return self.document.dump_json()


def generate(
    config: ApiDocConfig,
    routes: list[RouteDescriptor],
    lookup: DocLookup,
    storage_root: Path,
    verbose: bool = True,
) -> Path:
    """Build the document for ``routes`` and write it; returns the output path.

    Nothing is written when building fails.
    """
    builder = DocumentBuilder(config, lookup, verbose=verbose)
    document = builder.run(routes)
    return write_document(document, storage_root)
