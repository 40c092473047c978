"""Swagger path entries and tags for individual routes."""

from apidoc.config import ApiDocConfig
from apidoc.parser.base import AnnotationBlock, OperationEntry, RouteDescriptor, TagEntry
from apidoc.parser.params import build_params
from apidoc.parser.responses import build_responses


def normalize_verb(route: RouteDescriptor) -> str:
    """``GET|HEAD`` -> ``get``."""
    return route.method.replace("|HEAD", "").lower()


def normalize_path(route: RouteDescriptor, config: ApiDocConfig) -> str:
    if not config.uri_prefix:
        return route.uri
    return route.uri.replace(config.uri_prefix, "")


def build_tag(route: RouteDescriptor, config: ApiDocConfig) -> TagEntry:
    name = route.uri.replace(config.api_base_path, "") if config.api_base_path else route.uri
    return TagEntry(name=name, description=route.controller_class_name)


def operation_tag(route: RouteDescriptor, config: ApiDocConfig) -> str:
    namespace = route.controller_namespace
    if config.controller_prefix:
        namespace = namespace.replace(config.controller_prefix, "")
    return namespace.lstrip(".")


def assemble_operation(
    route: RouteDescriptor, block: AnnotationBlock, config: ApiDocConfig
) -> OperationEntry | None:
    """Build the operation for one route, or None when it carries no annotations."""
    if block.is_empty():
        return None

    return OperationEntry(
        tags=[operation_tag(route, config)],
        summary=block.desc,
        description=route.controller_class_name,
        parameters=build_params(block, route),
        responses=build_responses(block),
    )
