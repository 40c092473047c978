"""Route manifest loader.

A manifest lists the application's registered routes, in YAML or JSON::

    routes:
      - methods: [GET, HEAD]
        uri: api/v1/users/{id}
        name: users.show
        action: app.controllers.users.UserController@show
"""

from pathlib import Path

import yaml
from pydantic import ValidationError

from apidoc.errors import ManifestError
from apidoc.parser.base import RouteDescriptor

CLOSURE = "Closure"


def load_routes(file_path: Path) -> list[RouteDescriptor]:
    """Read a manifest file into RouteDescriptors, skipping closure routes."""
    text = file_path.read_text(encoding="utf-8")
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ManifestError(f"Cannot parse route manifest {file_path}: {e}") from e

    if isinstance(data, dict):
        data = data.get("routes", [])
    if not isinstance(data, list):
        raise ManifestError(f"Route manifest {file_path} must contain a list of routes")

    routes = []
    for index, item in enumerate(data):
        route = _parse_route(item, index)
        if route is not None:
            routes.append(route)
    return routes


def _parse_route(item: dict, index: int) -> RouteDescriptor | None:
    if not isinstance(item, dict) or "uri" not in item:
        raise ManifestError(f"Route #{index} needs at least a 'uri'")

    action = item.get("action") or ""
    if not isinstance(action, str):
        raise ManifestError(f"Route #{index}: 'action' must be a string like 'pkg.Controller@method'")
    controller, _, action_name = action.partition("@")
    class_name = controller.rsplit(".", 1)[-1]
    if not controller or class_name == CLOSURE:
        return None

    methods = item.get("methods", ["GET", "HEAD"])
    if isinstance(methods, str):
        methods = methods.split("|")
    if not isinstance(methods, list):
        raise ManifestError(f"Route #{index}: 'methods' must be a list or a '|'-separated string")

    try:
        return RouteDescriptor(
            host=item.get("domain"),
            http_methods=[str(m).upper() for m in methods],
            uri=str(item["uri"]),
            name=item.get("name"),
            controller_namespace=controller,
            controller_class_name=class_name,
            action_name=action_name,
        )
    except ValidationError as e:
        raise ManifestError(f"Route #{index}: {e}") from e


def group_by_controller(routes: list[RouteDescriptor]) -> dict[str, list[RouteDescriptor]]:
    """Group routes by controller, in first-seen order."""
    groups: dict[str, list[RouteDescriptor]] = {}
    for route in routes:
        groups.setdefault(route.controller_namespace, []).append(route)
    return groups
