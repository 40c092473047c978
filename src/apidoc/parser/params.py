"""Parameter descriptors from route URIs and @apiParam declarations.

Declaration grammar::

    <type> [required] [in_path|in_query] $<name> | <description>
"""

import re

from apidoc.errors import MissingNameError, MissingTypeError

from .base import AnnotationBlock, ParamDescriptor, RouteDescriptor

PATH_PARAM_RE = re.compile(r"\{(.*?)}")
PATH_PARAM_DESCRIPTION = "Param in path"
BOOLEAN_SUFFIX = " | Boolean"

# keyword -> (type, format, description suffix), in priority order
TYPE_KEYWORDS = {
    "string": ("string", None, ""),
    "integer": ("integer", None, ""),
    "bool": ("integer", None, BOOLEAN_SUFFIX),
    "boolean": ("integer", None, BOOLEAN_SUFFIX),
    "password": ("string", "password", ""),
    "double": ("number", "double", ""),
    "array": ("array", None, ""),
    "file": ("file", None, ""),
}


def build_params(block: AnnotationBlock, route: RouteDescriptor) -> list[ParamDescriptor]:
    """Build the parameter list for one route.

    Path placeholders come first; an explicit declaration with the same name
    replaces the inferred one and moves to its own position.
    """
    params = _path_params(route.uri)

    for declaration in block.params:
        param = parse_param(declaration, route)
        params.pop(param.name, None)
        params[param.name] = param

    return list(params.values())


def _path_params(uri: str) -> dict[str, ParamDescriptor]:
    params: dict[str, ParamDescriptor] = {}
    for token in PATH_PARAM_RE.findall(uri):
        name = token.replace("?", "")
        # a repeated placeholder overwrites in place
        params[name] = ParamDescriptor(
            name=name,
            location="path",
            type="integer",
            description=PATH_PARAM_DESCRIPTION,
            required="?" not in token,
        )
    return params


def parse_param(declaration: str, route: RouteDescriptor) -> ParamDescriptor:
    """Parse one @apiParam declaration.

    Raises MissingTypeError when no type keyword is present and
    MissingNameError when a non-file parameter has no ``$name``.
    """
    directive, _, description = declaration.partition("|")
    description = description.strip()
    tokens = directive.split()

    param_type = param_format = None
    for keyword, (type_, format_, suffix) in TYPE_KEYWORDS.items():
        if keyword in tokens:
            tokens.remove(keyword)
            param_type, param_format = type_, format_
            description += suffix
            break

    required = "required" in tokens

    location = "formData"
    if "in_path" in tokens:
        location = "path"
    elif "in_query" in tokens:
        location = "query"

    name = next((t[1:].strip() for t in tokens if t.startswith("$")), None)

    if param_type is None:
        raise MissingTypeError(route.controller_namespace, route.action_name, name)
    if not name:
        if param_type != "file":
            raise MissingNameError(route.controller_namespace, route.action_name, declaration)
        name = "file"

    return ParamDescriptor(
        name=name,
        location=location,
        type=param_type,
        format=param_format,
        required=required,
        description=description,
    )
