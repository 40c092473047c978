"""Response groups from @apiErr / @apiResp declarations."""

from .base import AnnotationBlock


def build_responses(block: AnnotationBlock) -> dict[str, dict[str, list[str]]]:
    """Group response descriptions by status code, keeping source order.

    ``"422 | Validation errors"`` -> ``{"422": {"description": ["Validation errors"]}}``
    """
    responses: dict[str, dict[str, list[str]]] = {}
    for declaration in block.responses:
        code, _, description = declaration.partition("|")
        group = responses.setdefault(code.strip(), {"description": []})
        group["description"].append(description.strip())
    return responses
