"""Annotation line reader.

Extracts ``@apiDesc``, ``@apiParam``, ``@apiErr`` and ``@apiResp`` lines from
a controller action docstring.
"""

from .base import AnnotationBlock

# Tested in this order; the first marker found in a line wins.
MARKERS = (
    ("@apiDesc", "desc"),
    ("@apiParam", "params"),
    ("@apiErr", "responses"),
    ("@apiResp", "responses"),
)


def parse_annotations(doc: str | None) -> AnnotationBlock:
    """Parse a raw docstring into an AnnotationBlock.

    Markers may appear anywhere in a line. An absent docstring gives an
    empty block.
    """
    block = AnnotationBlock()
    if not doc:
        return block

    for line in doc.splitlines():
        for marker, field in MARKERS:
            if marker not in line:
                continue
            value = line.partition(marker)[2].strip()
            if value:
                if field == "desc":
                    block.desc = value
                else:
                    getattr(block, field).append(value)
            break

    return block
