"""Writes the generated document under the storage root."""

import shutil
from pathlib import Path

from apidoc.parser.base import SwaggerDocument

OUTPUT_DIR = "appDoc"
OUTPUT_FILE = "resource.json"


def write_document(document: SwaggerDocument, storage_root: Path) -> Path:
    """Recreate ``<storage_root>/appDoc`` and write ``resource.json`` into it."""
    output_dir = storage_root / OUTPUT_DIR
    if output_dir.exists():
        shutil.rmtree(output_dir)
    output_dir.mkdir(parents=True)

    output_path = output_dir / OUTPUT_FILE
    output_path.write_text(document.dump_json(), encoding="utf-8")
    return output_path
