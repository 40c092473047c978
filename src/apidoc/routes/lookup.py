"""Docstring lookups for controller actions.

Every lookup exposes ``get_doc(controller, action) -> str | None`` and
returns None when the controller or the action cannot be found.
"""

import ast
import importlib
import inspect
import sys
from pathlib import Path

import yaml

from apidoc.errors import ManifestError


class ImportDocLookup:
    """Imports the controller module and reads the method docstring.

    ``search_paths`` are prepended to ``sys.path`` for the rest of the
    process; they are not removed afterwards.
    """

    def __init__(self, search_paths: tuple[Path, ...] = ()):
        for path in reversed(search_paths):
            if str(path) not in sys.path:
                sys.path.insert(0, str(path))

    def get_doc(self, controller: str, action: str) -> str | None:
        module_name, _, class_name = controller.rpartition(".")
        if not module_name or not action:
            return None
        try:
            module = importlib.import_module(module_name)
        except ModuleNotFoundError as e:
            # only the controller's own module path counts as unresolvable
            if e.name and (module_name == e.name or module_name.startswith(e.name + ".")):
                return None
            raise

        cls = getattr(module, class_name, None)
        method = getattr(cls, action, None) if inspect.isclass(cls) else None
        if not callable(method):
            return None
        # own docstring only; an override without one is undocumented
        doc = method.__doc__
        return inspect.cleandoc(doc) if doc else None


class SourceDocLookup:
    """Reads docstrings straight from source files without importing them."""

    def __init__(self, source_root: Path):
        self.source_root = source_root
        self._trees: dict[Path, ast.Module] = {}

    def get_doc(self, controller: str, action: str) -> str | None:
        module_name, _, class_name = controller.rpartition(".")
        if not module_name or not action:
            return None
        file_path = self._module_file(module_name)
        if file_path is None:
            return None

        for node in self._parse(file_path).body:
            if isinstance(node, ast.ClassDef) and node.name == class_name:
                for item in node.body:
                    if isinstance(item, (ast.FunctionDef, ast.AsyncFunctionDef)) and item.name == action:
                        return ast.get_docstring(item, clean=False)
                return None
        return None

    def _module_file(self, module_name: str) -> Path | None:
        base = self.source_root.joinpath(*module_name.split("."))
        for candidate in (base.with_suffix(".py"), base / "__init__.py"):
            if candidate.is_file():
                return candidate
        return None

    def _parse(self, file_path: Path) -> ast.Module:
        if file_path not in self._trees:
            source = file_path.read_text(encoding="utf-8")
            self._trees[file_path] = ast.parse(source, filename=str(file_path))
        return self._trees[file_path]


class StaticDocLookup:
    """Docstrings from a prebuilt ``{"<controller>@<action>": doc}`` table."""

    def __init__(self, docs: dict[str, str]):
        self.docs = docs

    @classmethod
    def from_file(cls, file_path: Path) -> "StaticDocLookup":
        try:
            data = yaml.safe_load(file_path.read_text(encoding="utf-8")) or {}
        except yaml.YAMLError as e:
            raise ManifestError(f"Cannot parse docs table {file_path}: {e}") from e
        if not isinstance(data, dict):
            raise ManifestError(f"Docs table {file_path} must be a mapping")
        return cls({str(k): str(v) for k, v in data.items() if v is not None})

    def get_doc(self, controller: str, action: str) -> str | None:
        return self.docs.get(f"{controller}@{action}")
