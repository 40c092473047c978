import sys
from pathlib import Path

import pytest

from apidoc.errors import ManifestError
from apidoc.parser.annotations import parse_annotations
from apidoc.routes.lookup import ImportDocLookup, SourceDocLookup, StaticDocLookup

FIXTURES = Path(__file__).parent / "fixtures"
USERS = "sampleapp.controllers.users.UserController"


@pytest.fixture
def import_lookup(monkeypatch) -> ImportDocLookup:
    monkeypatch.syspath_prepend(str(FIXTURES))
    return ImportDocLookup()


class TestImportDocLookup:
    def test_reads_docstring(self, import_lookup):
        doc = import_lookup.get_doc(USERS, "reset")
        block = parse_annotations(doc)
        assert block.desc == "Send a reset link to the given user."
        assert len(block.params) == 2
        assert len(block.responses) == 3

    def test_inherited_method(self, import_lookup):
        assert "@apiDesc Health check" in import_lookup.get_doc(USERS, "ping")

    def test_override_without_docstring_is_undocumented(self, import_lookup):
        doc = import_lookup.get_doc("sampleapp.controllers.users.AdminController", "ping")
        assert doc is None
        assert parse_annotations(doc).is_empty()

    def test_docstring_is_dedented(self, import_lookup):
        doc = import_lookup.get_doc(USERS, "reset")
        assert "\n@apiDesc Send a reset link to the given user." in doc

    def test_search_paths_prepended(self, monkeypatch, tmp_path):
        monkeypatch.setattr(sys, "path", list(sys.path))
        ImportDocLookup(search_paths=(tmp_path,))
        assert sys.path[0] == str(tmp_path)

    def test_method_without_docstring(self, import_lookup):
        assert import_lookup.get_doc(USERS, "undocumented") is None

    def test_unknown_method(self, import_lookup):
        assert import_lookup.get_doc(USERS, "missing") is None

    def test_unknown_class(self, import_lookup):
        assert import_lookup.get_doc("sampleapp.controllers.users.NopeController", "show") is None

    def test_unknown_module(self, import_lookup):
        assert import_lookup.get_doc("sampleapp.controllers.orders.OrderController", "index") is None

    def test_bare_class_name(self, import_lookup):
        assert import_lookup.get_doc("UserController", "show") is None


class TestSourceDocLookup:
    def test_reads_docstring(self):
        lookup = SourceDocLookup(FIXTURES)
        block = parse_annotations(lookup.get_doc(USERS, "avatar"))
        assert block.desc == "Upload avatar"
        assert block.params == ["integer required in_path $id | User id", "file $avatar | Upload avatar"]

    def test_own_methods_only(self):
        assert SourceDocLookup(FIXTURES).get_doc(USERS, "ping") is None

    def test_missing_file(self):
        lookup = SourceDocLookup(FIXTURES)
        assert lookup.get_doc("sampleapp.controllers.orders.OrderController", "index") is None

    def test_package_init(self, tmp_path: Path):
        pkg = tmp_path / "shop"
        pkg.mkdir()
        (pkg / "__init__.py").write_text(
            'class CartController:\n    async def show(self):\n        """@apiDesc Show cart"""\n',
            encoding="utf-8",
        )
        doc = SourceDocLookup(tmp_path).get_doc("shop.CartController", "show")
        assert doc == "@apiDesc Show cart"


class TestStaticDocLookup:
    def test_mapping(self):
        lookup = StaticDocLookup({f"{USERS}@show": "@apiDesc Get user"})
        assert lookup.get_doc(USERS, "show") == "@apiDesc Get user"
        assert lookup.get_doc(USERS, "reset") is None

    def test_from_file(self):
        lookup = StaticDocLookup.from_file(FIXTURES / "docs.yaml")
        assert parse_annotations(lookup.get_doc(USERS, "reset")).params == ["string $email required | Email for reset"]

    def test_from_file_not_mapping(self, tmp_path: Path):
        f = tmp_path / "docs.yaml"
        f.write_text("- a\n- b\n", encoding="utf-8")
        with pytest.raises(ManifestError):
            StaticDocLookup.from_file(f)
