"""
Preview Classifier -- which files get a preview.

Exactly .jsx, .tsx, .js and .ts; the check itself is case-sensitive and the
lower-casing happens when the extension is derived from a path.
"""

import pytest

from engine.preview.classifier import extension_of, is_previewable
from engine.preview.types import SourceDocument


@pytest.mark.parametrize("extension", [".jsx", ".tsx", ".js", ".ts"])
def test_previewable_extensions(extension):
    assert is_previewable(extension) is True


@pytest.mark.parametrize("extension", ["", ".py", ".JS", ".Tsx", "jsx", ".json", ".mjs", ".d.ts", ". js"])
def test_other_extensions_are_rejected(extension):
    assert is_previewable(extension) is False


class TestExtensionOf:
    def test_lowercases_suffix(self):
        assert extension_of("src/Button.TSX") == ".tsx"

    def test_no_suffix(self):
        assert extension_of("Makefile") == ""

    def test_only_last_suffix(self):
        assert extension_of("types.d.ts") == ".ts"

    def test_uppercase_file_becomes_previewable(self):
        assert is_previewable(extension_of("App.JSX"))


class TestSourceDocumentFromPath:
    def test_from_path_normalizes_extension(self):
        doc = SourceDocument.from_path("components/Card.JSX", "const App = 1;")
        assert doc.file_extension == ".jsx"
        assert doc.text == "const App = 1;"

    def test_documents_are_immutable(self):
        doc = SourceDocument(".js", "x")
        with pytest.raises(AttributeError):
            doc.text = "y"
