# tests/test_path_utils.py
"""
Tests for path_utils.py
"""
from pathlib import Path

from narrator.path_utils import clean_import_path, resolve_against, resolve_import_path


class TestResolveImportPath:
    """Tests for resolve_import_path()"""

    def test_alias_rewritten_to_website(self, tmp_path):
        result = resolve_import_path("@site/shared-prompts/_review.md", tmp_path)
        assert result == str(tmp_path / "website" / "shared-prompts" / "_review.md")

    def test_backslash_escapes_removed(self, tmp_path):
        result = resolve_import_path("@site/shared-prompts/\\_review\\_prompt.md", tmp_path)
        assert result == str(tmp_path / "website" / "shared-prompts" / "_review_prompt.md")

    def test_relative_path_unchanged(self, tmp_path):
        assert resolve_import_path("../shared/\\_x.md", tmp_path) == "../shared/_x.md"

    def test_custom_alias_and_website_dir(self, tmp_path):
        result = resolve_import_path("~site/a.md", tmp_path, site_alias="~site/", website_dir="site")
        assert result == str(tmp_path / "site" / "a.md")

    def test_clean_import_path(self):
        assert clean_import_path("a\\_b") == "a_b"


class TestResolveAgainst:
    """Tests for resolve_against()"""

    def test_relative(self, tmp_path):
        assert resolve_against("x/y.md", tmp_path) == tmp_path / "x" / "y.md"

    def test_absolute_passes_through(self, tmp_path):
        target = str(tmp_path / "abs.md")
        assert resolve_against(target, Path("/elsewhere")) == Path(target)

    def test_no_base(self):
        assert resolve_against("x.md", None) == Path("x.md")
