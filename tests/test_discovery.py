# tests/test_discovery.py
"""
Tests for discovery.py - lesson discovery and selection
"""
import pytest

from narrator.discovery import (
    document_title,
    estimate_token_count,
    extract_visual_components,
    filter_files,
    find_markdown_files,
    read_document_metadata,
)
from narrator.errors import ContentError


class TestFindMarkdownFiles:
    """Tests for find_markdown_files()"""

    def test_finds_md_and_mdx_sorted(self, tmp_path):
        (tmp_path / "b").mkdir()
        (tmp_path / "b" / "two.mdx").write_text("x")
        (tmp_path / "a.md").write_text("x")
        (tmp_path / "notes.txt").write_text("x")
        (tmp_path / "CLAUDE.md").write_text("x")

        assert find_markdown_files(tmp_path) == [tmp_path / "a.md", tmp_path / "b" / "two.mdx"]

    def test_custom_exclude(self, tmp_path):
        (tmp_path / "draft-intro.md").write_text("x")
        (tmp_path / "CLAUDE.md").write_text("x")
        assert find_markdown_files(tmp_path, exclude=["draft"]) == [tmp_path / "CLAUDE.md"]

    def test_missing_directory(self, tmp_path):
        assert find_markdown_files(tmp_path / "nope") == []


class TestFilterFiles:
    """Tests for filter_files()"""

    def _files(self, base):
        return [base / "intro.md", base / "fundamentals" / "lesson-1.md", base / "fundamentals-extra" / "x.md"]

    def test_by_file(self, tmp_path):
        files = self._files(tmp_path)
        assert filter_files(files, tmp_path, file="fundamentals/lesson-1.md") == [files[1]]

    def test_by_module(self, tmp_path):
        """Module matching is by directory, not name prefix"""
        files = self._files(tmp_path)
        assert filter_files(files, tmp_path, module="fundamentals") == [files[1]]

    def test_no_filter(self, tmp_path):
        files = self._files(tmp_path)
        assert filter_files(files, tmp_path) == files


class TestMetadata:
    """Tests for front-matter helpers"""

    def test_title_from_frontmatter(self, sample_lesson):
        assert read_document_metadata(sample_lesson)["sidebar_position"] == 1
        assert document_title(sample_lesson) == "Getting Started"

    def test_title_from_filename(self, tmp_path):
        path = tmp_path / "03-context_windows.md"
        path.write_text("No front matter here.")
        assert read_document_metadata(path) == {}
        assert document_title(path) == "Context Windows"

    def test_invalid_frontmatter(self, tmp_path):
        path = tmp_path / "broken.md"
        path.write_text("---\ntitle: [unclosed\n---\nBody")
        with pytest.raises(ContentError) as exc_info:
            read_document_metadata(path)
        assert "broken.md" in str(exc_info.value)


class TestTextHelpers:
    """Tests for helpers over normalized text"""

    def test_extract_visual_components(self):
        text = "[VISUAL_COMPONENT: A]\ntext\n[VISUAL_COMPONENT: B2] [VISUAL_COMPONENT: A]"
        assert extract_visual_components(text) == ["A", "B2", "A"]

    def test_estimate_token_count(self):
        assert estimate_token_count("") == 0
        assert estimate_token_count("abcd") == 1
        assert estimate_token_count("abcde") == 2
