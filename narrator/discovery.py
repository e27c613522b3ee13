"""
discovery.py - Find and select lesson files

Provides the file handling the podcast and presentation generators share:
recursive discovery of .md/.mdx lessons, selection by file or module,
front-matter titles for listings, and a few helpers over normalized text.
"""

import math
import re
from pathlib import Path
from typing import Iterable, List, Optional, Union

import frontmatter
import yaml

from narrator.errors import invalid_frontmatter_error

LESSON_SUFFIXES = {".md", ".mdx"}

VISUAL_MARKER_RE = re.compile(r"\[VISUAL_COMPONENT: ([A-Za-z0-9]+)\]")


def find_markdown_files(directory: Union[str, Path], exclude: Optional[Iterable[str]] = None) -> List[Path]:
    """
    Find all .md/.mdx files under ``directory``, sorted.

    Files whose name contains any entry of ``exclude`` are skipped
    (CLAUDE.md by default; those are agent notes, not lessons).
    """
    directory = Path(directory)
    exclude = list(exclude) if exclude is not None else ["CLAUDE.md"]

    if not directory.is_dir():
        return []

    files = []
    for path in directory.rglob("*"):
        if not path.is_file() or path.suffix.lower() not in LESSON_SUFFIXES:
            continue
        if any(name in path.name for name in exclude):
            continue
        files.append(path)
    return sorted(files)


def filter_files(files: List[Path], base_dir: Union[str, Path],
                 file: Optional[str] = None, module: Optional[str] = None) -> List[Path]:
    """
    Narrow a file list to one lesson or one module directory.

    Args:
        files: Candidates from find_markdown_files
        base_dir: Directory ``file`` and ``module`` are relative to
        file: Single lesson path (wins over module)
        module: Module sub-directory

    Returns:
        The matching files, in their original order
    """
    base_dir = Path(base_dir)

    if file:
        target = base_dir / file
        return [f for f in files if f == target]

    if module:
        module_path = base_dir / module
        return [f for f in files if module_path in f.parents]

    return list(files)


def read_document_metadata(path: Union[str, Path]) -> dict:
    """
    Front-matter mapping of a lesson ({} when it has none).

    Raises:
        ContentError: If the front matter is not valid YAML
    """
    try:
        post = frontmatter.load(str(path))
    except yaml.YAMLError as e:
        raise invalid_frontmatter_error(Path(path), e) from e
    return dict(post.metadata)


def document_title(path: Union[str, Path]) -> str:
    """Title from front matter, falling back to a prettified file stem."""
    metadata = read_document_metadata(path)
    for key in ("title", "sidebar_label"):
        if metadata.get(key):
            return str(metadata[key])

    stem = Path(path).stem
    nice_name = re.sub(r"^\d+-", "", stem)
    return nice_name.replace("-", " ").replace("_", " ").title()


def extract_visual_components(text: str) -> List[str]:
    """Names of [VISUAL_COMPONENT: X] markers in normalized text, in order."""
    return VISUAL_MARKER_RE.findall(text)


def estimate_token_count(text: str) -> int:
    """Rough token estimate (~4 characters per token)."""
    return math.ceil(len(text) / 4)
