"""
path_utils.py - Import path resolution for Narrator

Turns the path written in an MDX import declaration into something the
file system understands. The project root is passed in by the caller
(normally NarratorConfig.project_root), so nothing here depends on the
current working directory.
"""

from pathlib import Path
from typing import Union

DEFAULT_SITE_ALIAS = "@site/"
DEFAULT_WEBSITE_DIR = "website"


def clean_import_path(raw_path: str) -> str:
    """
    Drop backslash escapes.

    MDX sources escape underscores in file names (``shared\\_prompt.md``),
    and the backslashes are not part of the real file name.
    """
    return raw_path.replace("\\", "")


def resolve_import_path(
    raw_path: str,
    project_root: Union[str, Path],
    site_alias: str = DEFAULT_SITE_ALIAS,
    website_dir: str = DEFAULT_WEBSITE_DIR,
) -> str:
    """
    Resolve an import path to a file-system path.

    - Alias-prefixed paths (``@site/...``) become
      ``<project_root>/<website_dir>/<remainder>``.
    - Anything else is returned cleaned but otherwise unchanged; the caller
      resolves it against its own base directory.

    No existence check is made here.

    Args:
        raw_path: Path exactly as written in the import declaration
        project_root: Root the alias is anchored to
        site_alias: Alias prefix used by the site
        website_dir: Sub-directory of the project root the alias points at

    Returns:
        Resolved path as a string
    """
    cleaned = clean_import_path(raw_path)

    if site_alias and cleaned.startswith(site_alias):
        remainder = cleaned[len(site_alias):]
        return str(Path(project_root) / website_dir / remainder)

    return cleaned


def resolve_against(path: str, base_dir: Union[str, Path, None]) -> Path:
    """Anchor a relative path to base_dir; absolute paths pass through."""
    candidate = Path(path)
    if candidate.is_absolute() or base_dir is None:
        return candidate
    return Path(base_dir) / candidate
