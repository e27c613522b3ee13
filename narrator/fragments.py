"""
fragments.py - Inline shared prompt fragments

A lesson can embed a reusable prompt with

    import ReviewPrompt from '@site/shared-prompts/_review-prompt.md';
    <ReviewPrompt />

The fragment's body is cleaned on its own and spliced in place of the
tag. Fragments are leaf content: they are inlined one level deep and any
component tag inside them is left as it is.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from narrator import cleanup
from narrator.code_blocks import replace_code_blocks
from narrator.config_utils import NarratorConfig, get_config
from narrator.icons import FRAGMENT
from narrator.mdx_imports import strip_imports
from narrator.models import RenderMode
from narrator.path_utils import resolve_against, resolve_import_path


def missing_fragment_placeholder(import_path: str) -> str:
    return f"[SHARED_PROMPT: File not found - {import_path}]"


def clean_fragment(content: str, mode: RenderMode = RenderMode.DOC, preserve_code: bool = False,
                   config: Optional[NarratorConfig] = None) -> str:
    """
    Clean fragment text for splicing into a parent document.

    Front matter and imports go first. Mode regions are filtered before
    comments are stripped, since the region markers are comments.
    """
    config = config or get_config()

    content = cleanup.strip_frontmatter(content)
    content = strip_imports(content)
    content = cleanup.filter_render_mode(content, mode)

    if not preserve_code:
        content = replace_code_blocks(content, config.context_window, config.immediate_window)

    content = cleanup.strip_links(content)
    content = cleanup.strip_html_comments(content)
    return cleanup.collapse_whitespace(content)


def inline_fragment(import_path: str, mode: RenderMode = RenderMode.DOC, preserve_code: bool = False,
                    config: Optional[NarratorConfig] = None,
                    base_dir: Union[str, Path, None] = None) -> str:
    """
    Load and clean a shared fragment.

    Args:
        import_path: Path as written in the import declaration
        mode: Render mode of the parent document
        preserve_code: Keep fenced blocks instead of describing them
        config: Supplies the project root and alias settings
        base_dir: Directory relative imports are resolved against

    Returns:
        Cleaned fragment text, or a bracketed placeholder when the file
        does not exist
    """
    config = config or get_config()
    resolved = resolve_import_path(import_path, config.project_root,
                                   config.site_alias, config.website_dir)
    fragment_path = resolve_against(resolved, base_dir)

    if not fragment_path.is_file():
        logging.warning("Shared fragment not found: %s (%s)", import_path, fragment_path)
        return missing_fragment_placeholder(import_path)

    logging.debug("%s Inlining %s", FRAGMENT, fragment_path)
    content = fragment_path.read_text(encoding="utf-8")
    return clean_fragment(content, mode, preserve_code, config)
