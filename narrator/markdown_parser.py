"""
markdown_parser.py - Turn an MDX lesson into plain narrative text

Shared by the podcast and presentation script generators. The passes run
in a fixed order; each works on the output of the one before it:

 1. collect component imports from the untouched source
 2. strip front matter
 3. strip import lines
 4. expand component tags (visual marker, inlined fragment, or nothing)
 5. keep/drop doc-only and presentation-only regions
 6. strip remaining HTML tags
 7. describe fenced code blocks and unwrap inline code (unless preserved)
 8. images -> [Image]
 9. links -> their label
10. strip HTML comments
11. tag admonitions
12. collapse blank lines and trim

Anything a pass does not recognize is passed through untouched.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from narrator import cleanup
from narrator.code_blocks import replace_code_blocks, strip_inline_code
from narrator.config_utils import NarratorConfig, get_config
from narrator.fragments import inline_fragment
from narrator.mdx_imports import classify_component, extract_imports, strip_imports
from narrator.models import ComponentKind, ImportMap, RawDocument, RenderMode


def visual_placeholder(name: str) -> str:
    return f"[VISUAL_COMPONENT: {name}]"


def expand_components(content: str, imports: ImportMap, mode: RenderMode = RenderMode.DOC,
                      preserve_code: bool = False, config: Optional[NarratorConfig] = None,
                      base_dir: Union[str, Path, None] = None) -> str:
    """
    Replace each self-closing component tag.

    Visual components become a marker the slide generator can render,
    shared prompts are inlined, and anything else is layout chrome and
    is dropped.
    """
    config = config or get_config()

    def replace(match):
        name = match.group(1)
        kind = classify_component(name, imports, config.visual_marker, config.shared_prompt_marker)
        logging.debug("Component <%s /> classified as %s", name, kind.value)

        if kind is ComponentKind.VISUAL:
            return visual_placeholder(name)
        if kind is ComponentKind.SHARED_PROMPT:
            return inline_fragment(imports[name], mode, preserve_code, config, base_dir)
        return ""

    return cleanup.COMPONENT_TAG_RE.sub(replace, content)


def normalize_text(content: str, mode: Union[RenderMode, str] = RenderMode.DOC,
                   preserve_code: bool = False, config: Optional[NarratorConfig] = None,
                   base_dir: Union[str, Path, None] = None) -> str:
    """
    Run every pass over already-loaded document text.

    Args:
        content: Raw MDX/Markdown source
        mode: "doc" or "presentation"
        preserve_code: Keep fenced blocks verbatim instead of describing them
        config: Project settings (project root, markers, window sizes)
        base_dir: Directory of the document, for relative imports

    Returns:
        Cleaned text
    """
    mode = RenderMode.coerce(mode)
    config = config or get_config()

    # Imports are read before anything is stripped
    imports = extract_imports(content)

    cleaned = cleanup.strip_frontmatter(content)
    cleaned = strip_imports(cleaned)
    cleaned = expand_components(cleaned, imports, mode, preserve_code, config, base_dir)
    cleaned = cleanup.filter_render_mode(cleaned, mode)
    cleaned = cleanup.strip_html_tags(cleaned)

    if not preserve_code:
        cleaned = replace_code_blocks(cleaned, config.context_window, config.immediate_window)
        cleaned = strip_inline_code(cleaned)

    cleaned = cleanup.replace_images(cleaned)
    cleaned = cleanup.strip_links(cleaned)
    cleaned = cleanup.strip_html_comments(cleaned)
    cleaned = cleanup.tag_admonitions(cleaned)
    return cleanup.collapse_whitespace(cleaned)


def normalize(file_path: Union[str, Path], mode: Union[RenderMode, str] = RenderMode.DOC,
              preserve_code: bool = False, config: Optional[NarratorConfig] = None) -> str:
    """
    Parse an MDX/MD file and return clean narrative text.

    A missing file raises FileNotFoundError; a missing shared fragment
    does not (it becomes a placeholder in the text).
    """
    document = RawDocument.load(file_path)
    logging.debug("Normalizing %s (mode=%s, preserve_code=%s)",
                  document.path, RenderMode.coerce(mode).value, preserve_code)
    return normalize_text(document.content, mode, preserve_code, config, document.base_dir)
