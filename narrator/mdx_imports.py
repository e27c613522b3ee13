"""
mdx_imports.py - Import declarations and component classification

MDX lessons pull in React components with default imports:

    import WorkflowCircle from '@site/src/components/VisualElements/WorkflowCircle';
    import ReviewPrompt from '@site/shared-prompts/_review-prompt.md';

and then reference them as self-closing tags (``<WorkflowCircle />``).
This module builds the name -> path map from those declarations, removes
the declaration lines, and decides what each referenced component is.
"""

import logging
import re

from narrator.code_blocks import CODE_BLOCK_RE
from narrator.models import ComponentKind, ImportMap

DEFAULT_VISUAL_MARKER = "visual-elements"
DEFAULT_SHARED_PROMPT_MARKER = "shared-prompts"

# import Name from '<path>'   (single default identifier only)
IMPORT_DECL_RE = re.compile(
    r"""^import\s+([A-Za-z_$][\w$]*)\s+from\s+(['"])(.+?)\2""",
    re.MULTILINE,
)

# Any import line: default, named, namespace or side-effect
IMPORT_LINE_RE = re.compile(
    r"""^import\s+(?:[^\n]*?\s+from\s+)?['"][^'"\n]+['"];?[ \t]*(?:\r?\n|$)""",
    re.MULTILINE,
)


def _split_fences(content: str):
    """Yield (segment, is_fenced) pairs covering the whole text, in order."""
    last = 0
    for match in CODE_BLOCK_RE.finditer(content):
        yield content[last:match.start()], False
        yield match.group(0), True
        last = match.end()
    yield content[last:], False


def extract_imports(content: str) -> ImportMap:
    """
    Map each default-imported component name to its declared path.

    Must run on the original text, before import lines are stripped.
    A name declared twice keeps the last path. Imports shown inside
    fenced code samples are not declarations.
    """
    imports: ImportMap = {}
    for segment, fenced in _split_fences(content):
        if fenced:
            continue
        for match in IMPORT_DECL_RE.finditer(segment):
            imports[match.group(1)] = match.group(3)

    if imports:
        logging.debug("Found %d component import(s): %s", len(imports), ", ".join(imports))
    return imports


def strip_imports(content: str) -> str:
    """Remove every import declaration line outside fenced code blocks."""
    return "".join(
        segment if fenced else IMPORT_LINE_RE.sub("", segment)
        for segment, fenced in _split_fences(content)
    )


def _normalize_marker(value: str) -> str:
    # "visual-elements", "VisualElements" and "visual_elements" all compare equal
    return value.lower().replace("-", "").replace("_", "")


def classify_component(
    name: str,
    imports: ImportMap,
    visual_marker: str = DEFAULT_VISUAL_MARKER,
    shared_prompt_marker: str = DEFAULT_SHARED_PROMPT_MARKER,
) -> ComponentKind:
    """
    Decide how a component reference is expanded.

    Purely path based. The visual check runs first, so a path matching
    both markers is visual.
    """
    path = imports.get(name)
    if path is None:
        return ComponentKind.UNKNOWN

    normalized = _normalize_marker(path)
    if _normalize_marker(visual_marker) in normalized:
        return ComponentKind.VISUAL
    if _normalize_marker(shared_prompt_marker) in normalized:
        return ComponentKind.SHARED_PROMPT
    return ComponentKind.UNKNOWN
