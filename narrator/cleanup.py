"""
cleanup.py - Single-purpose text passes used by the normalizer

Each function does one rewrite and returns its input untouched when
there is nothing to match.
"""

import re

from narrator.models import RenderMode

# Only recognized at the very start of the document
FRONTMATTER_RE = re.compile(r"\A---[\s\S]*?---\r?\n")

COMPONENT_TAG_RE = re.compile(r"<([A-Z][A-Za-z0-9]*)\s*/>")

HTML_TAG_RE = re.compile(r"<[^>]+>")
HTML_COMMENT_RE = re.compile(r"<!--[\s\S]*?-->")
IMAGE_RE = re.compile(r"!\[.*?\]\(.*?\)")
LINK_RE = re.compile(r"\[([^\]]+)\]\([^)]+\)")

ADMONITION_OPEN_RE = re.compile(
    r":::(tip|warning|info|note|caution)\s*(?:\[([^\]]*)\])?\s*",
    re.IGNORECASE,
)
ADMONITION_CLOSE_RE = re.compile(r"^:::$", re.MULTILINE)

EXCESS_NEWLINES_RE = re.compile(r"\n{3,}")

IMAGE_PLACEHOLDER = "[Image]"
END_NOTE = "[END NOTE]"


def _mode_marker(name: str, edge: str) -> str:
    # <!-- doc-only-start -->, tolerant of spaces around the words and hyphens
    words = r"\s*-\s*".join(re.escape(part) for part in name.split("-"))
    return rf"<!--\s*{words}\s*-\s*{edge}\s*-->"


def _mode_block_re(name: str) -> re.Pattern:
    return re.compile(
        _mode_marker(name, "start") + r"([\s\S]*?)" + _mode_marker(name, "end")
    )


DOC_ONLY_RE = _mode_block_re("doc-only")
PRESENTATION_ONLY_RE = _mode_block_re("presentation-only")


def strip_frontmatter(content: str) -> str:
    """Remove a leading --- ... --- block."""
    return FRONTMATTER_RE.sub("", content, count=1)


def filter_render_mode(content: str, mode: RenderMode) -> str:
    """
    Keep the regions meant for ``mode`` and drop the others.

    The kept kind loses only its marker comments; the other kind is
    removed together with its markers.
    """
    mode = RenderMode.coerce(mode)
    if mode is RenderMode.DOC:
        drop, keep = PRESENTATION_ONLY_RE, DOC_ONLY_RE
    else:
        drop, keep = DOC_ONLY_RE, PRESENTATION_ONLY_RE

    content = drop.sub("", content)
    return keep.sub(lambda match: match.group(1), content)


def strip_html_tags(content: str) -> str:
    return HTML_TAG_RE.sub("", content)


def strip_html_comments(content: str) -> str:
    return HTML_COMMENT_RE.sub("", content)


def replace_images(content: str) -> str:
    """Images carry no narration; alt text and target are dropped."""
    return IMAGE_RE.sub(IMAGE_PLACEHOLDER, content)


def strip_links(content: str) -> str:
    """[label](target) -> label"""
    return LINK_RE.sub(r"\1", content)


def tag_admonitions(content: str) -> str:
    """
    Turn :::tip[Title] ... ::: callouts into bracketed markers the
    script writer can pick up.
    """
    def opening(match):
        kind = match.group(1).upper()
        title = match.group(2) or "Note"
        return f"\n[PEDAGOGICAL {kind}: {title}]\n"

    content = ADMONITION_OPEN_RE.sub(opening, content)
    return ADMONITION_CLOSE_RE.sub(f"\n{END_NOTE}\n", content)


def collapse_whitespace(content: str) -> str:
    """Squash runs of 3+ newlines to one blank line and trim."""
    return EXCESS_NEWLINES_RE.sub("\n\n", content).strip()
