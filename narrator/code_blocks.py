"""
code_blocks.py - Describe fenced code blocks in plain words

Narration scripts cannot read code aloud, so every fenced block is
swapped for a one-line bracketed description such as

    [EFFECTIVE CODE EXAMPLE: Function 'addItem' with 1 parameter that returns a value]

The category comes from the prose around the block (authors label good
and bad examples with bold markers or check/cross glyphs); the summary
comes from the shape of the code itself.
"""

import logging
import re
from typing import List, Tuple

from narrator.models import CodeBlockSpan

IMMEDIATE_WINDOW = 100
CONTEXT_WINDOW = 200

EMPTY_BLOCK_DESCRIPTION = "[Code example]"

CATEGORY_INEFFECTIVE = "INEFFECTIVE CODE EXAMPLE"
CATEGORY_EFFECTIVE = "EFFECTIVE CODE EXAMPLE"
CATEGORY_PATTERN = "CODE PATTERN"
CATEGORY_DEFAULT = "CODE EXAMPLE"

NEGATIVE_MARKERS = ("**ineffective:**", "**risky:**", "**bad:**", "**wrong:**")
POSITIVE_MARKERS = ("**effective:**", "**better:**", "**good:**", "**correct:**")
PATTERN_WORDS = ("pattern", "structure", "template")

CROSS_MARK = "❌"
CHECK_MARK = "✅"

SHELL_LANGUAGES = {"bash", "sh", "shell", "zsh", "console"}

# Whole block: ``` + optional language + newline + body + ```
FENCE_RE = re.compile(r"```(\w+)?\n([\s\S]*?)```")

# Used to locate blocks in a document (no newline requirement)
CODE_BLOCK_RE = re.compile(r"```[\s\S]*?```")

INLINE_CODE_RE = re.compile(r"`[^`]+`")

FUNCTION_RE = re.compile(
    r"(?:^|\n)\s*(?:export\s+)?(?:async\s+)?"
    r"(?:function\s+(\w+)"
    r"|(?:const|let|var)\s+(\w+)\s*=\s*(?:async\s*)?\([^)]*\)\s*=>"
    r"|(?:const|let|var)\s+(\w+)\s*=\s*(?:async\s*)?function)",
    re.MULTILINE,
)
PARAMS_RE = re.compile(r"\(([^)]*)\)")
TYPE_RE = re.compile(r"(?:interface|type)\s+(\w+)")
CLASS_RE = re.compile(r"class\s+(\w+)")


def _plural(count: int, word: str) -> str:
    return word + ("s" if count > 1 else "")


def classify_context(preceding_context: str, following_context: str,
                     immediate_window: int = IMMEDIATE_WINDOW) -> str:
    """
    Pick the description category from the text around a block.

    First match wins:
    1. bold negative label near the block
    2. bold positive label near the block
    3. cross mark in the wide context, no check mark near the block
    4. check mark in the wide context, no cross mark near the block
    5. "pattern"/"structure"/"template" in the wide context, or
       "example" near the block
    6. plain code example
    """
    if immediate_window > 0:
        immediate_pre = preceding_context[-immediate_window:]
    else:
        immediate_pre = ""
    immediate_post = following_context[:immediate_window]

    full_context = f"{preceding_context} {following_context}".lower()
    immediate_context = f"{immediate_pre} {immediate_post}".lower()

    if any(marker in immediate_context for marker in NEGATIVE_MARKERS):
        return CATEGORY_INEFFECTIVE

    if any(marker in immediate_context for marker in POSITIVE_MARKERS):
        return CATEGORY_EFFECTIVE

    if CROSS_MARK in full_context and CHECK_MARK not in immediate_context:
        return CATEGORY_INEFFECTIVE

    if CHECK_MARK in full_context and CROSS_MARK not in immediate_context:
        return CATEGORY_EFFECTIVE

    if any(word in full_context for word in PATTERN_WORDS) or "example" in immediate_context:
        return CATEGORY_PATTERN

    return CATEGORY_DEFAULT


def extract_code_summary(code: str, language: str) -> str:
    """
    Summarize what a code body shows.

    The checks form a strict chain; the first that applies decides the
    summary even when later ones would also match.
    """
    lines = [line for line in code.split("\n") if line.strip()]

    function_match = FUNCTION_RE.search(code)
    if function_match:
        func_name = function_match.group(1) or function_match.group(2) or function_match.group(3)
        if func_name and len(func_name) >= 3 and func_name[0].isascii() and func_name[0].isalpha():
            params_match = PARAMS_RE.search(code)
            params = params_match.group(1) if params_match else ""
            param_count = len(params.split(",")) if params.strip() else 0

            summary = f"Function '{func_name}'"
            if param_count > 0:
                summary += f" with {param_count} {_plural(param_count, 'parameter')}"
            if "return" in code:
                summary += " that returns a value"
            return summary

    if "interface" in code or "type" in code:
        type_match = TYPE_RE.search(code)
        if type_match:
            return f"Type definition '{type_match.group(1)}'"

    if "class" in code:
        class_match = CLASS_RE.search(code)
        if class_match:
            return f"Class '{class_match.group(1)}'"

    if "import" in code or "require" in code:
        return "Import statements for dependencies"

    if code.strip().startswith("{") or "config" in code or "options" in code:
        return "Configuration object with properties"

    if language in SHELL_LANGUAGES or "$" in code or "npm" in code or "git" in code:
        commands = len([line for line in lines if not line.lstrip().startswith("#")])
        return f"Shell {_plural(commands, 'command')} ({commands} {_plural(commands, 'line')})"

    line_count = len(lines)
    return f"{language or 'Code'} snippet ({line_count} {_plural(line_count, 'line')})"


def parse_fence(code_block: str) -> Tuple[str, str]:
    """Return (language, trimmed body); both empty when the fence is malformed."""
    match = FENCE_RE.search(code_block)
    if not match:
        return "", ""
    return match.group(1) or "", (match.group(2) or "").strip()


def describe_code_block(code_block: str, preceding_context: str, following_context: str,
                        immediate_window: int = IMMEDIATE_WINDOW) -> str:
    """
    Describe one fenced block in a single bracketed line.

    Args:
        code_block: The block including its ``` fences
        preceding_context: Text right before the block in the unmodified document
        following_context: Text right after the block in the unmodified document
        immediate_window: Characters on each side that count as "near the block"

    Returns:
        e.g. "[CODE PATTERN: Class 'Cart']", or "[Code example]" for an empty body
    """
    language, code = parse_fence(code_block)
    if not code:
        return EMPTY_BLOCK_DESCRIPTION

    category = classify_context(preceding_context, following_context, immediate_window)
    return f"[{category}: {extract_code_summary(code, language)}]"


def find_code_blocks(text: str, context_window: int = CONTEXT_WINDOW) -> List[CodeBlockSpan]:
    """
    Locate every fenced block in document order.

    Context windows are cut from ``text`` as given, so they never contain
    another block's description.
    """
    spans = []
    for match in CODE_BLOCK_RE.finditer(text):
        start, end = match.start(), match.end()
        spans.append(CodeBlockSpan(
            original=match.group(0),
            start=start,
            preceding_context=text[max(0, start - context_window):start],
            following_context=text[end:end + context_window],
        ))
    return spans


def apply_replacement(state: Tuple[str, int], span: CodeBlockSpan, replacement: str) -> Tuple[str, int]:
    """
    Fold step: splice one replacement into the text.

    ``state`` is (text, delta) where delta is the total length change of
    all earlier replacements; the span's recorded start is shifted by it.
    """
    text, delta = state
    start = span.start + delta
    text = text[:start] + replacement + text[start + len(span.original):]
    return text, delta + len(replacement) - len(span.original)


def replace_code_blocks(text: str, context_window: int = CONTEXT_WINDOW,
                        immediate_window: int = IMMEDIATE_WINDOW) -> str:
    """Swap every fenced block for its description."""
    spans = find_code_blocks(text, context_window)
    descriptions = [
        describe_code_block(span.original, span.preceding_context, span.following_context,
                            immediate_window)
        for span in spans
    ]

    state = (text, 0)
    for span, description in zip(spans, descriptions):
        logging.debug("Code block at %d -> %s", span.start, description)
        state = apply_replacement(state, span, description)
    return state[0]


def strip_inline_code(text: str) -> str:
    """Unwrap `inline code` spans to their bare text."""
    return INLINE_CODE_RE.sub(lambda match: match.group(0).replace("`", ""), text)
