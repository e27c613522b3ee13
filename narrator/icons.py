"""
icons.py - Centralized icon/emoji definitions for Narrator output

Usage:
    from narrator.icons import icons
    print(f"{icons.SUCCESS} Normalized!")

Or import individual icons:
    from narrator.icons import SUCCESS, WARNING

Console glyphs are defined here once. The cross and check marks that
lesson authors use to label examples are content and live in
code_blocks.py.
"""

import logging
from dataclasses import dataclass


@dataclass(frozen=True)
class Icons:
    """
    Centralized icon definitions.

    Categories:
    - Status: SUCCESS, ERROR, WARNING, DEBUG, CRITICAL
    - Content: LESSON, VISUAL, FRAGMENT
    """

    # Status
    SUCCESS: str = "✅"
    ERROR: str = "❌"
    WARNING: str = "⚠️"
    DEBUG: str = "🔍"
    CRITICAL: str = "💥"

    # Content
    LESSON: str = "📚"       # Lesson listing
    VISUAL: str = "🖼"       # Visual component
    FRAGMENT: str = "🧩"     # Inlined shared prompt


# Global singleton instance
icons = Icons()

SUCCESS = icons.SUCCESS
WARNING = icons.WARNING
VISUAL = icons.VISUAL
FRAGMENT = icons.FRAGMENT


# Prefixes for IconLogFormatter in cli.py
LEVEL_ICONS = {
    logging.DEBUG: icons.DEBUG,
    logging.INFO: icons.SUCCESS,
    logging.WARNING: icons.WARNING,
    logging.ERROR: icons.ERROR,
    logging.CRITICAL: icons.CRITICAL,
}
