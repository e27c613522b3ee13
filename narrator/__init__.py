"""
Narrator - Course lesson normalization for narration and slides

Turns MDX/Markdown lessons into plain narrative text: components are
expanded or dropped, shared prompts are inlined, code blocks become short
spoken descriptions, and presentational markup is removed.
"""

__version__ = "1.0.0"

from .code_blocks import describe_code_block, extract_code_summary
from .errors import NarratorError, ConfigurationError, ContentError
from .markdown_parser import normalize, normalize_text
from .models import RenderMode, ComponentKind

__all__ = [
    "__version__",
    "normalize",
    "normalize_text",
    "describe_code_block",
    "extract_code_summary",
    "RenderMode",
    "ComponentKind",
    "NarratorError",
    "ConfigurationError",
    "ContentError",
]
