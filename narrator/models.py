"""
models.py - Value types shared by the normalization passes

Everything here is created and thrown away inside one normalize() call.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Dict

from narrator.errors import invalid_render_mode_error


# Local component name -> declared import path (may carry the site alias)
ImportMap = Dict[str, str]


class RenderMode(str, Enum):
    """Output flavor chosen by the caller; selects which marked regions survive."""
    DOC = "doc"
    PRESENTATION = "presentation"

    @classmethod
    def coerce(cls, value) -> "RenderMode":
        """Accept a RenderMode or its string value."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise invalid_render_mode_error(value) from None


class ComponentKind(str, Enum):
    """How a component reference is treated during expansion."""
    VISUAL = "visual"
    SHARED_PROMPT = "shared-prompt"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class RawDocument:
    """Original file content plus where it came from."""
    path: Path
    content: str

    @classmethod
    def load(cls, path) -> "RawDocument":
        path = Path(path)
        return cls(path=path, content=path.read_text(encoding="utf-8"))

    @property
    def base_dir(self) -> Path:
        return self.path.parent


@dataclass(frozen=True)
class CodeBlockSpan:
    """
    A fenced block located in the text, with its context windows captured
    before any replacement in the same pass.
    """
    original: str
    start: int
    preceding_context: str
    following_context: str

    @property
    def end(self) -> int:
        return self.start + len(self.original)
