# errors.py
"""
Exception classes with readable error reports for Narrator

All exceptions include:
- Clear error description
- Actionable suggestions
- Relevant context
"""
from pathlib import Path
from typing import Optional, Dict, Any


class NarratorError(Exception):
    """Base exception for all Narrator errors"""

    def __init__(
        self,
        message: str,
        suggestion: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None
    ):
        self.message = message
        self.suggestion = suggestion
        self.context = context or {}
        self.cause = cause
        super().__init__(self.format_message())

    def format_message(self) -> str:
        """Format error with all details"""
        lines = [
            "",
            "=" * 70,
            f"❌ {self.__class__.__name__}",
            "=" * 70,
            "",
            self.message,
        ]

        if self.context:
            lines.append("")
            lines.append("Context:")
            for key, value in self.context.items():
                lines.append(f"  {key}: {value}")

        if self.suggestion:
            lines.append("")
            lines.append("💡 Suggestion:")
            lines.append(f"  {self.suggestion}")

        if self.cause:
            lines.append("")
            lines.append(f"Caused by: {type(self.cause).__name__}: {self.cause}")

        lines.append("")
        lines.append("=" * 70)
        lines.append("")

        return "\n".join(lines)


class ConfigurationError(NarratorError):
    """Configuration is missing or invalid"""
    pass


class ContentError(NarratorError):
    """Lesson content could not be processed"""
    pass


# Specific error factory functions

def invalid_render_mode_error(value: Any) -> ConfigurationError:
    """Create error for an unknown render mode"""
    return ConfigurationError(
        message=f"Unknown render mode: {value!r}",
        suggestion=(
            "Use one of the supported modes:\n"
            "  narrator normalize lesson.mdx --mode doc\n"
            "  narrator normalize lesson.mdx --mode presentation"
        ),
        context={
            "value": value,
            "allowed": ["doc", "presentation"],
        }
    )


def invalid_config_file_error(path: Path, cause: Optional[Exception] = None) -> ConfigurationError:
    """Create error for a config file that cannot be parsed"""
    return ConfigurationError(
        message=f"Could not parse configuration file {path.name}",
        suggestion=(
            "Check the YAML syntax, or regenerate the file:\n"
            "  narrator init --force"
        ),
        context={"file": str(path)},
        cause=cause,
    )


def not_a_lesson_error(path: Path) -> ContentError:
    """Create error for a path that is not a Markdown/MDX document"""
    return ContentError(
        message=f"Not a Markdown or MDX document: {path.name}",
        suggestion="Pass a .md or .mdx file from the docs directory",
        context={"path": str(path)},
    )


def invalid_frontmatter_error(path: Path, cause: Optional[Exception] = None) -> ContentError:
    """Create error for front matter that is not valid YAML"""
    return ContentError(
        message=f"Invalid front matter in {path.name}",
        suggestion=(
            "Fix the YAML between the --- lines at the top of the file:\n"
            "  ---\n"
            '  title: "Lesson title"\n'
            "  ---"
        ),
        context={"file": str(path)},
        cause=cause,
    )
