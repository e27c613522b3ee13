# config_utils.py - YAML Configuration System for Narrator
"""
Narrator configuration utilities with YAML file support.

Configuration Resolution Order (highest to lowest priority):
1. Environment variables (NARRATOR_PROJECT_ROOT, NARRATOR_DOCS_DIR, NARRATOR_MODE)
2. narrator.yaml in the project root
3. ~/.narrator/config.yaml (global defaults)

Usage:
    from narrator.config_utils import get_config

    config = get_config()
    print(config.project_root)
    print(config.docs_path)
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Dict, Any, List

import yaml

from narrator.errors import ConfigurationError, invalid_config_file_error
from narrator.models import RenderMode

CONFIG_FILENAME = "narrator.yaml"


@dataclass
class NarratorConfig:
    """Complete Narrator configuration"""
    # Resolved once at load time and handed to the path resolver
    project_root: Optional[Path] = None

    # Alias resolution
    website_dir: str = "website"
    site_alias: str = "@site/"

    # Lesson discovery
    docs_dir: str = "website/docs"
    exclude: List[str] = field(default_factory=lambda: ["CLAUDE.md"])

    # Component classification (path substrings)
    visual_marker: str = "visual-elements"
    shared_prompt_marker: str = "shared-prompts"

    # Code block context windows (characters)
    immediate_window: int = 100
    context_window: int = 200

    default_mode: RenderMode = RenderMode.DOC

    # Extra settings from config file
    extra: Dict[str, Any] = field(default_factory=dict)

    # Track where values came from (for `narrator info`)
    _sources: Dict[str, str] = field(default_factory=dict)

    def __post_init__(self):
        if self.project_root is None:
            self.project_root = Path.cwd()
        self.project_root = Path(self.project_root)
        self.default_mode = RenderMode.coerce(self.default_mode)

    @property
    def docs_path(self) -> Path:
        return self.project_root / self.docs_dir

    def validate(self) -> List[str]:
        """Return a list of human-readable problems (empty when valid)."""
        issues = []
        if self.immediate_window < 0:
            issues.append("immediate_window must not be negative")
        if self.context_window < self.immediate_window:
            issues.append("context_window must be at least immediate_window")
        if not self.project_root.exists():
            issues.append(f"project_root does not exist: {self.project_root}")
        return issues


class ConfigLoader:
    """Load configuration from multiple sources"""

    # YAML key -> (attribute, converter)
    MAPPINGS = {
        "project_root": ("project_root", lambda v: Path(v).expanduser()),
        "website_dir": ("website_dir", str),
        "site_alias": ("site_alias", str),
        "docs_dir": ("docs_dir", str),
        "exclude": ("exclude", lambda v: [v] if isinstance(v, str) else list(v)),
        "visual_marker": ("visual_marker", str),
        "shared_prompt_marker": ("shared_prompt_marker", str),
        "immediate_window": ("immediate_window", int),
        "context_window": ("context_window", int),
        "default_mode": ("default_mode", RenderMode.coerce),
    }

    def __init__(self, project_dir: Optional[Path] = None):
        self.project_dir = Path(project_dir) if project_dir else Path.cwd()
        self.config = NarratorConfig(project_root=self.project_dir)

    def load(self) -> NarratorConfig:
        """Load configuration from all sources in priority order"""
        # Lowest priority first, higher overwrites
        self._load_global_config()
        self._load_yaml_config()
        self._load_env_vars()
        return self.config

    def _load_global_config(self):
        """Load ~/.narrator/config.yaml if it exists"""
        global_config = Path.home() / ".narrator" / "config.yaml"
        if global_config.is_file():
            self._load_yaml_file(global_config, "global")

    def _load_yaml_config(self):
        """Load narrator.yaml from the project root"""
        yaml_path = self.project_dir / CONFIG_FILENAME
        if yaml_path.is_file():
            self._load_yaml_file(yaml_path, CONFIG_FILENAME)

    def _load_yaml_file(self, path: Path, source_name: str):
        """Load settings from a YAML file"""
        try:
            data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
        except yaml.YAMLError as e:
            raise invalid_config_file_error(path, e) from e

        if not isinstance(data, dict):
            raise ConfigurationError(
                message=f"{path.name} must contain a mapping of settings",
                context={"file": str(path), "found": type(data).__name__},
            )

        for key, value in data.items():
            if key not in self.MAPPINGS:
                self.config.extra[key] = value
                continue

            attr, convert = self.MAPPINGS[key]
            try:
                value = convert(value)
            except (TypeError, ValueError) as e:
                raise ConfigurationError(
                    message=f"Invalid value for '{key}' in {path.name}",
                    context={"file": str(path), "value": value},
                    cause=e,
                ) from e
            setattr(self.config, attr, value)
            self.config._sources[attr] = source_name

        # A relative project_root is relative to the file that set it
        if "project_root" in data and not self.config.project_root.is_absolute():
            self.config.project_root = (path.parent / self.config.project_root).resolve()

    def _load_env_vars(self):
        """Load from environment variables (highest priority)"""
        if os.environ.get("NARRATOR_PROJECT_ROOT"):
            self.config.project_root = Path(os.environ["NARRATOR_PROJECT_ROOT"]).expanduser()
            self.config._sources["project_root"] = "env:NARRATOR_PROJECT_ROOT"

        if os.environ.get("NARRATOR_DOCS_DIR"):
            self.config.docs_dir = os.environ["NARRATOR_DOCS_DIR"]
            self.config._sources["docs_dir"] = "env:NARRATOR_DOCS_DIR"

        if os.environ.get("NARRATOR_MODE"):
            self.config.default_mode = RenderMode.coerce(os.environ["NARRATOR_MODE"])
            self.config._sources["default_mode"] = "env:NARRATOR_MODE"


# ============================================================================
# Public API
# ============================================================================

def get_config(project_dir: Optional[Path] = None) -> NarratorConfig:
    """
    Get complete Narrator configuration.

    Args:
        project_dir: Project directory (defaults to cwd)

    Returns:
        NarratorConfig with all settings resolved
    """
    loader = ConfigLoader(project_dir)
    return loader.load()


def create_config_template(include_comments: bool = True) -> str:
    """
    Generate a narrator.yaml template.

    Args:
        include_comments: Whether to include explanatory comments

    Returns:
        YAML string ready to write to file
    """
    if include_comments:
        return '''# Narrator Configuration File

# Where "@site/" imports point: <project_root>/<website_dir>/...
website_dir: website
site_alias: "@site/"

# Lessons scanned by `narrator list`
docs_dir: website/docs
exclude:
  - CLAUDE.md

# Import path substrings that mark component kinds
visual_marker: visual-elements
shared_prompt_marker: shared-prompts

# Characters of surrounding prose used to label code examples
immediate_window: 100
context_window: 200

# doc or presentation
default_mode: doc
'''
    else:
        return '''website_dir: website
site_alias: "@site/"
docs_dir: website/docs
exclude:
  - CLAUDE.md
visual_marker: visual-elements
shared_prompt_marker: shared-prompts
immediate_window: 100
context_window: 200
default_mode: doc
'''
