# tests/conftest.py
"""
Pytest configuration and shared fixtures for Narrator tests
"""
import logging
import pytest
from pathlib import Path

from narrator.cli import IconLogFormatter
from narrator.config_utils import NarratorConfig


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    """Create a project tree with website/docs and website/shared-prompts"""
    (tmp_path / "website" / "docs").mkdir(parents=True)
    (tmp_path / "website" / "shared-prompts").mkdir(parents=True)
    (tmp_path / "website" / "src" / "components" / "VisualElements").mkdir(parents=True)
    return tmp_path


@pytest.fixture
def config(project_dir: Path) -> NarratorConfig:
    """Config anchored at the temporary project"""
    return NarratorConfig(project_root=project_dir)


@pytest.fixture
def review_prompt(project_dir: Path) -> Path:
    """A shared prompt fragment with front matter, a link and a code block"""
    path = project_dir / "website" / "shared-prompts" / "_review-prompt.md"
    path.write_text(
        """---
title: Review prompt
---
import Helper from '@site/src/components/Helper';

Review the [diff](https://example.com/diff) carefully.

```js
function reviewChange(diff, rules) {
  return rules.every((rule) => rule(diff));
}
```
<!-- internal note -->



Report every issue you find.
""",
        encoding="utf-8",
    )
    return path


@pytest.fixture
def sample_lesson(project_dir: Path, review_prompt: Path) -> Path:
    """A lesson using a visual component, a shared prompt and layout chrome"""
    path = project_dir / "website" / "docs" / "01-intro.mdx"
    path.write_text(
        """---
title: Getting Started
sidebar_position: 1
---
import WorkflowCircle from '@site/src/components/VisualElements/WorkflowCircle';
import ReviewPrompt from '@site/shared-prompts/\\_review-prompt.md';
import Tabs from '@theme/Tabs';

# Getting Started

Agents work in a loop.

<WorkflowCircle />

<ReviewPrompt />

<Tabs />

:::tip[Remember]
Keep prompts short.
:::
""",
        encoding="utf-8",
    )
    return path


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path: Path, monkeypatch):
    """Keep user config and NARRATOR_* variables out of every test"""
    for name in ("NARRATOR_PROJECT_ROOT", "NARRATOR_DOCS_DIR", "NARRATOR_MODE"):
        monkeypatch.delenv(name, raising=False)
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))


@pytest.fixture(autouse=True)
def restore_root_logger():
    """The CLI installs its own root handler; remove it after each test"""
    root = logging.getLogger()
    level = root.level
    yield
    for handler in list(root.handlers):
        if isinstance(handler.formatter, IconLogFormatter):
            root.removeHandler(handler)
    root.setLevel(level)
