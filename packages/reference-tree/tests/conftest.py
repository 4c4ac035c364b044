import logging
from collections.abc import Generator
from pathlib import Path

import pytest

from reference_tree.config import TreeSettings

START = "<!-- tree-start -->"
END = "<!-- tree-end -->"

SKILL_MD = f"""# Working with the skill

Intro text.

## Files

{START}
```
references/
└── stale.md                 # Out of date
```
{END}

## Footer

Trailing content.
"""


@pytest.fixture(autouse=True)
def reset_package_logger() -> Generator[None, None, None]:
    """main() installs its own handlers; put the package logger back afterwards."""
    logger = logging.getLogger("reference_tree")
    handlers, level, propagate = list(logger.handlers), logger.level, logger.propagate
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate


@pytest.fixture
def skill_dir(tmp_path: Path) -> Path:
    """
    A skill folder laid out as:

    skill/
    ├── SKILL.md
    └── references/
        ├── alpha.md      "> Does alpha things"
        └── beta.md       "# Beta Tool"
    """
    root = tmp_path / "skill"
    references = root / "references"
    references.mkdir(parents=True)
    (references / "alpha.md").write_text("> Does alpha things\n\nBody.\n", encoding="utf-8")
    (references / "beta.md").write_text("# Beta Tool\n\nBody.\n", encoding="utf-8")
    (root / "SKILL.md").write_text(SKILL_MD, encoding="utf-8")
    return root


@pytest.fixture
def settings(skill_dir: Path) -> TreeSettings:
    return TreeSettings(skill_root=skill_dir)
