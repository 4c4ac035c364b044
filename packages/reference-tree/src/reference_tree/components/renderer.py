from typing import Sequence

from .entry import DescribedEntry

FENCE = "```"
COLUMN_WIDTH = 25

BRANCH = "├── "
LAST_BRANCH = "└── "
COMMENT = "# "
EMPTY_LINE = f"{LAST_BRANCH}(empty)"


def render_entry(entry: DescribedEntry, is_last: bool) -> str:
    # Names longer than COLUMN_WIDTH push the comment right instead of being cut.
    prefix = LAST_BRANCH if is_last else BRANCH
    return f"{prefix}{entry.name.ljust(COLUMN_WIDTH)}{COMMENT}{entry.description}"


def render_tree(entries: Sequence[DescribedEntry], directory_name: str) -> str:
    """
    Render *entries* as a fenced listing of *directory_name*, e.g.

        ```
        references/
        ├── alpha.md                 # Does alpha things
        └── beta.md                  # Beta Tool
        ```

    Entries are rendered in the order given. An empty sequence renders a
    single "(empty)" line.
    """
    lines = [FENCE, f"{directory_name}/"]

    if not entries:
        lines.append(EMPTY_LINE)
    for index, entry in enumerate(entries):
        lines.append(render_entry(entry, is_last=index == len(entries) - 1))

    lines.append(FENCE)
    return "\n".join(lines)
