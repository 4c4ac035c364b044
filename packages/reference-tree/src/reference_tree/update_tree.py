"""
ReferenceTree - keeps the file tree in a skill document in sync with its
references/ folder.

Every markdown file in references/ becomes one line of the tree, described by
its first blockquote, else its first H1 heading:

    <!-- tree-start -->
    ```
    references/
    ├── alpha.md                 # Does alpha things
    └── beta.md                  # Beta Tool
    ```
    <!-- tree-end -->

Usage (CLI):
    reference-tree                 # run from the skill directory
    python -m reference_tree

Usage (library):
    from reference_tree import TreeSettings, update_tree
    summary = update_tree(TreeSettings(skill_root="/path/to/skill"))
"""

import argparse
import logging
import sys
from typing import Optional, Sequence

from reference_tree.components.describer import describe_file
from reference_tree.components.entry import DescribedEntry, SourceFile, UpdateSummary
from reference_tree.components.patcher import patch_document
from reference_tree.components.renderer import render_tree
from reference_tree.components.scanner import scan_references
from reference_tree.config import TreeSettings
from reference_tree.errors import TreeUpdateError

logger = logging.getLogger(__name__)


def build_entries(sources: Sequence[SourceFile]) -> list[DescribedEntry]:
    """Describe each source file, keeping the order of *sources*."""
    return [describe_file(source) for source in sources]


def generate_tree(settings: TreeSettings) -> tuple[str, UpdateSummary]:
    """Scan the references folder and render its tree block."""
    directory = settings.references_path
    logger.info("Scanning: %s", directory)
    sources = scan_references(directory, settings.extension)
    logger.info("Found %d %s files", len(sources), settings.extension)

    if not sources:
        logger.info("No %s files found in %s/", settings.extension, settings.label)

    logger.info("Generating file tree...")
    entries = build_entries(sources)
    block = render_tree(entries, settings.label)

    summary = UpdateSummary(
        document=settings.document_path,
        directory=directory,
        entries=entries,
    )
    return block, summary


def update_tree(settings: TreeSettings) -> UpdateSummary:
    """Regenerate the tree and splice it into the configured document."""
    document = settings.document_path
    logger.info("Updating %s file tree...", document.name)

    block, summary = generate_tree(settings)

    logger.info("Updating %s...", document.name)
    patch_document(document, block, settings.start_marker, settings.end_marker)

    counts = summary.summary()
    logger.info(
        "Listed %d files (%d with generic description, %d unreadable)",
        counts["files_found"],
        counts["fallback_descriptions"],
        counts["unreadable_files"],
    )
    logger.info("%s updated successfully!", document.name)
    logger.info('Run "git diff %s" to see changes', document.name)
    return summary


def configure_logging(level: int = logging.INFO) -> None:
    """Send progress and warnings to stdout, errors to stderr."""
    root = logging.getLogger("reference_tree")
    root.setLevel(level)
    root.handlers.clear()
    root.propagate = False

    formatter = logging.Formatter("%(message)s")

    out = logging.StreamHandler(sys.stdout)
    out.setFormatter(formatter)
    out.addFilter(lambda record: record.levelno < logging.ERROR)

    err = logging.StreamHandler(sys.stderr)
    err.setFormatter(formatter)
    err.setLevel(logging.ERROR)

    root.addHandler(out)
    root.addHandler(err)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description=(
            "Update the file tree between the tree markers in SKILL.md from "
            "the markdown files in references/."
        )
    )
    parser.parse_args(argv)

    configure_logging()

    try:
        summary = update_tree(TreeSettings())
    except TreeUpdateError as e:
        logger.error("Error: %s", e)
        return 1

    logger.debug("Summary: %s", summary.summary())
    return 0


if __name__ == "__main__":
    sys.exit(main())
