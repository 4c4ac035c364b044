"""
Derive a one-line description for a reference markdown file.

Rules are tried in order and each one scans the whole file, so a blockquote
anywhere in the file wins over a heading that appears earlier:

    1. blockquote   "> Short summary"   -> "Short summary"
    2. H1 heading   "# Title"           -> "Title"
    3. fallback                          -> "Documentation file"

A file that cannot be read also gets the fallback; the error is logged and
the remaining files are still processed.
"""

from __future__ import annotations

import logging
from typing import Callable, List, Optional, Tuple

from .entry import DescribedEntry, DescriptionSource, SourceFile

logger = logging.getLogger(__name__)

FALLBACK_DESCRIPTION = "Documentation file"

BLOCKQUOTE_MARKER = "> "
HEADING_MARKER = "# "


def _marker_rule(marker: str) -> Tuple[Callable[[str], bool], Callable[[str], str]]:
    def matches(line: str) -> bool:
        return line.startswith(marker) and bool(line[len(marker):].strip())

    def extract(line: str) -> str:
        return line[len(marker):].strip()

    return matches, extract


# (source, predicate, extractor), in priority order
DESCRIPTION_RULES: List[Tuple[DescriptionSource, Callable[[str], bool], Callable[[str], str]]] = [
    (DescriptionSource.BLOCKQUOTE, *_marker_rule(BLOCKQUOTE_MARKER)),
    (DescriptionSource.HEADING, *_marker_rule(HEADING_MARKER)),
]


def find_description(text: str) -> Optional[Tuple[str, DescriptionSource]]:
    """Return the first description a rule yields for *text*, or None."""
    lines = [line.strip() for line in text.splitlines()]
    for source, matches, extract in DESCRIPTION_RULES:
        for line in lines:
            if matches(line):
                return extract(line), source
    return None


def describe_content(name: str, text: str) -> DescribedEntry:
    found = find_description(text)
    if found is None:
        logger.warning("No description found for %s, using generic text", name)
        return DescribedEntry(
            name=name,
            description=FALLBACK_DESCRIPTION,
            source=DescriptionSource.FALLBACK,
        )
    description, source = found
    return DescribedEntry(name=name, description=description, source=source)


def describe_file(source: SourceFile) -> DescribedEntry:
    """Read *source* and describe it, degrading to the fallback on read errors."""
    try:
        text = source.read()
    except (OSError, UnicodeDecodeError) as e:
        logger.error("Error reading %s (%s): %s", source.name, source.path, e)
        return DescribedEntry(
            name=source.name,
            description=FALLBACK_DESCRIPTION,
            source=DescriptionSource.UNREADABLE,
        )
    return describe_content(source.name, text)
