import logging
import os
import stat
import tempfile
from pathlib import Path

from ..errors import (
    DocumentNotFoundError,
    DocumentReadError,
    DocumentWriteError,
    MarkerNotFoundError,
    MarkerOrderError,
)

logger = logging.getLogger(__name__)


def splice(content: str, block: str, start_marker: str, end_marker: str) -> str:
    """
    Replace the text between the first *start_marker* and the first
    *end_marker* in *content* with *block*.

    Both markers and everything outside them are kept byte-for-byte; whatever
    sat between them before is discarded.

    Raises:
        MarkerNotFoundError: If either marker is absent.
        MarkerOrderError: If the end marker comes before the start marker.
    """
    start = content.find(start_marker)
    end = content.find(end_marker)

    missing = [m for m, i in ((start_marker, start), (end_marker, end)) if i == -1]
    if missing:
        raise MarkerNotFoundError(start_marker, end_marker, missing)

    head_end = start + len(start_marker)
    if end < head_end:
        raise MarkerOrderError(start_marker, end_marker)

    return f"{content[:head_end]}\n{block}\n{content[end:]}"


def patch_document(path: Path, block: str, start_marker: str, end_marker: str) -> str:
    """Splice *block* into the document at *path* and overwrite it.

    Returns the new document text. The new text goes to a temp file in the
    same directory which then replaces the document, so the file is left
    untouched when reading, splicing or writing fails.
    """
    path = Path(path)
    if not path.is_file():
        raise DocumentNotFoundError(path)

    # newline="" keeps the document's own line endings outside the markers
    try:
        with open(path, "r", encoding="utf-8", newline="") as f:
            content = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise DocumentReadError(path, e) from e

    updated = splice(content, block, start_marker, end_marker)

    tmp_path = None
    try:
        with tempfile.NamedTemporaryFile(
            mode="w",
            suffix=".tmp",
            dir=path.parent,
            delete=False,
            encoding="utf-8",
            newline="",
        ) as tmp:
            tmp_path = tmp.name
            tmp.write(updated)

        os.chmod(tmp_path, stat.S_IMODE(path.stat().st_mode))
        os.replace(tmp_path, path)
    except (OSError, UnicodeEncodeError) as e:
        if tmp_path is not None and os.path.exists(tmp_path):
            os.unlink(tmp_path)
        raise DocumentWriteError(path, e) from e

    logger.debug("Wrote %d characters to %s", len(updated), path)
    return updated
