import os
from pathlib import Path

from ..errors import ReferencesDirectoryNotFoundError
from .entry import SourceFile


def scan_references(directory: Path, extension: str = ".md") -> list[SourceFile]:
    """
    List the reference files directly inside *directory*.

    Args:
        directory: Folder holding the reference markdown files.
        extension: Only file names ending with this suffix are kept.

    Returns:
        SourceFile entries sorted by name. Subdirectories are skipped.

    Raises:
        ReferencesDirectoryNotFoundError: If *directory* is missing or not a directory.
    """
    directory = Path(directory)
    if not directory.is_dir():
        raise ReferencesDirectoryNotFoundError(directory)

    sources: list[SourceFile] = []
    for entry in sorted(os.listdir(directory)):
        path = directory / entry
        if entry.endswith(extension) and path.is_file():
            sources.append(SourceFile(name=entry, path=path))

    return sources
