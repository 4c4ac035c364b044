"""Fatal errors raised while updating a document's reference tree.

Anything deriving from TreeUpdateError aborts the whole run. Problems with a
single reference file are never raised; they are logged and the file gets
the fallback description instead.
"""

from pathlib import Path


class TreeUpdateError(Exception):
    """Base class for errors that abort a tree update."""


class ReferencesDirectoryNotFoundError(TreeUpdateError):
    def __init__(self, directory: Path) -> None:
        self.directory = directory
        super().__init__(f"References directory not found: {directory}")


class DocumentNotFoundError(TreeUpdateError):
    def __init__(self, document: Path) -> None:
        self.document = document
        super().__init__(f"{document.name} not found: {document}")


class MarkerNotFoundError(TreeUpdateError):
    def __init__(self, start_marker: str, end_marker: str, missing: list[str]) -> None:
        self.start_marker = start_marker
        self.end_marker = end_marker
        self.missing = missing
        super().__init__(
            f"Cannot find tree markers ({', '.join(missing)}). "
            f"Expected {start_marker} and {end_marker}"
        )


class MarkerOrderError(TreeUpdateError):
    def __init__(self, start_marker: str, end_marker: str) -> None:
        self.start_marker = start_marker
        self.end_marker = end_marker
        super().__init__(f"End marker {end_marker} appears before start marker {start_marker}")


class DocumentReadError(TreeUpdateError):
    def __init__(self, document: Path, error: Exception) -> None:
        self.document = document
        self.error = error
        super().__init__(f"Cannot read {document}: {error}")


class DocumentWriteError(TreeUpdateError):
    def __init__(self, document: Path, error: Exception) -> None:
        self.document = document
        self.error = error
        super().__init__(f"Cannot write {document}, left unchanged: {error}")
