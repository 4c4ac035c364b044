from reference_tree.config import TreeSettings
from reference_tree.errors import (
    DocumentNotFoundError,
    DocumentReadError,
    DocumentWriteError,
    MarkerNotFoundError,
    MarkerOrderError,
    ReferencesDirectoryNotFoundError,
    TreeUpdateError,
)
from reference_tree.update_tree import generate_tree, main, update_tree

__all__ = [
    "DocumentNotFoundError",
    "DocumentReadError",
    "DocumentWriteError",
    "MarkerNotFoundError",
    "MarkerOrderError",
    "ReferencesDirectoryNotFoundError",
    "TreeSettings",
    "TreeUpdateError",
    "generate_tree",
    "main",
    "update_tree",
]
