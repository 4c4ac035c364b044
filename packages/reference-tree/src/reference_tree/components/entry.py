from enum import StrEnum
from pathlib import Path
from typing import Any, Dict, List

from pydantic import BaseModel, Field


class DescriptionSource(StrEnum):
    BLOCKQUOTE = "blockquote"
    HEADING    = "heading"
    FALLBACK   = "fallback"
    UNREADABLE = "unreadable"


class SourceFile(BaseModel):
    name: str
    path: Path

    def read(self) -> str:
        return self.path.read_text(encoding="utf-8")


class DescribedEntry(BaseModel):
    name: str
    description: str = Field(min_length=1)
    source: DescriptionSource = DescriptionSource.FALLBACK


class UpdateSummary(BaseModel):
    """Counts collected over a single tree update."""

    document: Path
    directory: Path
    entries: List[DescribedEntry] = Field(default_factory=list)

    @property
    def files_found(self) -> int:
        return len(self.entries)

    def names_with(self, source: DescriptionSource) -> List[str]:
        return [e.name for e in self.entries if e.source == source]

    def summary(self) -> Dict[str, Any]:
        return {
            "document": str(self.document),
            "directory": str(self.directory),
            "files_found": self.files_found,
            "fallback_descriptions": len(self.names_with(DescriptionSource.FALLBACK)),
            "unreadable_files": len(self.names_with(DescriptionSource.UNREADABLE)),
        }
