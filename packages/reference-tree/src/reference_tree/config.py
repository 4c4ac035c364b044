from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class TreeSettings(BaseSettings):
    """Tree update settings, overridable through REFERENCE_TREE_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="REFERENCE_TREE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Layout
    skill_root: Path = Path(".")
    references_dir: Optional[Path] = None
    document: Optional[Path] = None

    # Markers
    start_marker: str = "<!-- tree-start -->"
    end_marker: str = "<!-- tree-end -->"

    # Listing
    extension: str = ".md"
    directory_label: Optional[str] = None

    @property
    def references_path(self) -> Path:
        return self.references_dir or self.skill_root / "references"

    @property
    def document_path(self) -> Path:
        return self.document or self.skill_root / "SKILL.md"

    @property
    def label(self) -> str:
        return self.directory_label or self.references_path.resolve().name
