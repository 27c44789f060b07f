from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field


class EntryType(StrEnum):
    FOLDER = "folder"
    FILE = "file"


class Entry(BaseModel):
    """One record of the exported tree.

    Field order is the order written to ``tree.json``.
    """

    name: str
    path: str
    type: EntryType
    ext: str | None = None
    size: int | None = Field(default=None, ge=0)
    title: str | None = None
    sitemap: str | None = None
    category: str | None = None

    model_config = {"use_enum_values": True}

    @classmethod
    def folder(cls, name: str, path: str) -> "Entry":
        return cls(name=name, path=path, type=EntryType.FOLDER)


class ParseWarning(BaseModel):
    """An HTML file whose metadata could not be read."""

    path: str
    message: str


class ScanResult(BaseModel):
    entries: list[Entry] = Field(default_factory=list)
    folders: int = 0
    files: int = 0
    warnings: list[ParseWarning] = Field(default_factory=list)

    @property
    def parse_warnings(self) -> int:
        return len(self.warnings)

    def records(self) -> list[dict[str, Any]]:
        """Entries as plain dicts, ready for JSON serialization."""
        return [entry.model_dump(mode="json") for entry in self.entries]

    def summary(self) -> dict[str, int]:
        return {
            "folders": self.folders,
            "files": self.files,
            "parse_warnings": self.parse_warnings,
        }
