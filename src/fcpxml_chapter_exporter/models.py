"""Data models for fcpxml chapter exporter."""

from dataclasses import dataclass


@dataclass
class ChapterMarker:
    """A chapter-marker found in the project, with its enclosing clip's timing."""
    name: str
    start: str
    asset_start: str
    asset_offset: str
    clip_tag: str = ""

    def __repr__(self) -> str:
        """String representation of ChapterMarker."""
        return (
            f"ChapterMarker(name={self.name!r}, start={self.start!r}, "
            f"clip={self.clip_tag or '?'}, asset_start={self.asset_start!r}, "
            f"asset_offset={self.asset_offset!r})"
        )


@dataclass
class Chapter:
    """Represents a resolved chapter ready for export."""
    timestamp: str
    title: str

    @property
    def line(self) -> str:
        """Chapter as a 'HH:MM:SS Title' line."""
        return f"{self.timestamp} {self.title}"
