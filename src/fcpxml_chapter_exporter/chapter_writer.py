"""Chapter resolution and output for fcpxml chapter exporter."""

import logging
import math
import sys
from typing import List, Optional, TextIO

from .models import ChapterMarker, Chapter
from .utils import TimeParser

logger = logging.getLogger(__name__)


class ChapterWriter:
    """Converts chapter markers into timeline timestamps and writes them out."""

    def calculate_chapter_time(self, marker: ChapterMarker) -> Optional[str]:
        """
        Calculate where a chapter marker falls in the rendered video.

        The marker's start is relative to the source asset, so the clip's
        trim-in point is subtracted and the clip's position on the sequence
        timeline is added. Sub-second precision is dropped.

        Args:
            marker: Chapter marker to resolve

        Returns:
            Timestamp as HH:MM:SS, or None if the marker is invalid
        """
        start = TimeParser.parse_rational(marker.start)
        asset_start = TimeParser.parse_rational(marker.asset_start)
        asset_offset = TimeParser.parse_rational(marker.asset_offset)

        if start is None or asset_start is None or asset_offset is None:
            return None

        # Markers before the clip's trim-in point are not part of the video
        if start < asset_start:
            return None

        offset_seconds = math.floor(start - asset_start + asset_offset)
        if offset_seconds < 0:
            return None

        return TimeParser.format_timestamp(offset_seconds)

    def generate_chapters(self, markers: List[ChapterMarker]) -> List[Chapter]:
        """
        Resolve markers into chapters, dropping invalid ones.

        Args:
            markers: Markers collected from the project

        Returns:
            Chapters sorted by their "HH:MM:SS Title" line
        """
        chapters = []

        for marker in markers:
            timestamp = self.calculate_chapter_time(marker)
            if timestamp is None:
                logger.debug(f"Skipping invalid chapter marker: {marker}")
                continue

            chapters.append(Chapter(timestamp=timestamp, title=marker.name))

        # Markers come back in document order, not timeline order
        return sorted(chapters, key=lambda chapter: chapter.line)

    def write_chapters(self,
                       chapters: List[Chapter],
                       stream: Optional[TextIO] = None) -> None:
        """
        Write chapters one per line.

        Args:
            chapters: Chapters to write
            stream: Text stream to write to (default: stdout)
        """
        if stream is None:
            stream = sys.stdout

        for chapter in chapters:
            stream.write(f"{chapter.line}\n")
