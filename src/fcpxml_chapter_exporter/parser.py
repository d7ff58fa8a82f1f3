"""FCPXML project parser for fcpxml chapter exporter."""

import logging
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import List

from .models import ChapterMarker

logger = logging.getLogger(__name__)


class MarkerParser:
    """Finds chapter markers in Final Cut Pro X project files."""

    MARKER_TAG = 'chapter-marker'

    def parse_file(self, filepath: Path) -> List[ChapterMarker]:
        """
        Parse a project file and collect all of its chapter markers.

        Args:
            filepath: Path to the .fcpxml file

        Returns:
            List of ChapterMarker objects in document order

        Raises:
            FileNotFoundError: If the project file doesn't exist
            ValueError: If the path is not a file or is not well-formed XML
        """
        root = self.load(filepath)
        markers = self.collect_markers(root)
        logger.debug(f"Collected {len(markers)} chapter markers from {filepath}")
        return markers

    def load(self, filepath: Path) -> ET.Element:
        """
        Read and parse a project file.

        Args:
            filepath: Path to the .fcpxml file

        Returns:
            Root element of the document

        Raises:
            FileNotFoundError: If the project file doesn't exist
            ValueError: If the path is not a file or is not well-formed XML
        """
        filepath = Path(filepath)
        if not filepath.exists():
            raise FileNotFoundError(f"Project file not found: {filepath}")

        if not filepath.is_file():
            raise ValueError(f"Path is not a file: {filepath}")

        try:
            tree = ET.parse(filepath)
        except ET.ParseError as e:
            raise ValueError(f"Invalid XML in {filepath}: {e}") from e
        return tree.getroot()

    def collect_markers(self, element: ET.Element) -> List[ChapterMarker]:
        """
        Walk the tree and collect every chapter marker, at any depth.

        Each marker takes its timing context from the element it is attached
        to: that element's ``offset`` places it on the sequence timeline and
        its ``start`` is the trim-in point within the source asset.

        Args:
            element: Root of the (sub)tree to scan

        Returns:
            List of ChapterMarker objects in document order
        """
        markers = []

        # iter() is a pre-order walk, so markers stay in document order
        for clip in element.iter():
            for marker in clip.findall(self.MARKER_TAG):
                markers.append(ChapterMarker(
                    name=marker.get('value', ''),
                    start=marker.get('start', ''),
                    asset_start=clip.get('start', ''),
                    asset_offset=clip.get('offset', ''),
                    clip_tag=clip.tag
                ))

        return markers
