"""
FCPXML Chapter Exporter

A command-line tool to export chapter markers from Final Cut Pro X project
files as "HH:MM:SS Name" lines for YouTube chapter descriptions.
"""

# Version information
__version__ = "1.0.0"

# Package metadata
__title__ = "fcpxml-chapter-exporter"
__description__ = "Export Final Cut Pro X chapter markers as YouTube chapter timestamps"
__license__ = "MIT"

# Import main components
from .models import ChapterMarker, Chapter
from .utils import TimeParser
from .parser import MarkerParser
from .chapter_writer import ChapterWriter
from .cli import ChapterExporter, main

# Public API
__all__ = [
    # Version info
    "__version__",
    "__title__",
    "__description__",
    "__license__",

    # Classes
    "ChapterMarker",
    "Chapter",
    "TimeParser",
    "MarkerParser",
    "ChapterWriter",
    "ChapterExporter",
    "main",
]
