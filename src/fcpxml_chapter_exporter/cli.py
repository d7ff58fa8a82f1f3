"""Command-line interface for fcpxml chapter exporter."""

import sys
import logging
from pathlib import Path
import argparse

from . import __version__, __description__
from .parser import MarkerParser
from .chapter_writer import ChapterWriter

logger = logging.getLogger(__name__)


class ChapterExporter:
    """Main application class for exporting chapter markers."""

    def __init__(self, args: argparse.Namespace):
        """
        Initialize ChapterExporter.

        Args:
            args: Parsed command-line arguments
        """
        self.args = args
        self.parser = MarkerParser()
        self.chapter_writer = ChapterWriter()
        self.project_file = Path(args.file)

    def run(self) -> int:
        """
        Export the project's chapter markers to stdout.

        Returns:
            Exit code (0 for success, non-zero for failure)
        """
        try:
            logger.debug(f"Reading project file: {self.project_file}")
            markers = self.parser.parse_file(self.project_file)

            if self.args.verbose:
                for marker in markers:
                    logger.debug(f"  Found {marker}")

            chapters = self.chapter_writer.generate_chapters(markers)

            skipped = len(markers) - len(chapters)
            if skipped:
                logger.info(f"Skipped {skipped} invalid chapter marker(s)")

            if not chapters:
                if markers:
                    logger.warning("No valid chapter markers found.")
                else:
                    logger.warning("No chapter markers found.")
                return 0

            if chapters[0].timestamp != "00:00:00":
                logger.warning(
                    "First chapter does not start at 00:00:00; "
                    "YouTube requires a chapter at the start of the video"
                )

            self.chapter_writer.write_chapters(chapters, sys.stdout)
            logger.debug(f"Exported {len(chapters)} chapters")
            return 0

        except KeyboardInterrupt:
            logger.info("\nOperation cancelled by user.")
            return 130
        except (OSError, ValueError) as e:
            logger.error(f"Error: {e}")
            if self.args.verbose:
                logger.exception("Detailed error information:")
            return 1


def create_parser() -> argparse.ArgumentParser:
    """Create command line argument parser."""
    parser = argparse.ArgumentParser(
        prog='fcpxml-chapters',
        description=__description__,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s -f my_project.fcpxml
  %(prog)s --file my_project.fcpxml -v
  %(prog)s -f my_project.fcpxml > chapters.txt

Output format (one line per chapter marker, sorted by time):
  00:00:00 Intro
  00:01:05 Setup
  01:02:30 Wrap-up
        """
    )

    parser.add_argument('-f', '--file',
                        required=True,
                        metavar='PATH',
                        help='Final Cut Pro X project XML file to export '
                             'chapter marker timestamps from')

    # Output control
    output_group = parser.add_mutually_exclusive_group()
    output_group.add_argument('-q', '--quiet',
                              action='store_true',
                              help='Only report warnings and errors')
    output_group.add_argument('-v', '--verbose',
                              action='store_true',
                              help='Show detailed output')

    # Version
    parser.add_argument('--version',
                        action='version',
                        version=f'%(prog)s {__version__}')

    return parser


def setup_logging(quiet: bool, verbose: bool):
    """Configure logging based on verbosity settings."""
    if quiet:
        level = logging.WARNING
    elif verbose:
        level = logging.DEBUG
    else:
        level = logging.INFO

    # Configure root logger; stdout is reserved for chapter lines
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        if verbose else '%(message)s',
        datefmt='%Y-%m-%d %H:%M:%S',
        stream=sys.stderr,
        force=True
    )


def main():
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args()

    # Configure logging
    setup_logging(args.quiet, args.verbose)

    # Run application
    app = ChapterExporter(args)
    sys.exit(app.run())


if __name__ == "__main__":
    main()
