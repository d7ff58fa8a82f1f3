"""Utility functions for fcpxml chapter exporter."""

import math
import re
from fractions import Fraction
from typing import Optional, Tuple


class TimeParser:
    """Utility class for parsing rational times and formatting timestamps."""

    INTEGER_PATTERN = re.compile(r'[+-]?\d+')
    TIME_PATTERN = re.compile(r'(\d{2,}):(\d{2}):(\d{2})')

    @classmethod
    def parse_rational(cls, value) -> Optional[Fraction]:
        """
        Parse an FCPXML rational time into an exact number of seconds.

        Accepts "<num>/<den>s" as well as plain "<num>s". Missing or empty
        values count as zero, and so does a value with more than one '/'.

        Args:
            value: Attribute value, usually a string such as "1001/30000s"

        Returns:
            Fraction of seconds, or None if a component is not an integer
            or the denominator is not positive

        Examples:
            >>> TimeParser.parse_rational("7500/7500s")
            Fraction(1, 1)
            >>> TimeParser.parse_rational("100s")
            Fraction(100, 1)
        """
        if not isinstance(value, str) or not value:
            return Fraction(0)

        if value.endswith('s'):
            value = value[:-1]
        parts = value.split('/')

        if len(parts) > 2:
            return Fraction(0)
        if not all(cls.INTEGER_PATTERN.fullmatch(part) for part in parts):
            return None

        numerator = int(parts[0])
        denominator = int(parts[1]) if len(parts) == 2 else 1
        if denominator <= 0:
            return None
        return Fraction(numerator, denominator)

    @classmethod
    def convert_rational(cls, value) -> float:
        """
        Convert an FCPXML rational time to seconds as a float.

        Returns NaN where parse_rational() returns None.

        Examples:
            >>> TimeParser.convert_rational("7500/7500s")
            1.0
            >>> TimeParser.convert_rational("")
            0.0
        """
        result = cls.parse_rational(value)
        if result is None:
            return math.nan
        return float(result)

    @staticmethod
    def format_timestamp(total_seconds: int) -> str:
        """
        Format whole seconds as HH:MM:SS.

        Hours are padded to two digits but never truncated.

        Examples:
            >>> TimeParser.format_timestamp(3661)
            '01:01:01'
            >>> TimeParser.format_timestamp(360000)
            '100:00:00'
        """
        if total_seconds < 0:
            raise ValueError(f"Timestamp cannot be negative: {total_seconds}")

        seconds = total_seconds % 60
        minutes = ((total_seconds - seconds) // 60) % 60
        hours = (total_seconds - seconds - minutes * 60) // 3600
        return f"{hours:02d}:{minutes:02d}:{seconds:02d}"

    @classmethod
    def parse_timestamp(cls, time_str: str) -> Tuple[int, int, int]:
        """
        Parse a HH:MM:SS timestamp back into its components.

        Args:
            time_str: Time string in format "HH:MM:SS"

        Returns:
            Tuple of (hours, minutes, seconds)

        Raises:
            ValueError: If time string format is invalid
        """
        match = cls.TIME_PATTERN.fullmatch(time_str)

        if not match:
            raise ValueError(
                f"Invalid time format: {time_str}. "
                f"Expected format: HH:MM:SS (e.g., 00:01:05)"
            )

        hours, minutes, seconds = map(int, match.groups())

        if minutes >= 60 or seconds >= 60:
            raise ValueError(
                f"Invalid time values in {time_str}: "
                f"minutes and seconds must be < 60"
            )

        return hours, minutes, seconds
