"""
Schedule Extraction

Pulls an optional date and an optional time out of a single matchup line
such as "Ohio State vs Oregon - January 1, 2025, 5:00 PM ET".

Both results are independent: a line may carry a date only, a time only,
both or neither. Pattern order is significant, first match wins.
"""

import re
from typing import Optional, Tuple, Pattern
from dataclasses import dataclass


# Schedules usually follow the team names after a dash
_SEPARATOR = re.compile(r"[-–—]")

_MONTHS = (
    r"January|February|March|April|May|June|July|August|September|"
    r"October|November|December"
)
_MONTH_ABBREVIATIONS = r"Jan|Feb|Mar|Apr|May|Jun|Jul|Aug|Sep|Sept|Oct|Nov|Dec"
_MERIDIEM = r"AM|PM|am|pm|a\.m\.|p\.m\."
_TIMEZONE = r"ET|PT|CT|MT|EST|PST|CST|MST|Eastern|Pacific"

DATE_PATTERNS: Tuple[Pattern, ...] = (
    # "January 5, 2025", "January 5", "March 20-21"
    re.compile(
        rf"\b((?:{_MONTHS})\s+\d{{1,2}}(?:-\d{{1,2}})?(?:,?\s*\d{{4}})?)\b",
        re.IGNORECASE,
    ),
    # "Jan. 5, 2025", "Sept 5"
    re.compile(
        rf"\b((?:{_MONTH_ABBREVIATIONS})\.?\s+\d{{1,2}}(?:-\d{{1,2}})?(?:,?\s*\d{{4}})?)\b",
        re.IGNORECASE,
    ),
    # "1/5/2025", "01-05-2025", "3/21"
    re.compile(r"\b(\d{1,2}[/\-]\d{1,2}(?:[/\-]\d{2,4})?)\b"),
)

TIME_PATTERNS: Tuple[Pattern, ...] = (
    # "5:00 PM ET", "5:00PM", "7:30 p.m."
    re.compile(
        rf"\b(\d{{1,2}}:\d{{2}}\s*(?:{_MERIDIEM})?(?:\s*(?:{_TIMEZONE}))?)\b",
        re.IGNORECASE,
    ),
    # "5 PM ET", "3PM"
    re.compile(
        rf"\b(\d{{1,2}}\s*(?:{_MERIDIEM})(?:\s*(?:{_TIMEZONE}))?)\b",
        re.IGNORECASE,
    ),
)


@dataclass(frozen=True)
class Schedule:
    """Date and time substrings found on a line, each optional."""
    date: Optional[str] = None
    time: Optional[str] = None


def _search_region(line: str) -> str:
    parts = _SEPARATOR.split(line, maxsplit=1)
    if len(parts) > 1 and parts[1]:
        return parts[1]
    return line


def _first_match(patterns: Tuple[Pattern, ...], text: str) -> Optional[str]:
    for pattern in patterns:
        match = pattern.search(text)
        if match:
            return match.group(1).strip()
    return None


def extract_schedule(line: str) -> Schedule:
    """
    Extract the scheduled date and time from a line.

    The text after the first dash-family separator is searched when there
    is one, otherwise the whole line.

    Example:
        >>> extract_schedule("Ohio State vs Oregon - January 1, 2025, 5:00 PM ET")
        Schedule(date='January 1, 2025', time='5:00 PM ET')
    """
    region = _search_region(line)
    return Schedule(
        date=_first_match(DATE_PATTERNS, region),
        time=_first_match(TIME_PATTERNS, region),
    )


__all__ = ["Schedule", "extract_schedule", "DATE_PATTERNS", "TIME_PATTERNS"]
