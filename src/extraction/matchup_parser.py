"""
Matchup Line Parser

Recognizes a single line as a head-to-head pairing and extracts both team
names with their optional seeds. Two forms are tried in order:

1. Parenthetical seeds: "(1) Duke vs (16) Mercer"
2. General form:        "#3 Baylor vs. #14 Colgate", "Chiefs at Bills", "A @ B"

Whether a line should be treated as a matchup at all (i.e. it sits under a
round header) is decided by the bracket assembler, not here.
"""

import re
from typing import Optional, Tuple, Pattern

from config.settings import settings
from src.extraction.models import Matchup


_TEAM = r"([A-Za-z0-9\s.\-']+?)"
_TEAM_GREEDY = r"([A-Za-z0-9\s.\-']+)"

MATCHUP_PATTERNS: Tuple[Pattern, ...] = (
    re.compile(
        rf"\((\d+)\)\s*{_TEAM}\s+(?:vs\.?|versus|v\.)\s+\((\d+)\)\s*{_TEAM_GREEDY}",
        re.IGNORECASE,
    ),
    re.compile(
        rf"(?:#?(\d+)\s+)?{_TEAM}\s+(?:vs\.?|versus|v\.|at|@)\s+(?:#?(\d+)\s+)?{_TEAM_GREEDY}",
        re.IGNORECASE,
    ),
)

# "Oregon - January 1" -> "Oregon"
_SCHEDULE_SUFFIX = re.compile(r"\s+[-–—]\s+.*$")
_LEADING_LIST_MARKER = re.compile(r"^(?:[*#\-:\s]+|\d+\.\s+)+")
_TRAILING_PUNCTUATION = re.compile(r"[*#\-:]+$")


def clean_team_name(raw: str) -> str:
    """Trim a captured name and drop list markers and trailing punctuation."""
    name = _SCHEDULE_SUFFIX.sub("", raw.strip())
    name = _LEADING_LIST_MARKER.sub("", name)
    name = _TRAILING_PUNCTUATION.sub("", name.strip())
    return name.strip()


def is_valid_team_name(name: str, max_length: Optional[int] = None) -> bool:
    """Team names must be longer than one character and at most max_length."""
    limit = max_length if max_length is not None else settings.MAX_TEAM_NAME_LENGTH
    return 1 < len(name) <= limit


def _to_seed(value: Optional[str]) -> Optional[int]:
    return int(value) if value else None


def parse_matchup_line(line: str, max_length: Optional[int] = None) -> Optional[Matchup]:
    """
    Parse a line into a Matchup.

    Only the first pattern that matches is considered; if its names fail
    validation the line yields nothing.

    Args:
        line: Single line of text
        max_length: Longest accepted team name (defaults to settings)

    Returns:
        Matchup without schedule information, or None

    Example:
        >>> parse_matchup_line("(2) Kentucky vs (15) Belmont")
        Matchup(team1='Kentucky', team2='Belmont', seed1=2, seed2=15, ...)
    """
    for pattern in MATCHUP_PATTERNS:
        match = pattern.search(line)
        if not match:
            continue

        seed1, team1, seed2, team2 = match.groups()
        team1 = clean_team_name(team1)
        team2 = clean_team_name(team2)

        if not (is_valid_team_name(team1, max_length) and is_valid_team_name(team2, max_length)):
            return None

        return Matchup(
            team1=team1,
            team2=team2,
            seed1=_to_seed(seed1),
            seed2=_to_seed(seed2),
        )

    return None


__all__ = ["MATCHUP_PATTERNS", "parse_matchup_line", "clean_team_name", "is_valid_team_name"]
