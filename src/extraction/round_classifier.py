"""
Round Header Classifier

Recognizes tournament-stage labels ("Round of 16", "**Elite Eight**",
"2. Quarterfinals") from a fixed vocabulary. The table is checked top-down
and the first hit wins; patterns overlap, so order is part of the contract.
"""

import re
from typing import Optional, Tuple, Pattern


ROUND_PATTERNS: Tuple[Pattern, ...] = tuple(
    re.compile(pattern, re.IGNORECASE)
    for pattern in (
        r"first\s*round",
        r"round\s*of\s*(\d+)",
        r"round\s*1",
        r"second\s*round",
        r"sweet\s*(?:16|sixteen)",
        r"elite\s*(?:8|eight)",
        r"final\s*four",
        r"championship",
        r"semifinals?",
        r"quarterfinals?",
        r"wild\s*card",
        r"divisional",
        r"conference\s*(?:finals?|semifinals?)",
        r"nba\s*finals?",
        r"super\s*bowl",
        r"opening\s*round",
        r"eastern\s*conference",
        r"western\s*conference",
        r"playoffs",
    )
)

_LEADING_MARKUP = re.compile(r"^[*#\-:\s]+")
_ORDINAL_PREFIX = re.compile(r"^\d+\.\s*")
_EMPHASIS = re.compile(r"[*#]+")


def clean_round_label(line: str) -> str:
    """Strip bullets, numbering and markdown emphasis from a header line."""
    label = _LEADING_MARKUP.sub("", line).strip()
    label = _ORDINAL_PREFIX.sub("", label)
    return _EMPHASIS.sub("", label).strip()


def classify_round_header(line: str) -> Optional[str]:
    """
    Return the cleaned round label if the line names a tournament stage.

    Example:
        >>> classify_round_header("### 1. **Round of 16**")
        'Round of 16'
        >>> classify_round_header("Duke vs Mercer") is None
        True
    """
    for pattern in ROUND_PATTERNS:
        if pattern.search(line):
            return clean_round_label(line)
    return None


__all__ = ["ROUND_PATTERNS", "classify_round_header", "clean_round_label"]
