"""
Bracket Data Structures

Immutable value types produced by the extraction engine. Each exposes
to_dict() returning the JSON wire shape consumed by the display layer
(camelCase keys, optional fields omitted when absent).
"""

from typing import Any, Dict, Optional, Tuple
from dataclasses import dataclass


# ============================================================================
# BRACKET
# ============================================================================

@dataclass(frozen=True)
class Matchup:
    """
    Single head-to-head pairing.

    Attributes:
        team1: First team name (2-50 chars after trimming)
        team2: Second team name (2-50 chars after trimming)
        seed1: Optional tournament seed of team1
        seed2: Optional tournament seed of team2
        date: Optional scheduled date as written in the source text
        time: Optional scheduled time as written in the source text
        winner: Optional picked winner
    """
    team1: str
    team2: str
    seed1: Optional[int] = None
    seed2: Optional[int] = None
    date: Optional[str] = None
    time: Optional[str] = None
    winner: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization"""
        data: Dict[str, Any] = {"team1": self.team1, "team2": self.team2}
        for key in ("seed1", "seed2", "date", "time", "winner"):
            value = getattr(self, key)
            if value is not None:
                data[key] = value
        return data


@dataclass(frozen=True)
class Round:
    """One tournament stage holding its matchups in source order."""
    round_name: str
    matchups: Tuple[Matchup, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "roundName": self.round_name,
            "matchups": [m.to_dict() for m in self.matchups],
        }


@dataclass(frozen=True)
class Bracket:
    """
    Parsed tournament bracket.

    tournament and sport are the caller's values, never read from the text.

    Example:
        >>> bracket = build_bracket(text, "Basketball", "March Madness")
        >>> bracket.first_matchup().team1
        'Duke'
    """
    tournament: str
    sport: str
    rounds: Tuple[Round, ...] = ()

    def first_matchup(self) -> Optional[Matchup]:
        """First matchup of the first round, the wizard's starting point."""
        if not self.rounds or not self.rounds[0].matchups:
            return None
        return self.rounds[0].matchups[0]

    def total_matchups(self) -> int:
        return sum(len(r.matchups) for r in self.rounds)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "tournament": self.tournament,
            "sport": self.sport,
            "rounds": [r.to_dict() for r in self.rounds],
        }


# ============================================================================
# RESEARCH OUTPUT
# ============================================================================

@dataclass(frozen=True)
class Citation:
    """
    Numbered reference to a source URL.

    number always mirrors the URL's 1-based position in the input list.
    """
    number: int
    url: str
    source: Optional[str] = None
    title: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"number": self.number, "url": self.url}
        if self.source is not None:
            data["source"] = self.source
        if self.title is not None:
            data["title"] = self.title
        return data


@dataclass(frozen=True)
class Recommendation:
    """
    Confidence-scored winner pick.

    Attributes:
        winner: Canonical team name when it could be matched, else the cleaned raw pick
        confidence: Integer in [0, 100]
        rationale: One-sentence justification
    """
    winner: str
    confidence: int
    rationale: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "winner": self.winner,
            "confidence": self.confidence,
            "rationale": self.rationale,
        }


__all__ = ["Matchup", "Round", "Bracket", "Citation", "Recommendation"]
