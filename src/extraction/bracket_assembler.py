"""
Bracket Assembler

Builds a Bracket from the free-form answer text returned for a
"find this tournament" request.

Strategy (ordered by reliability):
1. Line pass: round headers open rounds, matchup lines under an open
   round are appended with their schedule
2. Whole-text scan for loose "Team vs Team" phrases (single synthetic round)
3. Fixed placeholder round, so callers never receive an empty bracket

The line pass is an explicit two-state machine (NoRound | InRound). A round
that collects no matchups before the next header is dropped, never emitted.
"""

import re
from itertools import islice
from typing import List, Optional, Tuple, Union
from dataclasses import dataclass, replace

from config.logging_config import get_logger
from config.settings import settings
from src.extraction.datetime_extractor import extract_schedule
from src.extraction.matchup_parser import parse_matchup_line, is_valid_team_name
from src.extraction.models import Bracket, Matchup, Round
from src.extraction.round_classifier import classify_round_header

logger = get_logger(__name__)


FALLBACK_ROUND_NAME = "First Round"

PLACEHOLDER_MATCHUPS: Tuple[Matchup, ...] = (
    Matchup(team1="Team A", team2="Team B"),
    Matchup(team1="Team C", team2="Team D"),
)

_LOOSE_VERSUS = re.compile(
    r"([A-Za-z]+(?:[ \t]+[A-Za-z]+)*)\s+(?:vs\.?|versus|v\.)\s+([A-Za-z]+(?:[ \t]+[A-Za-z]+)*)",
    re.IGNORECASE,
)
_VERSUS_SEPARATOR = re.compile(r"\s+(?:vs\.?|versus|v\.)\s+", re.IGNORECASE)


# ============================================================================
# LINE PASS STATE
# ============================================================================

@dataclass(frozen=True)
class NoRound:
    """No round header seen yet; non-header lines are ignored."""


@dataclass(frozen=True)
class InRound:
    """A round is open and collecting matchups."""
    label: str
    matchups: Tuple[Matchup, ...] = ()

    def with_matchup(self, matchup: Matchup) -> "InRound":
        return InRound(self.label, self.matchups + (matchup,))

    def finalize(self) -> Optional[Round]:
        """The finished Round, or None when nothing was collected."""
        if not self.matchups:
            return None
        return Round(round_name=self.label, matchups=self.matchups)


LineState = Union[NoRound, InRound]


def step(state: LineState, line: str, emitted: List[Round]) -> LineState:
    """
    Advance the line-pass state machine by one non-empty line.

    Finished rounds are appended to emitted. Returns the next state.
    """
    label = classify_round_header(line)
    if label is not None:
        if isinstance(state, InRound):
            finished = state.finalize()
            if finished is not None:
                emitted.append(finished)
            else:
                logger.debug("Dropping empty round", round_name=state.label)
        return InRound(label)

    if isinstance(state, NoRound):
        return state

    matchup = parse_matchup_line(line)
    if matchup is None:
        return state

    schedule = extract_schedule(line)
    return state.with_matchup(replace(matchup, date=schedule.date, time=schedule.time))


def parse_rounds(content: str) -> List[Round]:
    """Primary line-by-line pass. May return an empty list."""
    emitted: List[Round] = []
    state: LineState = NoRound()

    for raw_line in content.split("\n"):
        line = raw_line.strip()
        if not line:
            continue
        state = step(state, line, emitted)

    if isinstance(state, InRound):
        finished = state.finalize()
        if finished is not None:
            emitted.append(finished)

    return emitted


# ============================================================================
# FALLBACKS
# ============================================================================

def parse_loose_matchups(content: str, limit: Optional[int] = None) -> List[Round]:
    """
    Whole-text scan for "Team vs Team" phrases.

    Looks at no more than `limit` hits (settings.FALLBACK_MATCHUP_LIMIT by
    default). Returns a single "First Round" or an empty list.
    """
    limit = limit if limit is not None else settings.FALLBACK_MATCHUP_LIMIT
    matchups: List[Matchup] = []

    for match in islice(_LOOSE_VERSUS.finditer(content), limit):
        parts = _VERSUS_SEPARATOR.split(match.group(0))
        if len(parts) < 2:
            continue
        team1, team2 = parts[0].strip(), parts[1].strip()
        if is_valid_team_name(team1) and is_valid_team_name(team2):
            matchups.append(Matchup(team1=team1, team2=team2))

    if not matchups:
        return []
    return [Round(round_name=FALLBACK_ROUND_NAME, matchups=tuple(matchups))]


def placeholder_rounds() -> List[Round]:
    return [Round(round_name=FALLBACK_ROUND_NAME, matchups=PLACEHOLDER_MATCHUPS)]


# ============================================================================
# PUBLIC API
# ============================================================================

def build_bracket(content: str, sport: str, tournament: str) -> Bracket:
    """
    Parse answer text into a Bracket.

    Never raises on malformed text: the worst case is the placeholder round.

    Args:
        content: Free-form answer text
        sport: Caller-supplied sport, passed through unchanged
        tournament: Caller-supplied tournament name, passed through unchanged

    Returns:
        Bracket with at least one round

    Example:
        >>> bracket = build_bracket("Round of 16\\n(1) Duke vs (16) Mercer", "Basketball", "NCAA")
        >>> bracket.rounds[0].matchups[0].seed2
        16
    """
    logger.debug("Parsing bracket", content_length=len(content))

    rounds = parse_rounds(content)
    strategy = "line_pass"

    if not rounds:
        rounds = parse_loose_matchups(content)
        strategy = "loose_versus"

    if not rounds:
        logger.info("No rounds parsed, using placeholder bracket", tournament=tournament)
        rounds = placeholder_rounds()
        strategy = "placeholder"

    bracket = Bracket(tournament=tournament, sport=sport, rounds=tuple(rounds))

    logger.info(
        "Parsed bracket",
        tournament=tournament,
        strategy=strategy,
        rounds=len(bracket.rounds),
        matchups=bracket.total_matchups(),
    )
    return bracket


__all__ = [
    "NoRound",
    "InRound",
    "step",
    "parse_rounds",
    "parse_loose_matchups",
    "placeholder_rounds",
    "build_bracket",
    "FALLBACK_ROUND_NAME",
    "PLACEHOLDER_MATCHUPS",
]
