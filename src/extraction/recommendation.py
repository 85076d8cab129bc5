"""
Recommendation Extractor

Derives a winner pick from matchup research text.

The answer service is asked to finish with a block like:

    PREDICTION:
    Winner: Duke
    Confidence: 85
    Rationale: Better depth.

When the block is missing, a weaker sentiment heuristic looks for a
"favored"-style phrase near one of the team names.
"""

import re
from typing import Optional

from config.logging_config import get_logger
from config.settings import settings
from src.extraction.models import Recommendation

logger = get_logger(__name__)


DEFAULT_RATIONALE = "Based on overall analysis of recent performance and matchup factors."
SENTIMENT_RATIONALE = "Based on expert analysis indicating this team is favored."

_PREDICTION_BLOCK = re.compile(r"PREDICTION:[\s\S]*?Winner:[ \t]*([^\n]*)", re.IGNORECASE)
_CONFIDENCE = re.compile(r"Confidence:[* \t]*(-?\d+)", re.IGNORECASE)
_RATIONALE = re.compile(r"Rationale:[ \t]*([^\n]*)", re.IGNORECASE)
_FAVORED = re.compile(
    r"favou?red|expected to win|likely to win|should win|projected winner",
    re.IGNORECASE,
)
_TRAILING_PUNCTUATION = re.compile(r"[*#\-:]+$")


def clamp_confidence(value: int) -> int:
    return min(100, max(0, value))


def clean_winner(raw: str) -> str:
    winner = raw.strip().replace("**", "")
    return _TRAILING_PUNCTUATION.sub("", winner).strip()


def normalize_winner(winner: str, team1: str, team2: str) -> str:
    """
    Map a free-text pick onto one of the two team names.

    Case-insensitive containment in either direction, team1 checked first.
    A pick matching neither team is returned unchanged.

    Note: "Ohio" matches both "Ohio" and "Ohio State"; the first team wins.
    """
    winner_lower = winner.lower()
    for team in (team1, team2):
        team_lower = team.lower()
        if team_lower in winner_lower or winner_lower in team_lower:
            return team
    return winner


def _from_prediction_block(content: str, team1: str, team2: str) -> Optional[Recommendation]:
    match = _PREDICTION_BLOCK.search(content)
    if not match:
        return None

    winner = clean_winner(match.group(1))
    if not winner:
        return None
    winner = normalize_winner(winner, team1, team2)

    # Confidence and rationale are read from the block onwards
    block = content[match.start():]

    confidence_match = _CONFIDENCE.search(block)
    if confidence_match:
        confidence = clamp_confidence(int(confidence_match.group(1)))
    else:
        confidence = settings.DEFAULT_CONFIDENCE

    rationale_match = _RATIONALE.search(block)
    rationale = DEFAULT_RATIONALE
    if rationale_match:
        rationale = rationale_match.group(1).replace("**", "").strip() or DEFAULT_RATIONALE

    return Recommendation(winner=winner, confidence=confidence, rationale=rationale)


def _from_sentiment(content: str, team1: str, team2: str) -> Optional[Recommendation]:
    match = _FAVORED.search(content)
    if not match:
        return None

    window = settings.SENTIMENT_WINDOW
    start = match.start()
    context = content[max(0, start - window):start + window].lower()

    for team in (team1, team2):
        if team.lower() in context:
            return Recommendation(
                winner=team,
                confidence=settings.SENTIMENT_CONFIDENCE,
                rationale=SENTIMENT_RATIONALE,
            )
    return None


def extract_recommendation(content: str, team1: str, team2: str) -> Optional[Recommendation]:
    """
    Extract a winner recommendation for team1 vs team2.

    Args:
        content: Matchup research text
        team1: Caller-supplied first team name
        team2: Caller-supplied second team name

    Returns:
        Recommendation, or None when neither the prediction block nor the
        sentiment heuristic produced a pick

    Example:
        >>> text = "PREDICTION:\\nWinner: Duke\\nConfidence: 85\\nRationale: Better depth."
        >>> extract_recommendation(text, "Duke", "Mercer")
        Recommendation(winner='Duke', confidence=85, rationale='Better depth.')
    """
    recommendation = _from_prediction_block(content, team1, team2)
    if recommendation is not None:
        logger.debug("Recommendation from prediction block", winner=recommendation.winner)
        return recommendation

    recommendation = _from_sentiment(content, team1, team2)
    if recommendation is not None:
        logger.debug("Recommendation from sentiment", winner=recommendation.winner)
    else:
        logger.debug("No recommendation found", team1=team1, team2=team2)
    return recommendation


__all__ = [
    "extract_recommendation",
    "normalize_winner",
    "clean_winner",
    "clamp_confidence",
    "DEFAULT_RATIONALE",
    "SENTIMENT_RATIONALE",
]
