"""
Request and Response Schemas

Pydantic models validate the caller's request payloads; responses are
plain dataclasses that serialize to the display layer's JSON shape.
"""

from typing import Any, Dict, Optional, Tuple
from dataclasses import dataclass

from pydantic import BaseModel, Field, ValidationError

from src.extraction.models import Bracket, Citation, Recommendation
from src.research.errors import InvalidRequestError


# ============================================================================
# REQUESTS
# ============================================================================

class TournamentRequest(BaseModel):
    """Find the bracket of a tournament."""
    sport: str = Field(..., min_length=1, description="Sport is required")
    tournament: str = Field(..., min_length=1, description="Tournament name is required")


class MatchupRequest(BaseModel):
    """Research a single matchup between two teams."""
    team1: str = Field(..., min_length=1, description="Team 1 is required")
    team2: str = Field(..., min_length=1, description="Team 2 is required")
    sport: Optional[str] = None
    tournament: Optional[str] = None


def _validate(model, payload: Dict[str, Any]):
    try:
        return model.model_validate(payload)
    except ValidationError as e:
        raise InvalidRequestError(str(e)) from e


def parse_tournament_request(payload: Dict[str, Any]) -> TournamentRequest:
    """Validate a raw payload, raising InvalidRequestError on failure."""
    return _validate(TournamentRequest, payload)


def parse_matchup_request(payload: Dict[str, Any]) -> MatchupRequest:
    """Validate a raw payload, raising InvalidRequestError on failure."""
    return _validate(MatchupRequest, payload)


# ============================================================================
# RESPONSES
# ============================================================================

@dataclass(frozen=True)
class BracketResponse:
    research: str
    bracket: Bracket

    def to_dict(self) -> Dict[str, Any]:
        return {"research": self.research, "bracket": self.bracket.to_dict()}


@dataclass(frozen=True)
class MatchupResponse:
    """
    Research markup, its citations and the optional winner pick.

    recommendation is omitted from the serialized form when absent.
    """
    research: str
    citations: Tuple[Citation, ...] = ()
    recommendation: Optional[Recommendation] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "research": self.research,
            "citations": [c.to_dict() for c in self.citations],
        }
        if self.recommendation is not None:
            data["recommendation"] = self.recommendation.to_dict()
        return data


__all__ = [
    "TournamentRequest",
    "MatchupRequest",
    "parse_tournament_request",
    "parse_matchup_request",
    "BracketResponse",
    "MatchupResponse",
]
