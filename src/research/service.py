"""
Research Service

Joins an answer from the research service with the extraction engine:

- research_tournament: bracket + research markup for a tournament request
- research_matchup: research markup, citations and winner pick for a matchup

Both accept the request as a validated model or a raw payload dict.
"""

from typing import Any, Dict, Union

from config.logging_config import get_logger, log_stage
from src.extraction.bracket_assembler import build_bracket
from src.extraction.citations import format_research
from src.extraction.recommendation import extract_recommendation
from src.research.client import ServiceAnswer
from src.research.schemas import (
    BracketResponse,
    MatchupRequest,
    MatchupResponse,
    TournamentRequest,
    parse_matchup_request,
    parse_tournament_request,
)

logger = get_logger(__name__)


def research_tournament(
    request: Union[TournamentRequest, Dict[str, Any]],
    answer: ServiceAnswer
) -> BracketResponse:
    """
    Build the bracket response for a tournament request.

    Raises:
        InvalidRequestError: If a raw payload fails validation
    """
    if not isinstance(request, TournamentRequest):
        request = parse_tournament_request(request)

    with log_stage(logger, "tournament_research", tournament=request.tournament):
        bracket = build_bracket(answer.content, request.sport, request.tournament)
        formatted = format_research(answer.content, answer.citations)

    return BracketResponse(research=formatted.research, bracket=bracket)


def research_matchup(
    request: Union[MatchupRequest, Dict[str, Any]],
    answer: ServiceAnswer
) -> MatchupResponse:
    """
    Build the matchup response: markup, citations and optional pick.

    Raises:
        InvalidRequestError: If a raw payload fails validation
    """
    if not isinstance(request, MatchupRequest):
        request = parse_matchup_request(request)

    with log_stage(logger, "matchup_research", team1=request.team1, team2=request.team2):
        formatted = format_research(answer.content, answer.citations)
        recommendation = extract_recommendation(answer.content, request.team1, request.team2)

    return MatchupResponse(
        research=formatted.research,
        citations=formatted.citations,
        recommendation=recommendation,
    )


__all__ = ["research_tournament", "research_matchup"]
