"""Research boundary module"""
from .errors import (
    ResearchError,
    ResearchConfigurationError,
    ResearchServiceError,
    InvalidRequestError,
)
from .schemas import TournamentRequest, MatchupRequest, BracketResponse, MatchupResponse
from .client import ServiceAnswer, build_headers, build_chat_payload, parse_service_response
from .service import research_tournament, research_matchup

__all__ = [
    "ResearchError",
    "ResearchConfigurationError",
    "ResearchServiceError",
    "InvalidRequestError",
    "TournamentRequest",
    "MatchupRequest",
    "BracketResponse",
    "MatchupResponse",
    "ServiceAnswer",
    "build_headers",
    "build_chat_payload",
    "parse_service_response",
    "research_tournament",
    "research_matchup",
]
