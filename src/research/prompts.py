"""
Answer Service Prompts

The matchup prompt asks for the trailing PREDICTION block that
src.extraction.recommendation reads; the tournament prompt asks for the
"Round Name" + "Team A vs Team B - Date, Time" layout the bracket
assembler parses best.
"""

from src.research.schemas import MatchupRequest, TournamentRequest


SYSTEM_PROMPT = (
    "You are a sports research assistant. Provide accurate, well-sourced "
    "information about sports tournaments, teams, and matchups. Be concise "
    "but comprehensive."
)


def build_tournament_prompt(request: TournamentRequest) -> str:
    """Prompt asking for the current bracket of a tournament."""
    return (
        f"Find the current bracket/lineup for the {request.tournament} {request.sport} tournament. "
        "Search for the latest official bracket announcements, matchups, seeds, and participating teams. "
        "List each round and the matchups within each round. For each matchup, include the scheduled "
        "date and time if available. Format: Round Name followed by matchups in "
        '"Team A vs Team B - Date, Time" format '
        '(e.g., "Ohio State vs Oregon - January 1, 2025, 5:00 PM ET").'
    )


def build_matchup_prompt(request: MatchupRequest) -> str:
    """Prompt asking for matchup research ending in a PREDICTION block."""
    context = ""
    if request.sport and request.tournament:
        context = f" in the {request.tournament} {request.sport}"

    return f"""Research the matchup between {request.team1} and {request.team2}{context}. Provide:
1) Recent performance stats and records for both teams
2) Head-to-head history (recent games if any)
3) Key player injuries or availability issues
4) Expert predictions and betting lines if available
5) Recent news affecting either team

After your analysis, you MUST provide a prediction in exactly this format at the end:

PREDICTION:
Winner: [exact team name - must be either "{request.team1}" or "{request.team2}"]
Confidence: [number 1-100]
Rationale: [one sentence explaining your pick]

Base your prediction on the data you found. Be decisive."""


__all__ = ["SYSTEM_PROMPT", "build_tournament_prompt", "build_matchup_prompt"]
