"""Extraction module"""
from .models import Bracket, Round, Matchup, Citation, Recommendation
from .bracket_assembler import build_bracket
from .recommendation import extract_recommendation
from .citations import FormattedResearch, format_research

__all__ = [
    "Bracket",
    "Round",
    "Matchup",
    "Citation",
    "Recommendation",
    "FormattedResearch",
    "build_bracket",
    "extract_recommendation",
    "format_research",
]
