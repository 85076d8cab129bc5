"""
Test that all imports work correctly.

This verifies the module structure is correct and that configuration and
logging initialize without any answer service credentials.
"""

import pytest

from config.logging_config import get_logger, log_stage
from config.settings import Settings, settings


def test_config_imports():
    assert settings.PERPLEXITY_MODEL
    assert get_logger(__name__) is not None


def test_extraction_imports():
    from src.extraction import (
        Bracket,
        Citation,
        Matchup,
        Recommendation,
        Round,
        build_bracket,
        extract_recommendation,
        format_research,
    )

    assert callable(build_bracket)
    assert callable(extract_recommendation)
    assert callable(format_research)
    assert {Bracket, Citation, Matchup, Recommendation, Round}


def test_research_imports():
    from src.research import research_matchup, research_tournament, ServiceAnswer

    assert callable(research_matchup)
    assert callable(research_tournament)
    assert ServiceAnswer(content="").citations == ()


def test_mask_sensitive():
    masked = Settings(PERPLEXITY_API_KEY="pplx-1234567890abcdef").mask_sensitive("PERPLEXITY_API_KEY")
    assert masked == "pplx-12345...cdef"
    assert Settings(PERPLEXITY_API_KEY="short").mask_sensitive("PERPLEXITY_API_KEY") == "***"


def test_extraction_defaults():
    defaults = Settings()
    assert defaults.MAX_TEAM_NAME_LENGTH == 50
    assert defaults.FALLBACK_MATCHUP_LIMIT == 16
    assert defaults.DEFAULT_CONFIDENCE == 70


def test_log_stage_reraises():
    logger = get_logger("tests.log_stage")
    with pytest.raises(ValueError):
        with log_stage(logger, "failing_stage"):
            raise ValueError("boom")
