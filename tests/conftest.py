"""Shared pytest setup for the bracket research engine test suite."""

import os
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent.resolve()
sys.path.insert(0, str(project_root))

# Settings are built on import; pin a non-development environment so logs render as JSON
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest


@pytest.fixture
def round_of_16_text():
    return "Round of 16\n(1) Duke vs (16) Mercer\n(2) Kentucky vs (15) Belmont"


@pytest.fixture
def matchup_research_text():
    return (
        "**Duke** enters on a 9-game win streak [1]. Mercer has struggled on the road [2].\n"
        "\n"
        "Injuries: none reported.\n"
        "\n"
        "PREDICTION:\n"
        "Winner: Duke\n"
        "Confidence: 85\n"
        "Rationale: Better depth."
    )


@pytest.fixture
def citation_urls():
    return ["https://www.espn.com/a", "https://si.com/b"]
