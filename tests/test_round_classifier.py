"""Tests for round header recognition.

File under test: src/extraction/round_classifier.py
"""

import pytest

from src.extraction.round_classifier import classify_round_header, clean_round_label


class TestClassifyRoundHeader:

    @pytest.mark.parametrize("line", [
        "First Round",
        "Round of 32",
        "Sweet Sixteen",
        "Sweet 16",
        "Elite Eight",
        "Final Four",
        "National Championship",
        "Semifinals",
        "Quarterfinal",
        "Wild Card Weekend",
        "Divisional Round",
        "Conference Finals",
        "NBA Finals",
        "Super Bowl LIX",
        "Opening Round",
        "Eastern Conference",
        "Western Conference",
        "2025 NHL Playoffs",
    ])
    def test_known_stage_names(self, line):
        assert classify_round_header(line) == line

    def test_case_insensitive(self):
        assert classify_round_header("ELITE EIGHT") == "ELITE EIGHT"

    def test_markdown_heading_with_ordinal(self):
        assert classify_round_header("### 1. **Round of 16**") == "Round of 16"

    def test_bullet_and_bold(self):
        assert classify_round_header("- **Elite Eight**") == "Elite Eight"

    @pytest.mark.parametrize("line", ["Duke vs Mercer", "Injury report", "Tip-off is at 7 PM"])
    def test_non_headers(self, line):
        assert classify_round_header(line) is None


class TestCleanRoundLabel:

    def test_strips_leading_markup_and_emphasis(self):
        assert clean_round_label(":: *Quarterfinals* ") == "Quarterfinals"

    def test_keeps_inner_text(self):
        assert clean_round_label("Sweet 16 - East Region") == "Sweet 16 - East Region"
