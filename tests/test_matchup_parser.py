"""Tests for matchup line recognition.

File under test: src/extraction/matchup_parser.py
"""

import pytest

from src.extraction.matchup_parser import clean_team_name, parse_matchup_line
from src.extraction.models import Matchup


class TestParenthesizedSeeds:

    def test_seeds_and_names(self):
        assert parse_matchup_line("(1) Duke vs (16) Mercer") == Matchup(
            team1="Duke", team2="Mercer", seed1=1, seed2=16
        )

    def test_versus_separator(self):
        matchup = parse_matchup_line("(4) North Carolina versus (13) Vermont")
        assert (matchup.team1, matchup.team2) == ("North Carolina", "Vermont")
        assert (matchup.seed1, matchup.seed2) == (4, 13)


class TestGeneralForm:

    def test_hash_seeds(self):
        matchup = parse_matchup_line("#3 Baylor vs. #14 Colgate")
        assert matchup == Matchup(team1="Baylor", team2="Colgate", seed1=3, seed2=14)

    def test_no_seeds(self):
        matchup = parse_matchup_line("Kansas City Chiefs at Buffalo Bills")
        assert matchup == Matchup(team1="Kansas City Chiefs", team2="Buffalo Bills")

    def test_at_sign_separator(self):
        matchup = parse_matchup_line("Lakers @ Celtics")
        assert (matchup.team1, matchup.team2) == ("Lakers", "Celtics")

    def test_schedule_suffix_is_not_part_of_team_name(self):
        matchup = parse_matchup_line("Ohio State vs Oregon - January 1, 2025, 5:00 PM ET")
        assert (matchup.team1, matchup.team2) == ("Ohio State", "Oregon")

    def test_bullet_is_not_part_of_team_name(self):
        matchup = parse_matchup_line("- Duke vs Mercer")
        assert (matchup.team1, matchup.team2) == ("Duke", "Mercer")

    def test_numbered_item_is_not_part_of_team_name(self):
        matchup = parse_matchup_line("1. Gonzaga vs McNeese")
        assert (matchup.team1, matchup.team2) == ("Gonzaga", "McNeese")

    def test_apostrophe_and_period_in_names(self):
        matchup = parse_matchup_line("Saint Mary's vs St. John's")
        assert (matchup.team1, matchup.team2) == ("Saint Mary's", "St. John's")


class TestRejection:

    def test_name_longer_than_fifty_characters(self):
        assert parse_matchup_line("A" * 51 + " vs Mercer") is None

    def test_name_of_exactly_fifty_characters_is_accepted(self):
        matchup = parse_matchup_line("A" * 50 + " vs Mercer")
        assert matchup.team1 == "A" * 50

    def test_single_character_name(self):
        assert parse_matchup_line("A vs Mercer") is None
        assert parse_matchup_line("Duke vs B") is None

    @pytest.mark.parametrize("line", ["Duke Blue Devils", "Duke vs", "", "Round of 64 begins Thursday"])
    def test_non_matchup_lines(self, line):
        assert parse_matchup_line(line) is None

    def test_custom_length_limit(self):
        assert parse_matchup_line("Duke vs Mercer", max_length=4) is None


class TestCleanTeamName:

    def test_trailing_punctuation(self):
        assert clean_team_name(" Duke**: ") == "Duke"

    def test_hyphenated_name_kept(self):
        assert clean_team_name("Arkansas-Pine Bluff") == "Arkansas-Pine Bluff"
