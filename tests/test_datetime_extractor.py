"""Tests for schedule extraction from matchup lines.

File under test: src/extraction/datetime_extractor.py
"""

from src.extraction.datetime_extractor import Schedule, extract_schedule


class TestExtractSchedule:

    def test_full_month_date_and_time_with_timezone(self):
        schedule = extract_schedule("Ohio State vs Oregon - January 1, 2025, 5:00 PM ET")
        assert schedule.date == "January 1, 2025"
        assert schedule.time == "5:00 PM ET"

    def test_abbreviated_month_and_bare_hour(self):
        schedule = extract_schedule("Chiefs at Bills – Jan. 12, 8 PM ET")
        assert schedule.date == "Jan. 12"
        assert schedule.time == "8 PM ET"

    def test_numeric_date_only(self):
        schedule = extract_schedule("Final - 3/21/2025")
        assert schedule == Schedule(date="3/21/2025", time=None)

    def test_time_only(self):
        schedule = extract_schedule("Game 3 tips at 7:30 pm")
        assert schedule.date is None
        assert schedule.time == "7:30 pm"

    def test_neither(self):
        assert extract_schedule("Duke vs Mercer") == Schedule()

    def test_whole_line_searched_without_separator(self):
        assert extract_schedule("Duke vs Mercer March 21").date == "March 21"

    def test_text_after_separator_is_preferred(self):
        """A numeric pair before the dash is ignored when the tail has a date."""
        schedule = extract_schedule("Game 1/2 vs Team - March 5")
        assert schedule.date == "March 5"

    def test_date_range(self):
        assert extract_schedule("Regional - March 20-21").date == "March 20-21"

    def test_em_dash_separator(self):
        schedule = extract_schedule("Lakers vs Celtics — June 4, 9:00 PM")
        assert schedule.date == "June 4"
        assert schedule.time == "9:00 PM"
