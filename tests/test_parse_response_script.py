"""Tests for the saved-response command line script.

File under test: scripts/parse_response.py
"""

import json
import os
import subprocess
import sys
from pathlib import Path

project_root = Path(__file__).parent.parent.resolve()
SCRIPT = project_root / "scripts" / "parse_response.py"


def _run(*args):
    # INFO in development renders console logs; stdout must still hold only JSON
    env = {**os.environ, "LOG_LEVEL": "INFO", "ENVIRONMENT": "development"}
    return subprocess.run(
        [sys.executable, str(SCRIPT), *args],
        capture_output=True,
        text=True,
        cwd=project_root,
        env=env,
    )


class TestParseResponseScript:

    def test_bracket_prints_json_only(self, tmp_path):
        path = tmp_path / "answer.txt"
        path.write_text("Round of 16\n(1) Duke vs (16) Mercer\n", encoding="utf-8")

        result = _run("bracket", str(path), "--sport", "Basketball", "--tournament", "NCAA")

        assert result.returncode == 0
        data = json.loads(result.stdout)
        assert data["bracket"]["rounds"][0]["matchups"][0]["team1"] == "Duke"
        assert "Parsed bracket" in result.stderr

    def test_matchup_from_service_body(self, tmp_path, matchup_research_text, citation_urls):
        path = tmp_path / "response.json"
        body = {
            "choices": [{"message": {"content": matchup_research_text}}],
            "citations": citation_urls,
        }
        path.write_text(json.dumps(body), encoding="utf-8")

        result = _run("matchup", str(path), "--team1", "Duke", "--team2", "Mercer")

        assert result.returncode == 0
        data = json.loads(result.stdout)
        assert data["recommendation"]["winner"] == "Duke"
        assert [c["number"] for c in data["citations"]] == [1, 2]

    def test_missing_file_exits_with_error(self, tmp_path):
        result = _run("bracket", str(tmp_path / "missing.txt"), "--sport", "Football", "--tournament", "CFP")

        assert result.returncode == 1
        assert result.stdout == ""
