"""
Parse a saved answer service response.

Reads either the JSON body returned by the answer service or a plain text
file, runs the extraction engine and prints the result as JSON.

Usage examples:
    python scripts/parse_response.py bracket response.json --sport Basketball --tournament "March Madness"
    python scripts/parse_response.py matchup response.json --team1 Duke --team2 Mercer
    python scripts/parse_response.py matchup answer.txt --team1 Duke --team2 Mercer --citation https://espn.com/a
"""

import sys
import json
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from config.logging_config import get_logger
from src.research.client import ServiceAnswer, parse_service_response
from src.research.errors import ResearchError
from src.research.service import research_matchup, research_tournament

logger = get_logger(__name__)


def load_answer(path: Path, citations) -> ServiceAnswer:
    """Load a JSON service body, or treat the file as plain answer text."""
    raw = path.read_text(encoding="utf-8")

    if path.suffix.lower() == ".json":
        answer = parse_service_response(200, json.loads(raw))
        if citations:
            answer = ServiceAnswer(answer.content, answer.citations + tuple(citations))
        return answer

    return ServiceAnswer(content=raw, citations=tuple(citations or ()))


def main():
    """Main entry point"""
    import argparse

    parser = argparse.ArgumentParser(
        description="Parse a saved tournament research answer",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    bracket_parser = subparsers.add_parser("bracket", help="Extract a tournament bracket")
    bracket_parser.add_argument("path", type=Path, help="Response JSON or answer text file")
    bracket_parser.add_argument("--sport", required=True)
    bracket_parser.add_argument("--tournament", required=True)

    matchup_parser = subparsers.add_parser("matchup", help="Extract matchup research and pick")
    matchup_parser.add_argument("path", type=Path, help="Response JSON or answer text file")
    matchup_parser.add_argument("--team1", required=True)
    matchup_parser.add_argument("--team2", required=True)
    matchup_parser.add_argument("--sport")
    matchup_parser.add_argument("--tournament")

    for sub in (bracket_parser, matchup_parser):
        sub.add_argument(
            "--citation",
            action="append",
            default=[],
            help="Citation URL (repeatable, in order)",
        )

    args = parser.parse_args()

    try:
        answer = load_answer(args.path, args.citation)

        if args.command == "bracket":
            response = research_tournament(
                {"sport": args.sport, "tournament": args.tournament},
                answer,
            )
        else:
            response = research_matchup(
                {
                    "team1": args.team1,
                    "team2": args.team2,
                    "sport": args.sport,
                    "tournament": args.tournament,
                },
                answer,
            )
    except (OSError, json.JSONDecodeError, ResearchError) as e:
        logger.error("Could not parse response", path=str(args.path), error=str(e))
        print(f"❌ {e}", file=sys.stderr)
        return 1

    print(json.dumps(response.to_dict(), indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
