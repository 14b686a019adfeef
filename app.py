"""Score a JEE Main response sheet from the command line.

    python app.py response.html --keys answer_keys.json
    python app.py https://cdn3.digialm.com/...html --keys answer_keys.json --json
"""
import argparse
import json
import logging
import sys
from pathlib import Path

from jee_score import AnswerKeyStore, ScoreError, format_report, score_document
from jee_score.config import Settings
from jee_score.fetch import fetch_document


def read_source(source: str, settings: Settings) -> bytes:
    if source.startswith(("http://", "https://")):
        return fetch_document(source, timeout=settings.fetch_timeout, user_agent=settings.fetch_user_agent)
    return Path(source).read_bytes()


def main(argv=None) -> int:
    settings = Settings.from_env()
    parser = argparse.ArgumentParser(description="Estimate a JEE Main score from a response sheet")
    parser.add_argument("source", help="response sheet file or URL")
    parser.add_argument("--keys", default=settings.answer_keys_path, help="answer keys JSON file")
    parser.add_argument("--json", action="store_true", help="print the report as JSON")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    if not args.keys:
        parser.error("--keys is required when ANSWER_KEYS_PATH is not set")

    try:
        store = AnswerKeyStore.from_json(args.keys)
        document = read_source(args.source, settings)
        scored = score_document(document, store, settings.build_shift_rules())
    except ScoreError as e:
        print(f"Error: {e.user_message} ({e})", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.json:
        payload = scored.report.model_dump()
        payload["exam_id"] = scored.exam_id
        payload["unattempted_count"] = scored.report.unattempted_count
        print(json.dumps(payload, indent=2))
    else:
        print(format_report(scored.sheet.general_info, scored.report))
    return 0


if __name__ == "__main__":
    sys.exit(main())
