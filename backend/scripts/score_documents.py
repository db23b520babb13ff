"""Score plain-text files with a sentiment executor and print the run as JSON.

Each file is one document; its file name is used as the document id. The id
travels unescaped in the form body, so names containing "&" or "=" are refused.

Usage:
  cd backend
  python3 scripts/score_documents.py reviews/*.txt --language en
  python3 scripts/score_documents.py a.txt b.txt --provider mock
  python3 scripts/score_documents.py reviews/*.txt --stop-after-failures 3 --debug
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

_BACKEND_ROOT = Path(__file__).resolve().parents[1]
if str(_BACKEND_ROOT) not in sys.path:
    sys.path.insert(0, str(_BACKEND_ROOT))

from semant.routers.analysis import to_response
from semant.services.analysis_service import AnalysisService, ProviderNotFoundError
from semant.services.executors import OutputFormat


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Score text documents with a sentiment provider.")
    parser.add_argument("files", nargs="+", type=Path, help="Text files, one document each.")
    parser.add_argument("--provider", default="bitext", help="Executor name (bitext, mock).")
    parser.add_argument("--language", default=None, help="Document language, defaults to DEFAULT_LANGUAGE.")
    parser.add_argument("--key", default=None, help="Service user, defaults to BITEXT_USER.")
    parser.add_argument("--secret", default=None, help="Service password, defaults to BITEXT_PASSWORD.")
    parser.add_argument("--debug", action="store_true", help="Log per-document retrieval time.")
    parser.add_argument(
        "--stop-after-failures",
        dest="stop_after_failures",
        type=int,
        default=None,
        help="Cancel the run once this many documents have failed.",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO if args.debug else logging.WARNING)

    names = [path.name for path in args.files]
    for name in names:
        if "&" in name or "=" in name:
            parser.error(f"file name cannot be used as a document id: {name}")
    if len(set(names)) != len(names):
        parser.error("file names must be unique")
    documents = [(path.name, path.read_text(encoding="utf-8")) for path in args.files]
    try:
        run = AnalysisService().run(
            documents,
            provider=args.provider,
            key=args.key,
            secret=args.secret,
            language=args.language,
            output_format=OutputFormat.XML,
            debug=args.debug,
            stop_after_failures=args.stop_after_failures,
        )
    except ProviderNotFoundError:
        print(f"Unknown provider: {args.provider}", file=sys.stderr)
        return 2

    print(json.dumps(to_response(run).model_dump(), indent=2, ensure_ascii=False))
    return 1 if run.summary.failed else 0


if __name__ == "__main__":
    raise SystemExit(main())
