"""Command-line front end.

    emoji-search search "smiling face" --limit 5
    emoji-search search "people hugging each other" --best
    emoji-search serve --port 8000
"""

import argparse
import json
import logging
import sys

from pydantic import ValidationError

from .config import settings
from .data import load_dataset
from .engine.scoring.constants import DEFAULT_LIMIT
from .engine.search import search, search_best_matching
from .errors import EmojiSearchError
from .logging_config import setup_logging
from .models import Options

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="emoji-search", description="Search emojis by keyword")
    parser.add_argument("--log-level", default=settings.log_level)
    sub = parser.add_subparsers(dest="command", required=True)

    search_cmd = sub.add_parser("search", help="Rank emojis for a query")
    search_cmd.add_argument("query")
    search_cmd.add_argument("--limit", type=int, default=DEFAULT_LIMIT)
    search_cmd.add_argument("--best", action="store_true", help="Use best-matching search")
    search_cmd.add_argument("--data-dir", default=settings.data_dir)
    search_cmd.add_argument(
        "--recent", action="append", default=[], help="Recently searched query (repeatable)"
    )
    search_cmd.add_argument(
        "--options", type=json.loads, default=None, help="Options as a JSON object"
    )

    serve_cmd = sub.add_parser("serve", help="Run the HTTP server")
    serve_cmd.add_argument("--host", default="127.0.0.1")
    serve_cmd.add_argument("--port", type=int, default=8000)
    return parser


def run_search_command(args: argparse.Namespace) -> int:
    options = Options.model_validate(args.options or {})
    if args.recent:
        options = options.model_copy(update={"recently_searched": args.recent})

    dataset = load_dataset(args.data_dir)
    search_fn = search_best_matching if args.best else search
    results = search_fn(args.query, limit=args.limit, options=options, dataset=dataset)

    print(" ".join(results) if results else "(no matches)")
    return 0


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)

    if args.command == "serve":
        import uvicorn

        uvicorn.run("emoji_search.server:app", host=args.host, port=args.port)
        return 0

    try:
        return run_search_command(args)
    except EmojiSearchError as e:
        logger.error(str(e))
        return 1
    except ValidationError as e:
        logger.error(f"Invalid options: {e}")
        return 2


if __name__ == "__main__":
    sys.exit(main())
