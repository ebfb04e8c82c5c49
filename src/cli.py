from __future__ import annotations

import argparse
import logging
import sys
from typing import Iterable

from config.settings import Settings
from core.engine import build_summarizer
from core.report import RULE, print_report
from core.source import InputError, read_file, read_interactive

logger = logging.getLogger(__name__)


def _log_level(settings: Settings, verbose: bool) -> int:
    if verbose:
        return logging.DEBUG
    level = logging.getLevelName(settings.log_level)
    # getLevelName maps unknown names to "Level <name>"
    return level if isinstance(level, int) else logging.ERROR


def _configure_logging(settings: Settings, verbose: bool) -> None:
    logging.basicConfig(level=_log_level(settings, verbose), format="%(levelname)s: %(message)s", stream=sys.stderr)


def run(args: argparse.Namespace, settings: Settings) -> int:
    if args.filepath:
        text = read_file(args.filepath)
    else:
        text = read_interactive()

    if not text.strip():
        print("\nNo text provided. Exiting...")
        return 0

    print("\n" + RULE)
    print("PROCESSING...")
    print(RULE)

    summarizer = build_summarizer(settings, force_local=args.local)
    result = summarizer.summarize(text)
    logger.debug("summary produced by %s strategy", result.source)

    print_report(text, result)
    return 0


def main(argv: Iterable[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="summarize", description="Summarize text with an LLM or a local heuristic.")
    parser.add_argument("filepath", nargs="?", help="file to summarize; reads stdin until EOF when omitted")
    parser.add_argument("--local", action="store_true", help="never call the remote model")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging on stderr")

    args = parser.parse_args(argv)
    try:
        settings = Settings.load()
        _configure_logging(settings, args.verbose)
        return run(args, settings)
    except InputError as exc:
        print(str(exc), file=sys.stderr)
        return 1
    except Exception as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
