"""CLI entry point for the standings parser.

Provides ``main()`` as the entry point for the ``hbl-standings`` console
script, and ``run(args)`` which sets up logging, builds the config, parses
a saved page and writes the table as JSON.

Usage::

    hbl-standings tabelle.html                    # JSON table to stdout
    hbl-standings tabelle.html.gz --validate      # with model validation
    hbl-standings tabelle.txt --news magazin.html # table + filtered headlines
    hbl-standings tabelle.html --allow-list teams.txt --layout positional
"""

import argparse
import json
import logging
import sys
import time
from dataclasses import replace
from pathlib import Path

from standings.config import StandingsConfig, load_allow_list
from standings.corpus import load_corpus
from standings.exceptions import AllowListError, CorpusError
from standings.headlines import filter_headlines
from standings.logging_config import setup_logging
from standings.parser import StandingsParser
from standings.splitter import LAYOUTS
from standings.validation import check_rank_sequence, validate_batch

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the hbl-standings CLI."""
    parser = argparse.ArgumentParser(
        prog="hbl-standings",
        description="Extract the Handball-Bundesliga table from a saved results page",
    )
    parser.add_argument(
        "page",
        type=str,
        help="Saved results page (.html, .htm or plain text; .gz allowed)",
    )
    parser.add_argument(
        "--news",
        type=str,
        default=None,
        help="Saved news page to filter for league headlines",
    )
    parser.add_argument(
        "--news-limit",
        type=int,
        default=None,
        help="Maximum number of headlines (default: 5)",
    )
    parser.add_argument(
        "--allow-list",
        type=str,
        default=None,
        help="File with one team-name prefix per line (replaces the built-in list)",
    )
    parser.add_argument(
        "--team",
        action="append",
        default=[],
        help="Extra team-name prefix to accept (repeatable)",
    )
    parser.add_argument(
        "--layout",
        choices=LAYOUTS,
        default="typed",
        help="Statistic block layout (default: typed)",
    )
    parser.add_argument(
        "--validate",
        action="store_true",
        help="Validate rows and drop those failing shape checks",
    )
    parser.add_argument(
        "--data-dir",
        type=str,
        default="data",
        help="Data directory for logs (default: data)",
    )
    parser.add_argument(
        "--output",
        "-o",
        type=str,
        default=None,
        help="Write JSON here instead of stdout",
    )
    parser.add_argument(
        "--indent",
        type=int,
        default=2,
        help="JSON indent (default: 2)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Show DEBUG output on the console",
    )
    return parser


def build_config(args: argparse.Namespace) -> StandingsConfig:
    """Turn parsed arguments into a StandingsConfig.

    Raises:
        AllowListError: If ``--allow-list`` names an unreadable or empty file.
    """
    config = StandingsConfig(
        layout=args.layout,
        data_dir=args.data_dir,
        validate=args.validate,
        extra_prefixes=tuple(args.team),
    )
    if args.allow_list:
        config = replace(config, team_prefixes=load_allow_list(args.allow_list))
    if args.news_limit is not None:
        config = replace(config, news_limit=args.news_limit)
    return config


def _format_summary(results: dict, wall_time: float, log_file: str) -> str:
    """Format end-of-run results into a human-readable summary string."""
    lines = [
        "=" * 60,
        "Standings complete",
        "-" * 60,
        "Corpus:      {} lines".format(results.get("lines", 0)),
        "Rows:        {} parsed, {} rejected by validation".format(
            results.get("rows", 0),
            results.get("rejected", 0),
        ),
    ]
    if "news" in results:
        lines.append("News:        {} headlines".format(results["news"]))
    for problem in results.get("problems", []):
        lines.append(f"Problem:     {problem}")
    lines += [
        "-" * 60,
        f"Wall time:   {wall_time:.2f}s",
        f"Log file:    {log_file}",
        "=" * 60,
    ]
    return "\n".join(lines)


def run(args: argparse.Namespace) -> int:
    """Parse the page named in ``args`` and write JSON. Returns the exit code."""
    log_file = setup_logging(
        data_dir=args.data_dir,
        console_level=logging.DEBUG if args.verbose else logging.INFO,
    )
    start_time = time.monotonic()
    results: dict = {}

    try:
        config = build_config(args)
        logger.info(
            "Starting hbl-standings: page=%s, layout=%s, teams=%d, validate=%s, log=%s",
            args.page, config.layout, len(config.allow_list), config.validate, log_file,
        )

        lines = load_corpus(args.page)
        results["lines"] = len(lines)

        parser = StandingsParser(config.allow_list, layout=config.layout)
        records = parser.parse(lines)

        if config.validate:
            rows, rejected = validate_batch(records)
            results["rejected"] = rejected
        else:
            rows = [r.to_dict() for r in records]
        results["rows"] = len(rows)

        problems = check_rank_sequence(rows)
        for problem in problems:
            logger.warning("Table check: %s", problem)
        results["problems"] = problems

        if not rows:
            logger.warning("No standings rows found in %s (data temporarily unavailable?)", args.page)

        payload: dict = {"standings": rows}

        if args.news:
            news_lines = load_corpus(args.news)
            news = filter_headlines(news_lines, config.news_keywords, config.news_limit)
            payload["news"] = [n.to_dict() for n in news]
            results["news"] = len(news)

        text = json.dumps(payload, ensure_ascii=False, indent=args.indent)
        if args.output:
            Path(args.output).write_text(text + "\n", encoding="utf-8")
            logger.info("Wrote %d rows to %s", len(rows), args.output)
        else:
            sys.stdout.write(text + "\n")

    except (CorpusError, AllowListError) as e:
        logger.error("%s", e)
        return 1
    finally:
        wall_time = time.monotonic() - start_time
        logger.info("\n%s", _format_summary(results, wall_time, str(log_file)))

    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point for the hbl-standings console script."""
    args = build_parser().parse_args(argv)
    return run(args)


if __name__ == "__main__":
    sys.exit(main())
