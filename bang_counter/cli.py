"""Command-line interface for the bang counter.

WHY: The pipeline runs from cron jobs and by hand: scanning one caption
file while tuning the keyword, ingesting a freshly downloaded batch,
repairing the stored mentions, importing the legacy JSON files. One
entry point with subcommands covers all four.

HOW: argparse with a subparser per workflow. Global flags override the
.env configuration. Logging goes to stderr via logging.basicConfig;
``scan`` prints its JSON report to stdout so it can be piped.

RULES:
- scan FILE                 → JSON report on stdout
- ingest --playlist --captions-dir --source [--store]
- repair [--store] [--dry-run]
- import LEGACY_JSON --source [--store]
- Exit code 0 on success, 1 on configuration or input errors
- Errors are printed as "Error: <message>" on stderr
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from pydantic import ValidationError

from bang_counter import __version__
from bang_counter.config import BangConfig, ConfigError, load_config, log_level, store_path
from bang_counter.core.pipeline import analyze_captions
from bang_counter.records import VideoSource, load_playlist, load_store, save_store
from bang_counter.workflows import import_legacy, ingest_videos, repair_records

logger = logging.getLogger(__name__)


def _cmd_scan(args: argparse.Namespace, config: BangConfig) -> None:
    document = Path(args.file).read_text(encoding="utf-8", errors="replace")
    report = analyze_captions(document, config)
    logger.info(
        "%s: %d cues, %d %ss, %d distinct",
        args.file, report.cue_count, report.bang_count, config.keyword, len(report.bangs),
    )
    json.dump(report.to_dict(), sys.stdout, indent=2, ensure_ascii=False)
    sys.stdout.write("\n")


def _cmd_ingest(args: argparse.Namespace, config: BangConfig) -> None:
    items = load_playlist(args.playlist)
    store = load_store(args.store)
    summary = ingest_videos(items, args.captions_dir, VideoSource(args.source), store, config)
    save_store(args.store, store)
    logger.info(
        "Ingest complete: %d processed, %d already stored, %d without captions",
        summary.processed, summary.skipped_existing, summary.without_captions,
    )


def _cmd_repair(args: argparse.Namespace, config: BangConfig) -> None:
    store = load_store(args.store)
    summary = repair_records(store, config, dry_run=args.dry_run)
    if not args.dry_run and summary.records_changed:
        save_store(args.store, store)

    logger.info("--- Summary ---")
    logger.info("Processed %d videos", summary.records_changed)
    logger.info("Total bangs before: %d", summary.bangs_before)
    logger.info("Total bangs after: %d", summary.bangs_after)
    logger.info("Duplicates removed: %d", summary.duplicates_removed)
    if args.dry_run:
        logger.info("Dry run: store not modified")


def _cmd_import(args: argparse.Namespace, config: BangConfig) -> None:
    store = load_store(args.store)
    count = import_legacy(args.legacy_file, VideoSource(args.source), store)
    if count:
        save_store(args.store, store)


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the CLI.

    WHY: Separating parser construction from main() lets tests inspect
    defaults and subcommands without running a workflow.
    """
    parser = argparse.ArgumentParser(
        prog="bang_counter",
        description="Count and deduplicate keyword mentions in caption tracks.",
    )
    parser.add_argument("--version", action="version", version="%(prog)s " + __version__)
    parser.add_argument(
        "--keyword",
        default=None,
        help="Keyword stem to match (default: BANG_KEYWORD or 'bang').",
    )
    parser.add_argument(
        "--window",
        type=float,
        default=None,
        help="Dedup time window in seconds (default: 5).",
    )
    parser.add_argument(
        "--threshold",
        type=float,
        default=None,
        help="Word-overlap ratio that must be exceeded to merge (default: 0.5).",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: BANG_LOG_LEVEL or INFO).",
    )

    sub = parser.add_subparsers(dest="command", required=True)

    scan = sub.add_parser("scan", help="Analyse one caption file and print a JSON report.")
    scan.add_argument("file", help="Path to a .vtt or .srt caption file.")
    scan.set_defaults(handler=_cmd_scan)

    sources = [s.value for s in VideoSource]

    ingest = sub.add_parser("ingest", help="Analyse captions for videos not yet stored.")
    ingest.add_argument("--playlist", required=True, help="Playlist snapshot JSON file.")
    ingest.add_argument("--captions-dir", required=True, help="Directory of downloaded captions.")
    ingest.add_argument("--source", required=True, choices=sources, help="Channel kind.")
    ingest.add_argument("--store", default=store_path(), help="Video store JSON (default: %(default)s).")
    ingest.set_defaults(handler=_cmd_ingest)

    repair = sub.add_parser("repair", help="Re-clean and deduplicate stored mentions.")
    repair.add_argument("--store", default=store_path(), help="Video store JSON (default: %(default)s).")
    repair.add_argument("--dry-run", action="store_true", help="Report changes without writing.")
    repair.set_defaults(handler=_cmd_repair)

    legacy = sub.add_parser("import", help="Import records from a legacy counts JSON file.")
    legacy.add_argument("legacy_file", help="Legacy videos_with_counts.json style file.")
    legacy.add_argument("--source", required=True, choices=sources, help="Channel kind.")
    legacy.add_argument("--store", default=store_path(), help="Video store JSON (default: %(default)s).")
    legacy.set_defaults(handler=_cmd_import)

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for ``python -m bang_counter`` and the console script.

    RULES:
    - argv=None means use sys.argv (normal CLI invocation)
    - Explicit argv is for testing
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=args.log_level or log_level(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        config = load_config(
            keyword=args.keyword,
            dedup_window_seconds=args.window,
            overlap_threshold=args.threshold,
        )
        args.handler(args, config)
    except (ConfigError, ValidationError, ValueError, OSError) as e:
        print("Error: {}".format(e), file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
