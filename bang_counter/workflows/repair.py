"""Repair workflow: re-clean and re-deduplicate stored mentions.

WHY: Records ingested by older versions still hold raw cue markup and
rolling-caption duplicates. Re-fetching every caption track is slow, so
this pass fixes the stored events in place using the current sanitizer
and deduplicator.

HOW: For each record with bangs, run clean_bang_events() and compare the
result with what is stored. Only changed records are rewritten.

RULES:
- Changed means the cleaned events differ from the stored ones in any
  way: count, order, timestamp or transcript
- Changed records get updated_at = now (UTC)
- bang_count is never touched: it counts the whole transcript, which
  the stored events alone cannot reproduce
- dry_run computes the same summary without modifying the store
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone

from bang_counter.config import BangConfig
from bang_counter.core.pipeline import clean_bang_events
from bang_counter.records import VideoStore

logger = logging.getLogger(__name__)


@dataclass
class RepairSummary:
    """Counts reported at the end of a repair run."""

    records_changed: int = 0
    bangs_before: int = 0
    bangs_after: int = 0

    @property
    def duplicates_removed(self) -> int:
        return self.bangs_before - self.bangs_after


def repair_records(store: VideoStore, config: BangConfig, dry_run: bool = False) -> RepairSummary:
    """Clean and deduplicate the stored bangs of every record.

    Args:
        store: In-memory store, updated in place unless dry_run.
        config: Keyword and dedup settings.
        dry_run: Report what would change without writing.

    Returns:
        A RepairSummary over all records that have bangs.
    """
    summary = RepairSummary()
    logger.info("Found %d videos to check", len(store))

    for record in store.values():
        if not record.bangs:
            continue

        before = record.events()
        after = clean_bang_events(before, config)
        summary.bangs_before += len(before)
        summary.bangs_after += len(after)

        if before == after:
            continue

        summary.records_changed += 1
        removed = len(before) - len(after)
        if removed > 0:
            logger.info("Cleaned: %s (removed %d duplicates)", record.title, removed)
        else:
            logger.debug("Cleaned: %s (events rewritten)", record.title)

        if not dry_run:
            record.set_events(after)
            record.updated_at = datetime.now(timezone.utc)

    return summary
