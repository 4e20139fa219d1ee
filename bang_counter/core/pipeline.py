"""Shared caption analysis used by every workflow.

WHY: Ingestion and the later repair pass used to carry their own copies
of the sanitize/parse/dedup logic, and the copies drifted. Both now call
the functions in this module, so a fix lands everywhere at once.

HOW: analyze_captions() is the ingestion path (document → report).
clean_bang_events() is the repair path (stored events → cleaned events).
extract_bang_events() is the shared middle step.

RULES:
- bang_count is counted over all cue texts joined with single spaces
- Only cues with at least one keyword match become events
- Repair re-sanitizes stored transcripts before deduplicating
"""

from __future__ import annotations

from typing import Iterable, List, Optional

from bang_counter.config import BangConfig
from bang_counter.core.dedup import deduplicate
from bang_counter.core.ir import BangEvent, BangReport, Cue
from bang_counter.core.matcher import KeywordMatcher
from bang_counter.core.parser import parse_subtitles
from bang_counter.core.sanitizer import sanitize


def extract_bang_events(
    cues: Iterable[Cue],
    config: BangConfig,
    matcher: Optional[KeywordMatcher] = None,
) -> List[BangEvent]:
    """Turn matching cues into deduplicated BangEvents.

    Args:
        cues: Parsed cues in document order.
        config: Keyword and dedup settings.
        matcher: Pre-built matcher; built from ``config`` when omitted.

    Returns:
        Deduplicated events, ascending by timestamp.
    """
    if matcher is None:
        matcher = KeywordMatcher.from_config(config)
    hits = [
        BangEvent(timestamp=cue.start_s, transcript=cue.text)
        for cue in cues
        if matcher.has_match(cue.text)
    ]
    return deduplicate(hits, config.dedup_window_seconds, config.overlap_threshold)


def analyze_captions(document: str, config: BangConfig) -> BangReport:
    """Analyse one caption document into a count and canonical events.

    WHY: This is the whole per-video ingestion computation. The workflow
    only has to find the document and store the report.

    HOW: Parse cues, count keyword words over the joined transcript, then
    extract and deduplicate per-cue hits.
    """
    matcher = KeywordMatcher.from_config(config)
    cues = parse_subtitles(document)
    full_text = " ".join(cue.text for cue in cues)
    return BangReport(
        bang_count=matcher.count_occurrences(full_text),
        bangs=extract_bang_events(cues, config, matcher),
        cue_count=len(cues),
    )


def clean_bang_events(events: Iterable[BangEvent], config: BangConfig) -> List[BangEvent]:
    """Re-sanitize stored transcripts and deduplicate them again.

    Used by the repair workflow on events that were stored before the
    current sanitizer and deduplicator existed.
    """
    cleaned = [BangEvent(e.timestamp, sanitize(e.transcript)) for e in events]
    return deduplicate(cleaned, config.dedup_window_seconds, config.overlap_threshold)
