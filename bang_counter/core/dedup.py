"""Deduplication of cue-level keyword hits into canonical events.

WHY: Rolling auto-captions repeat the same speech across consecutive
cues ("bang oh let's go" → "oh let's go we got" → ...). Every cue that
repeats the keyword produces a hit, so one spoken "bang" turns into
several events a second or two apart. This module collapses them.

HOW: Candidates are sorted by timestamp (stable) and compared against the
output built so far. A candidate is a duplicate of an existing entry when
the two are within the window and either transcript contains the other
(case-folded) or their word overlap exceeds the threshold. A duplicate
never becomes a new entry; it only replaces the existing transcript when
it is strictly longer. The existing timestamp is always kept.

RULES:
- Proximity: abs(candidate.timestamp - existing.timestamp) <= window_s
- Containment: either case-folded transcript is a substring of the other
- Overlap: count of the candidate's words that appear in the existing
  entry's words, divided by the smaller word count; must be > threshold
- First matching existing entry wins; scanning stops there
- Inputs are never mutated; output is ascending by timestamp

Known behaviour: matches are checked against the evolving output list,
so a three-way chain where the first and third fragments only overlap
through the second can resolve differently depending on which fragment
extended the kept entry. This is accepted.
"""

from __future__ import annotations

from typing import Iterable, List

from bang_counter.config import DEFAULT_DEDUP_WINDOW_SECONDS, DEFAULT_OVERLAP_THRESHOLD
from bang_counter.core.ir import BangEvent


def overlap_ratio(a: str, b: str) -> float:
    """Word overlap between two transcripts relative to the shorter one.

    Words are the whitespace-split, case-folded tokens. Each word of ``a``
    that is a member of ``b``'s words counts once per occurrence in ``a``.
    """
    words_a = a.casefold().split()
    words_b = b.casefold().split()
    shorter = min(len(words_a), len(words_b))
    if shorter == 0:
        return 0.0
    members = set(words_b)
    common = sum(1 for w in words_a if w in members)
    return common / shorter


def is_duplicate(
    candidate: BangEvent,
    existing: BangEvent,
    window_s: float = DEFAULT_DEDUP_WINDOW_SECONDS,
    overlap_threshold: float = DEFAULT_OVERLAP_THRESHOLD,
) -> bool:
    """True if ``candidate`` refers to the same utterance as ``existing``."""
    if abs(candidate.timestamp - existing.timestamp) > window_s:
        return False

    cand_folded = candidate.transcript.casefold()
    exist_folded = existing.transcript.casefold()
    if cand_folded in exist_folded or exist_folded in cand_folded:
        return True

    return overlap_ratio(candidate.transcript, existing.transcript) > overlap_threshold


def deduplicate(
    events: Iterable[BangEvent],
    window_s: float = DEFAULT_DEDUP_WINDOW_SECONDS,
    overlap_threshold: float = DEFAULT_OVERLAP_THRESHOLD,
) -> List[BangEvent]:
    """Collapse near-duplicate keyword events into canonical ones.

    Comparison is O(n²) in the number of events, which is fine for the
    handful of mentions a single video produces.

    Args:
        events: Keyword events in any order.
        window_s: Maximum time distance (inclusive) for two events to be
                  considered the same utterance.
        overlap_threshold: Word-overlap ratio that must be exceeded.

    Returns:
        A new list of events, ascending by timestamp, in which no later
        event duplicates an earlier kept one.
    """
    ordered = sorted(events, key=lambda e: e.timestamp)
    result: List[BangEvent] = []

    for candidate in ordered:
        for index, existing in enumerate(result):
            if is_duplicate(candidate, existing, window_s, overlap_threshold):
                if len(candidate.transcript) > len(existing.transcript):
                    result[index] = BangEvent(existing.timestamp, candidate.transcript)
                break
        else:
            result.append(candidate)

    return result
