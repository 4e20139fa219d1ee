"""Ingestion workflow: analyse captions for videos not yet in the store.

WHY: New uploads appear on the channel continuously. Each run should
pick up only the videos the store has not seen, analyse their captions,
and record the result, including videos that have no captions at all,
so they are not retried forever.

HOW: The captions directory is indexed once by yt-dlp naming convention
(``{id}.vtt``, ``{id}.en.vtt``, ``{id}.srt`` ...). For each playlist item
whose id is not in the store, the index gives its caption file. If one
exists, run analyze_captions(); otherwise store a zero-count record.

RULES:
- Existing video ids are skipped, never re-analysed (repair does that)
- Missing or unreadable captions produce bang_count=0 and no bangs
- file_name records which caption file was analysed
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, Optional, Tuple, Union

from bang_counter.config import BangConfig
from bang_counter.core.pipeline import analyze_captions
from bang_counter.records import PlaylistItem, VideoRecord, VideoSource, VideoStore

logger = logging.getLogger(__name__)

CAPTION_SUFFIXES = (".vtt", ".srt")


@dataclass
class IngestSummary:
    """Counts reported at the end of an ingestion run."""

    processed: int = 0
    skipped_existing: int = 0
    without_captions: int = 0
    total_bangs: int = 0


def _caption_rank(path: Path) -> Tuple[int, str]:
    return CAPTION_SUFFIXES.index(path.suffix.lower()), path.name


def index_caption_files(captions_dir: Union[str, Path]) -> Dict[str, Path]:
    """Map every video id in ``captions_dir`` to its preferred caption file.

    WHY: yt-dlp names subtitle files ``{id}.{lang}.vtt``; hand-exported
    tracks are usually ``{id}.vtt`` or ``{id}.srt``. A captions directory
    can hold thousands of tracks, so it is listed once per run.

    RULES:
    - The video id is the part of the file name before the first dot
    - Only .vtt and .srt files are recognized
    - With several candidates, .vtt wins over .srt, then alphabetical order
    - A missing directory yields an empty index
    """
    directory = Path(captions_dir)
    if not directory.is_dir():
        return {}

    index: Dict[str, Path] = {}
    for path in directory.iterdir():
        if not path.is_file() or path.suffix.lower() not in CAPTION_SUFFIXES:
            continue
        video_id = path.name.split(".", 1)[0]
        current = index.get(video_id)
        if current is None or _caption_rank(path) < _caption_rank(current):
            index[video_id] = path
    return index


def find_caption_file(captions_dir: Union[str, Path], video_id: str) -> Optional[Path]:
    """Locate the caption file for a single ``video_id``, or None."""
    return index_caption_files(captions_dir).get(video_id)


def _read_captions(path: Path) -> Optional[str]:
    try:
        return path.read_text(encoding="utf-8", errors="replace")
    except OSError:
        logger.warning("Failed to read caption file %s", path, exc_info=True)
        return None


def ingest_videos(
    items: Iterable[PlaylistItem],
    captions_dir: Union[str, Path],
    source: VideoSource,
    store: VideoStore,
    config: BangConfig,
) -> IngestSummary:
    """Analyse and store every playlist item that is not already stored.

    Args:
        items: Playlist snapshot entries (newest first or any order).
        captions_dir: Directory holding downloaded caption files.
        source: Channel kind recorded on new records.
        store: In-memory store, updated in place.
        config: Keyword and dedup settings.

    Returns:
        An IngestSummary with per-run counts.
    """
    summary = IngestSummary()
    new_items = []
    for item in items:
        if item.video_id in store:
            summary.skipped_existing += 1
        else:
            new_items.append(item)

    logger.info("Found %d new %s(s) to process", len(new_items), source.value)
    captions = index_caption_files(captions_dir) if new_items else {}

    for item in new_items:
        logger.info("Processing: %s", item.title)
        record = VideoRecord(
            video_id=item.video_id,
            title=item.title,
            published_at=item.published_at,
            source=source,
        )

        caption_path = captions.get(item.video_id)
        document = _read_captions(caption_path) if caption_path is not None else None

        if document is None:
            summary.without_captions += 1
            logger.info("  -> No captions available")
        else:
            report = analyze_captions(document, config)
            record.file_name = caption_path.name
            record.bang_count = report.bang_count
            record.set_events(report.bangs)
            summary.total_bangs += report.bang_count
            logger.info("  -> %d %ss (%d distinct)", report.bang_count, config.keyword, len(report.bangs))

        store[item.video_id] = record
        summary.processed += 1

    return summary
