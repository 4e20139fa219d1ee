"""Legacy import workflow: load records from the old per-channel JSON files.

WHY: Counts from before the current pipeline live in
``videos_with_counts.json`` / ``vods_with_counts.json``. Importing them
keeps the history without re-analysing every video.

HOW: Each legacy entry is validated as a VideoRecord (the model accepts
the legacy ``videoId``/``publishedAt``/``bang_count`` keys) and upserted.

RULES:
- New ids are inserted with the given source
- Existing ids get title, bang_count and bangs overwritten and
  updated_at = now (UTC); published_at, source and file_name are kept
- A missing legacy file imports nothing and is not an error
- Entries that are not JSON objects raise ValueError
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Union

from bang_counter.records import VideoRecord, VideoSource, VideoStore, read_json_array

logger = logging.getLogger(__name__)


def import_legacy(path: Union[str, Path], source: VideoSource, store: VideoStore) -> int:
    """Upsert legacy records from ``path`` into ``store``.

    Returns:
        Number of records imported (inserted or updated).
    """
    path = Path(path)
    if not path.is_file():
        logger.info("Legacy file not found at: %s", path)
        return 0

    logger.info("Importing %ss from: %s", source.value, path)
    entries = read_json_array(path)
    logger.info("Found %d %ss to import", len(entries), source.value)

    for index, entry in enumerate(entries):
        if not isinstance(entry, dict):
            raise ValueError(
                "Legacy entry {} in {} must be a JSON object, got {}.".format(
                    index, path, type(entry).__name__
                )
            )
        payload = dict(entry, source=source.value)
        # legacy files use null where nothing was counted
        for key, empty in (("bangs", []), ("bang_count", 0)):
            if payload.get(key) is None:
                payload[key] = empty
        incoming = VideoRecord.model_validate(payload)
        existing = store.get(incoming.video_id)
        if existing is None:
            store[incoming.video_id] = incoming
            continue
        existing.title = incoming.title
        existing.bang_count = incoming.bang_count
        existing.bangs = incoming.bangs
        existing.updated_at = datetime.now(timezone.utc)

    logger.info("Imported %d %ss", len(entries), source.value)
    return len(entries)
