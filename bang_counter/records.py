"""Pydantic models for stored video records and playlist snapshots.

WHY: The analysis results are stored against a video record owned by the
persistence layer, and the workflows exchange those records as JSON.
Pydantic validates that JSON at the boundary (wrong types, negative
counts, unknown sources) instead of letting bad data reach the pipeline.

HOW: VideoRecord mirrors one row of the videos table; PlaylistItem is one
entry of an uploads-playlist snapshot. Both accept the snake_case field
names and the camelCase spellings used by the original store and the
YouTube API. load_store()/save_store() read and write the store file, a
JSON array of records keyed in memory by video_id.

RULES:
- Output JSON is always snake_case (model_dump(mode="json"))
- bang_count >= 0, bang timestamps >= 0
- Store order is preserved on load and save
- A missing store file is an empty store, not an error
- Python 3.9+ compatible (Optional/List from typing)
"""

from __future__ import annotations

import json
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Dict, List, Optional, Union

from pydantic import AliasChoices, BaseModel, Field

from bang_counter.core.ir import BangEvent


class VideoSource(str, Enum):
    """Which channel a record came from: uploaded videos or stream VODs."""

    video = "video"
    vod = "vod"


class BangEntry(BaseModel):
    """Stored form of a BangEvent."""

    timestamp: float = Field(ge=0, description="Offset into the video in seconds.")
    transcript: str = Field(description="Caption text around the mention.")

    @classmethod
    def from_event(cls, event: BangEvent) -> "BangEntry":
        return cls(timestamp=event.timestamp, transcript=event.transcript)

    def to_event(self) -> BangEvent:
        return BangEvent(timestamp=self.timestamp, transcript=self.transcript)


class VideoRecord(BaseModel):
    """One video or VOD with its keyword count and canonical mentions.

    RULES:
    - video_id is the opaque external (YouTube) id and the store key
    - bang_count is the whole-transcript occurrence total
    - bangs is the deduplicated, time-ordered mention list
    """

    video_id: str = Field(
        validation_alias=AliasChoices("video_id", "videoId"),
        description="External video identifier.",
    )
    title: str = Field(description="Video title.")
    published_at: datetime = Field(
        validation_alias=AliasChoices("published_at", "publishedAt"),
        description="Publish timestamp.",
    )
    source: VideoSource = Field(default=VideoSource.video, description="Source channel kind.")
    file_name: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("file_name", "fileName"),
        description="Caption file the record was built from, if known.",
    )
    bang_count: int = Field(
        default=0,
        ge=0,
        validation_alias=AliasChoices("bang_count", "bangCount"),
        description="Total keyword occurrences in the transcript.",
    )
    bangs: List[BangEntry] = Field(default_factory=list, description="Canonical mentions.")
    updated_at: Optional[datetime] = Field(
        default=None,
        validation_alias=AliasChoices("updated_at", "updatedAt"),
        description="Last time the bangs were rewritten.",
    )

    def events(self) -> List[BangEvent]:
        return [b.to_event() for b in self.bangs]

    def set_events(self, events: List[BangEvent]) -> None:
        self.bangs = [BangEntry.from_event(e) for e in events]


class PlaylistItem(BaseModel):
    """One uploads-playlist entry as captured by the caption fetcher."""

    video_id: str = Field(validation_alias=AliasChoices("video_id", "videoId"))
    title: str
    published_at: datetime = Field(validation_alias=AliasChoices("published_at", "publishedAt"))


VideoStore = Dict[str, VideoRecord]


def read_json_array(path: Path) -> list:
    with open(path, encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, list):
        raise ValueError("{} must contain a JSON array, got {}.".format(path, type(data).__name__))
    return data


def load_store(path: Union[str, Path]) -> VideoStore:
    """Load the record store; a missing file yields an empty store.

    Raises:
        ValueError: If the file is not a JSON array.
        pydantic.ValidationError: If any record is invalid.
    """
    path = Path(path)
    if not path.is_file():
        return {}
    store: VideoStore = {}
    for item in read_json_array(path):
        record = VideoRecord.model_validate(item)
        store[record.video_id] = record
    return store


def save_store(path: Union[str, Path], store: VideoStore) -> None:
    """Write the store as a UTF-8 JSON array with a trailing newline."""
    path = Path(path)
    data = [record.model_dump(mode="json") for record in store.values()]
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False)
        f.write("\n")


def load_playlist(path: Union[str, Path]) -> List[PlaylistItem]:
    """Load a playlist snapshot (JSON array of PlaylistItem)."""
    return [PlaylistItem.model_validate(item) for item in read_json_array(Path(path))]
