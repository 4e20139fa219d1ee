"""Intermediate representation dataclasses for caption analysis.

WHY: The parser, matcher, and deduplicator hand data to each other and
finally to the persistence layer. A small set of typed, immutable
records keeps those hand-offs explicit.

HOW: Three dataclasses:
  Cue        : one timed subtitle entry after sanitization
  BangEvent  : one canonical keyword mention (the persisted unit)
  BangReport : everything the analysis of one caption document yields

RULES:
- All times are whole or fractional seconds from the start of the video
- Cue and BangEvent are frozen; the deduplicator builds new instances
- BangEvent.to_dict() uses the stored keys "timestamp" and "transcript"
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass(frozen=True)
class Cue:
    """A single subtitle cue: start offset plus sanitized text.

    RULES:
    - start_s: H*3600 + M*60 + S of the cue timing line, never negative
    - text: output of sanitize(), never empty
    """

    start_s: int
    text: str


@dataclass(frozen=True)
class BangEvent:
    """A keyword mention at a point in the video.

    WHY: This is the record stored against each video and served to the
    heatmap and scroller views, so its dict shape is a stable contract.
    """

    timestamp: float
    transcript: str

    def to_dict(self) -> Dict[str, Any]:
        return {"timestamp": self.timestamp, "transcript": self.transcript}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BangEvent":
        return cls(timestamp=data["timestamp"], transcript=data["transcript"])


@dataclass
class BangReport:
    """Result of analysing one caption document.

    RULES:
    - bang_count: keyword occurrences over the whole joined transcript,
      so it can exceed len(bangs) when one cue says the keyword twice
    - bangs: deduplicated events, ascending by timestamp
    - cue_count: number of non-empty cues the parser produced
    """

    bang_count: int
    bangs: List[BangEvent] = field(default_factory=list)
    cue_count: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "bang_count": self.bang_count,
            "cue_count": self.cue_count,
            "bangs": [b.to_dict() for b in self.bangs],
        }
