"""Subtitle track parser for WebVTT and SRT style documents.

WHY: Captions arrive as a single document string (yt-dlp writes
``<video_id>.en.vtt``). Keyword detection needs per-cue start offsets and
clean text, not the raw track with its headers, cue numbers, and markup.

HOW: One streaming pass over the document's lines. A timing line
(``HH:MM:SS.mmm -->`` or ``HH:MM:SS,mmm -->``) flushes the pending cue and
opens a new one; text lines accumulate into the pending cue; end of input
flushes the last one. Accumulated text goes through sanitize() on flush.

RULES:
- Offsets are whole seconds: H*3600 + M*60 + S, milliseconds discarded
- Numeric cue identifiers and lines starting with "WEBVTT" are skipped
- Lines before the first timing line (Kind:, Language:) are ignored
- Cues whose sanitized text is empty are dropped
- Unrecognized lines are cue text; the parser never raises
- Line endings are handled by str.splitlines() (\\n, \\r\\n, \\r)
"""

from __future__ import annotations

import re
from typing import List, Optional

from bang_counter.core.ir import Cue
from bang_counter.core.sanitizer import sanitize

TIMING_RE = re.compile(r"(\d{2}):(\d{2}):(\d{2})[.,](\d{3})\s*-->")
CUE_ID_RE = re.compile(r"^\d+$")
HEADER_TOKEN = "WEBVTT"


def parse_subtitles(document: str) -> List[Cue]:
    """Parse a caption document into an ordered list of cues.

    Args:
        document: The full subtitle track as one string.

    Returns:
        Cues in document order. Empty or unparseable input yields [].
    """
    cues: List[Cue] = []
    current_start: Optional[int] = None
    buffer: List[str] = []

    for line in document.splitlines():
        timing = TIMING_RE.search(line)
        if timing:
            _flush(cues, current_start, buffer)
            hours, minutes, seconds = (int(g) for g in timing.groups()[:3])
            current_start = hours * 3600 + minutes * 60 + seconds
            buffer = []
            continue

        stripped = line.strip()
        if current_start is None or not stripped:
            continue
        if CUE_ID_RE.match(stripped) or stripped.startswith(HEADER_TOKEN):
            continue
        buffer.append(stripped)

    _flush(cues, current_start, buffer)
    return cues


def _flush(cues: List[Cue], start: Optional[int], buffer: List[str]) -> None:
    """Append the pending cue if it has a start and non-empty clean text."""
    if start is None or not buffer:
        return
    text = sanitize(" ".join(buffer))
    if text:
        cues.append(Cue(start_s=start, text=text))
