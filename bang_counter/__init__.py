"""Bang Counter: keyword mention extraction from closed-caption tracks.

WHY: Auto-generated captions repeat rolling fragments of the same speech
across consecutive cues, so a naive keyword search over a caption track
reports the same spoken "bang" three or four times. This package turns a
raw caption document into a total keyword count and a deduplicated,
time-ordered list of canonical mentions per video.

HOW: Four-stage pipeline: sanitize cue text, parse the track into cues,
match the keyword per cue, collapse near-duplicate hits. The stages live
in ``bang_counter.core`` and are shared by the ingest, repair, and legacy
import workflows.

RULES:
- Core functions are pure: no I/O, no logging, no state across calls
- Malformed caption input degrades to partial output, never an exception
- Invalid configuration fails fast with ConfigError
"""

__version__ = "0.1.0"
