"""Cue text sanitizer: strips caption markup and decodes entities.

WHY: Auto-generated WebVTT cues carry word-level timing tags
(``<00:04:33.759>``), ``<c>`` styling spans, and HTML entities. Left in
place they break keyword matching and make stored transcripts unreadable.

HOW: A fixed sequence of regex substitutions and literal replacements.
Tags are removed before entities are decoded, so a decoded ``&lt;``
can never be mistaken for the start of a tag.

RULES:
- Step order: inline timing tags, <c>/</c>, any other tag, entities,
  whitespace collapse, trim
- Each entity is decoded exactly once, in ENTITY_REPLACEMENTS order
- Empty input returns an empty string; no input raises
"""

import re
from typing import List, Tuple

INLINE_TIMING_RE = re.compile(r"<\d{2}:\d{2}:\d{2}\.\d{3}>")
CUE_STYLE_RE = re.compile(r"</?c>")
TAG_RE = re.compile(r"<[^>]+>")
WHITESPACE_RE = re.compile(r"\s+")

ENTITY_REPLACEMENTS: List[Tuple[str, str]] = [
    ("&gt;", ">"),
    ("&lt;", "<"),
    ("&amp;", "&"),
    ("&quot;", '"'),
    ("&#39;", "'"),
    ("&nbsp;", " "),
]


def sanitize(raw: str) -> str:
    """Return cue text with markup removed and whitespace normalized.

    Args:
        raw: Cue text as it appears in the caption document, possibly
             spanning several joined lines.

    Returns:
        Clean single-line text, e.g. ``"Hello&nbsp;world  <c>foo</c>"``
        becomes ``"Hello world foo"``.
    """
    if not raw:
        return ""

    text = INLINE_TIMING_RE.sub("", raw)
    text = CUE_STYLE_RE.sub("", text)
    text = TAG_RE.sub("", text)

    for entity, literal in ENTITY_REPLACEMENTS:
        text = text.replace(entity, literal)

    # \s covers U+00A0 for str patterns
    text = WHITESPACE_RE.sub(" ", text)
    return text.strip()
