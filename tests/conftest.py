"""Shared test fixtures for the bang_counter test suite.

WHY: Several test modules need the same caption documents: a rolling
auto-generated WebVTT track (the case deduplication exists for) and a
plain SRT track. Centralizing them keeps expected values consistent.

HOW: Pytest fixtures return the raw document strings, a default config,
and a clean environment with no BANG_* variables leaking in from a local
.env file.

RULES:
- SAMPLE_VTT mimics yt-dlp auto-caption output: header metadata, cue
  settings after the timing, inline word timing, <c> spans, and cues that
  repeat the previous cue's text.
- Expected analysis of SAMPLE_VTT with the default config:
    cues: 6, bang_count: 4
    bangs: [(3, "we are live bang oh let's go"),
            (90, "that was a BANGER & a half")]
"""

import pytest

from bang_counter.config import BangConfig

SAMPLE_VTT = """WEBVTT
Kind: captions
Language: en

00:00:01.000 --> 00:00:03.500 align:start position:0%

we<00:00:01.200><c> are</c><00:00:01.400><c> live</c>

00:00:03.500 --> 00:00:03.510 align:start position:0%
we are live


00:00:03.510 --> 00:00:06.000 align:start position:0%
we are live
bang<00:00:04.000><c> oh</c><00:00:04.300><c> let&#39;s</c><00:00:04.600><c> go</c>

00:00:06.000 --> 00:00:06.010 align:start position:0%
bang oh let's go


00:00:06.010 --> 00:00:09.000 align:start position:0%
bang oh let's go
we<00:00:06.500><c> got</c><00:00:07.000><c> this</c>

00:01:30.000 --> 00:01:32.000 align:start position:0%
that&nbsp;was a BANGER &amp; a half
"""

SAMPLE_SRT = """1
00:00:01,000 --> 00:00:02,000
Hello <i>there</i>

2
00:00:12,500 --> 00:00:14,000
Big bang
theory
"""


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Remove BANG_* variables so a developer's .env cannot change results."""
    for name in (
        "BANG_KEYWORD",
        "BANG_KEYWORD_PATTERN",
        "BANG_DEDUP_WINDOW_SECONDS",
        "BANG_OVERLAP_THRESHOLD",
        "BANG_STORE_PATH",
        "BANG_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def sample_vtt():
    """Rolling auto-caption WebVTT track with one repeated mention."""
    return SAMPLE_VTT


@pytest.fixture
def sample_srt():
    """Two-cue SRT track with an italic tag and a multi-line cue."""
    return SAMPLE_SRT


@pytest.fixture
def default_config():
    return BangConfig()
