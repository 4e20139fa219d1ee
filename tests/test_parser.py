"""Unit tests for the subtitle track parser.

WHY: Cue offsets become the timestamps users click in the scroller, and
the parser runs over whatever yt-dlp happened to download. It has to get
offsets right for well-formed tracks and never crash on broken ones.

HOW: Tests parse small WebVTT and SRT documents, line-ending variants,
and malformed tracks, checking the emitted Cue list exactly.
"""

from bang_counter.core.ir import Cue
from bang_counter.core.parser import parse_subtitles


class TestWellFormedTracks:
    def test_two_cue_webvtt(self):
        document = (
            "WEBVTT\n"
            "\n"
            "00:00:01.000 --> 00:00:03.000\n"
            "Hello bang\n"
            "\n"
            "00:00:10.000 --> 00:00:12.000\n"
            "Another line\n"
        )
        assert parse_subtitles(document) == [
            Cue(start_s=1, text="Hello bang"),
            Cue(start_s=10, text="Another line"),
        ]

    def test_srt_with_cue_numbers_and_multiline_text(self, sample_srt):
        assert parse_subtitles(sample_srt) == [
            Cue(start_s=1, text="Hello there"),
            Cue(start_s=12, text="Big bang theory"),
        ]

    def test_rolling_auto_captions(self, sample_vtt):
        cues = parse_subtitles(sample_vtt)
        assert [c.start_s for c in cues] == [1, 3, 3, 6, 6, 90]
        assert cues[0].text == "we are live"
        assert cues[2].text == "we are live bang oh let's go"
        assert cues[4].text == "bang oh let's go we got this"
        assert cues[5].text == "that was a BANGER & a half"

    def test_header_metadata_ignored(self, sample_vtt):
        texts = " ".join(c.text for c in parse_subtitles(sample_vtt))
        assert "Kind:" not in texts
        assert "WEBVTT" not in texts


class TestOffsets:
    def test_milliseconds_discarded(self):
        cues = parse_subtitles("00:01:02.999 --> 00:01:04.000\nhi\n")
        assert cues == [Cue(start_s=62, text="hi")]

    def test_hours_counted(self):
        cues = parse_subtitles("01:00:00,000 --> 01:00:01,000\nhi\n")
        assert cues == [Cue(start_s=3600, text="hi")]


class TestLineEndings:
    def test_crlf(self):
        document = "WEBVTT\r\n\r\n00:00:05.000 --> 00:00:06.000\r\nbang\r\n"
        assert parse_subtitles(document) == [Cue(start_s=5, text="bang")]

    def test_bare_cr(self):
        document = "00:00:05.000 --> 00:00:06.000\rbang\r"
        assert parse_subtitles(document) == [Cue(start_s=5, text="bang")]


class TestMalformedInput:
    def test_empty_document(self):
        assert parse_subtitles("") == []

    def test_text_without_timing_lines(self):
        assert parse_subtitles("just some text\nmore text\n") == []

    def test_unrecognized_line_is_cue_text(self):
        document = "00:00:01.000 --> 00:00:02.000\nhello\ngarbage --> stuff\n"
        assert parse_subtitles(document) == [Cue(start_s=1, text="hello garbage --> stuff")]

    def test_bad_timing_line_treated_as_text(self):
        document = "00:00:01.000 --> 00:00:02.000\nhello\n0:00:03.000 --> 0:00:04.000\nworld\n"
        cues = parse_subtitles(document)
        assert cues == [Cue(start_s=1, text="hello 0:00:03.000 --> 0:00:04.000 world")]

    def test_markup_only_cue_dropped(self):
        document = (
            "00:00:01.000 --> 00:00:02.000\n<c></c>\n\n"
            "00:00:03.000 --> 00:00:04.000\nbang\n"
        )
        assert parse_subtitles(document) == [Cue(start_s=3, text="bang")]

    def test_empty_cue_dropped(self):
        document = "00:00:01.000 --> 00:00:02.000\n\n00:00:03.000 --> 00:00:04.000\nbang\n"
        assert parse_subtitles(document) == [Cue(start_s=3, text="bang")]

    def test_truncated_track(self):
        document = "WEBVTT\n\n00:00:01.000 --> 00:00:02.000\nfirst\n\n00:00:04.000 --> "
        assert parse_subtitles(document) == [Cue(start_s=1, text="first")]

    def test_numeric_line_skipped(self):
        document = "00:00:01.000 --> 00:00:02.000\n42\nbang\n"
        assert parse_subtitles(document) == [Cue(start_s=1, text="bang")]

    def test_no_state_between_calls(self):
        first = parse_subtitles("00:00:01.000 --> 00:00:02.000\nleftover")
        second = parse_subtitles("orphan text\n")
        assert first == [Cue(start_s=1, text="leftover")]
        assert second == []
