"""Tests for the shared analysis pipeline.

WHY: analyze_captions() is the whole per-video ingestion computation and
clean_bang_events() the whole repair computation. These tests pin the
end-to-end result for a realistic rolling auto-caption track.
"""

from bang_counter.config import BangConfig
from bang_counter.core.ir import BangEvent, Cue
from bang_counter.core.pipeline import analyze_captions, clean_bang_events, extract_bang_events


class TestAnalyzeCaptions:
    def test_rolling_captions(self, sample_vtt, default_config):
        report = analyze_captions(sample_vtt, default_config)
        assert report.cue_count == 6
        # counted over the joined transcript, so rolling repeats count
        assert report.bang_count == 4
        assert report.bangs == [
            BangEvent(3, "we are live bang oh let's go"),
            BangEvent(90, "that was a BANGER & a half"),
        ]

    def test_srt(self, sample_srt, default_config):
        report = analyze_captions(sample_srt, default_config)
        assert report.bang_count == 1
        assert report.bangs == [BangEvent(12, "Big bang theory")]

    def test_empty_document(self, default_config):
        report = analyze_captions("", default_config)
        assert report.bang_count == 0
        assert report.bangs == []
        assert report.cue_count == 0

    def test_other_keyword(self, sample_vtt):
        report = analyze_captions(sample_vtt, BangConfig(keyword="live"))
        assert report.bang_count == 3
        assert report.bangs == [BangEvent(1, "we are live bang oh let's go")]

    def test_report_dict(self, sample_srt, default_config):
        assert analyze_captions(sample_srt, default_config).to_dict() == {
            "bang_count": 1,
            "cue_count": 2,
            "bangs": [{"timestamp": 12, "transcript": "Big bang theory"}],
        }


class TestExtractBangEvents:
    def test_only_matching_cues(self, default_config):
        cues = [Cue(1, "hello"), Cue(20, "bang"), Cue(40, "nothing")]
        assert extract_bang_events(cues, default_config) == [BangEvent(20, "bang")]

    def test_uses_config_window(self):
        cues = [Cue(0, "bang"), Cue(8, "bang")]
        assert len(extract_bang_events(cues, BangConfig(dedup_window_seconds=5))) == 2
        assert len(extract_bang_events(cues, BangConfig(dedup_window_seconds=10))) == 1


class TestCleanBangEvents:
    def test_resanitizes_then_deduplicates(self, default_config):
        stored = [
            BangEvent(11, "bang oh"),
            BangEvent(10, "bang<00:00:10.500><c> oh</c>"),
        ]
        assert clean_bang_events(stored, default_config) == [BangEvent(10, "bang oh")]

    def test_clean_events_unchanged(self, default_config):
        stored = [BangEvent(10, "bang"), BangEvent(60, "bang again")]
        assert clean_bang_events(stored, default_config) == stored
