"""Core caption analysis: IR dataclasses and the four pipeline stages.

WHY: The sanitize/parse/match/dedup logic is consumed by ingestion,
repair, and import workflows. Keeping one copy here means the workflows
cannot drift apart.

HOW: ir.py defines Cue, BangEvent and BangReport. sanitizer.py, parser.py,
matcher.py and dedup.py each implement one stage. pipeline.py composes
them into the operations the workflows call.

RULES:
- Every function in this package is pure and thread-safe
- No I/O and no logging here; workflows own both
"""
