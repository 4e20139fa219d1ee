"""Workflows that apply the core pipeline to a record store.

WHY: The same analysis runs in three situations: first-time ingestion
of new uploads, a repair pass over already stored mentions, and a
one-off import of records from the legacy JSON files. Each is a thin
loop over the store; all analysis lives in bang_counter.core.

RULES:
- Workflows mutate the in-memory store; the caller decides when to save
- Progress is reported via module loggers, never print()
"""

from bang_counter.workflows.ingest import (
    IngestSummary,
    find_caption_file,
    index_caption_files,
    ingest_videos,
)
from bang_counter.workflows.legacy import import_legacy
from bang_counter.workflows.repair import RepairSummary, repair_records

__all__ = [
    "IngestSummary",
    "RepairSummary",
    "find_caption_file",
    "import_legacy",
    "index_caption_files",
    "ingest_videos",
    "repair_records",
]
