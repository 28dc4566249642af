"""Ingest pipeline components."""
from __future__ import annotations

from .ingest import IngestPipeline, IngestProgress, ProgressCallback, build_events

__all__ = ["IngestPipeline", "IngestProgress", "ProgressCallback", "build_events"]
