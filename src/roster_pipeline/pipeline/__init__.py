"""
Pipeline Package - Orchestration and View State.

Components:
    - RecordSet: Immutable snapshot of a page's records
    - ViewState: Query, filters, sort and page of a list view
    - RecordPipeline: Runs filter -> search -> sort -> paginate
    - ListViewSession: Owns the view state of one mounted page

Design Principles:
    - All dependencies injected via constructor
    - Synchronous and side-effect free apart from logging/metrics
    - Record sets are built by explicit factories, never cached globally
"""

from roster_pipeline.pipeline.record_pipeline import RecordPipeline, build_stages
from roster_pipeline.pipeline.record_set import RecordSet
from roster_pipeline.pipeline.session import ListViewSession
from roster_pipeline.pipeline.view_state import ViewState

__all__ = [
    "ListViewSession",
    "RecordPipeline",
    "RecordSet",
    "ViewState",
    "build_stages",
]
