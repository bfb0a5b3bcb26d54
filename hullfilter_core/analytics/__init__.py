"""
Analytics Layer
===============

Bounded Context: Overlap accounting across a set of hulls.

Responsibilities:
- Accumulate pairwise overlap ratios
- Keep/drop decisions against a threshold
- Immutable run reports
- Detection (bounding box) adapter
"""

from hullfilter_core.analytics.overlap import (
    DEFAULT_OVERLAP_THRESHOLD,
    HullDecision,
    OverlapFilter,
    OverlapReport,
    filter_hulls,
    overlap_ratio,
)
from hullfilter_core.analytics.detections import DetectionHullFilter

__all__ = [
    "DEFAULT_OVERLAP_THRESHOLD",
    "HullDecision",
    "OverlapFilter",
    "OverlapReport",
    "filter_hulls",
    "overlap_ratio",
    "DetectionHullFilter",
]
