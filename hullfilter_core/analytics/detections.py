"""
Detection Overlap Module
========================

Applies the overlap filter to supervision detections.

Design:
- All methods are static (no instance state)
- One 4-vertex hull per xyxy box
- Returns masks / filtered copies, never mutates the input detections
"""

from typing import List, Optional

import numpy as np
import supervision as sv

from hullfilter_core.analytics.overlap import OverlapFilter
from hullfilter_core.geometry.hull import ConvexHull
from hullfilter_core.geometry.primitives import Point


class DetectionHullFilter:
    """
    Stateless bridge between sv.Detections and the overlap filter.

    Hull ids are the detections' tracker_id when tracked, otherwise the
    row index, so untracked detections never share an id.

    Usage:
        survivors = DetectionHullFilter.filter(detections)
    """

    @staticmethod
    def to_hulls(detections: sv.Detections) -> List[ConvexHull]:
        """
        Convert detection boxes to convex hulls.

        Args:
            detections: Detections with xyxy boxes

        Returns:
            One hull per detection, in detection order
        """
        if detections.tracker_id is not None:
            hull_ids = [int(tracker_id) for tracker_id in detections.tracker_id]
        else:
            hull_ids = list(range(len(detections)))

        hulls = []
        for hull_id, (x1, y1, x2, y2) in zip(hull_ids, detections.xyxy):
            corners = (
                Point(float(x1), float(y1)),
                Point(float(x2), float(y1)),
                Point(float(x2), float(y2)),
                Point(float(x1), float(y2)),
            )
            hulls.append(ConvexHull(corners, hull_id=hull_id))
        return hulls

    @staticmethod
    def keep_mask(
        detections: sv.Detections,
        overlap_filter: Optional[OverlapFilter] = None
    ) -> np.ndarray:
        """
        Boolean mask of detections that survive the overlap filter.

        Args:
            detections: Detections to test
            overlap_filter: Configured filter (default threshold 0.5)

        Returns:
            Boolean mask of shape (N,) where True = kept
        """
        if len(detections) == 0:
            return np.array([], dtype=bool)

        overlap_filter = overlap_filter or OverlapFilter()
        report = overlap_filter.evaluate(DetectionHullFilter.to_hulls(detections))
        return np.array(report.kept_mask, dtype=bool)

    @staticmethod
    def filter(
        detections: sv.Detections,
        overlap_filter: Optional[OverlapFilter] = None
    ) -> sv.Detections:
        """
        Subset of detections whose boxes survive the overlap filter.

        Args:
            detections: Detections to filter
            overlap_filter: Configured filter (default threshold 0.5)

        Returns:
            Filtered detections, order preserved
        """
        if len(detections) == 0:
            return detections
        return detections[DetectionHullFilter.keep_mask(detections, overlap_filter)]
