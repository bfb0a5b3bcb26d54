"""
Overlap Filter Module
=====================

Pairwise overlap-ratio accumulation and threshold filtering.

Design:
- overlap_ratio() / filter_hulls(): pure functions over immutable hulls
- OverlapFilter: configured runner with logging and optional thread pool
- OverlapReport: immutable snapshot of one run

Semantics:
    ratio(R) = sum over H with H.hull_id != R.hull_id of
               area(intersect(R, H)) / area(R)

    This is a sum of pairwise overlap fractions, NOT union coverage: a hull
    overlapped by several others in the same region counts that region once
    per neighbour, and the ratio may exceed 1.0.
"""

import math
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple

from hullfilter_core.geometry.hull import ConvexHull
from hullfilter_core.geometry.intersection import intersect
from hullfilter_io.logging import LogEvent, StructuredLogger, create_logger

DEFAULT_OVERLAP_THRESHOLD = 0.5


def overlap_ratio(reference: ConvexHull, hulls: Iterable[ConvexHull]) -> float:
    """
    Sum of pairwise overlap fractions of a reference hull.

    Hulls sharing the reference's id are skipped (the reference itself
    included). Contributions are summed in iteration order.

    Args:
        reference: Hull whose coverage is measured
        hulls: All hulls (may include reference)

    Returns:
        Accumulated ratio; math.inf if the reference has zero area and
        intersects another hull
    """
    ratio = 0.0
    for hull in hulls:
        if hull.hull_id == reference.hull_id:
            continue
        region = intersect(reference, hull)
        if region is None:
            continue
        if reference.area == 0:
            # x / 0 is undefined; an intersecting flat hull never survives
            return math.inf
        ratio += region.area / reference.area
    return ratio


def filter_hulls(
    hulls: Sequence[ConvexHull],
    threshold: float = DEFAULT_OVERLAP_THRESHOLD
) -> List[ConvexHull]:
    """
    Keep hulls whose overlap ratio is at most threshold.

    Args:
        hulls: Input hulls
        threshold: Maximum accumulated ratio (inclusive)

    Returns:
        Surviving hulls in input order
    """
    return [hull for hull in hulls if overlap_ratio(hull, hulls) <= threshold]


@dataclass(frozen=True)
class HullDecision:
    """Filter outcome for one hull."""

    hull_id: int
    ratio: float
    kept: bool


@dataclass(frozen=True)
class OverlapReport:
    """
    Immutable result of an overlap filter run.

    Design:
    - Frozen dataclass (value object)
    - Decisions in input order

    Attributes:
        threshold: Ratio threshold used
        decisions: One HullDecision per input hull
    """

    threshold: float
    decisions: Tuple[HullDecision, ...]

    @property
    def ratios(self) -> List[float]:
        return [d.ratio for d in self.decisions]

    @property
    def kept_ids(self) -> List[int]:
        return [d.hull_id for d in self.decisions if d.kept]

    @property
    def dropped_ids(self) -> List[int]:
        return [d.hull_id for d in self.decisions if not d.kept]

    @property
    def kept_mask(self) -> List[bool]:
        return [d.kept for d in self.decisions]

    def __len__(self) -> int:
        return len(self.decisions)

    def __str__(self) -> str:
        return (
            f"OverlapReport(threshold={self.threshold}, "
            f"kept={len(self.kept_ids)}, dropped={len(self.dropped_ids)})"
        )


class OverlapFilter:
    """
    Filters convex hulls by accumulated pairwise overlap.

    Design:
    - Stateless between runs (configuration only)
    - Logger injected (defaults to a "filter" StructuredLogger)
    - max_workers > 1 spreads reference hulls over a thread pool; each
      ratio is still summed in input order, so results match the
      sequential run exactly

    Usage:
        overlap_filter = OverlapFilter(threshold=0.5)
        report = overlap_filter.evaluate(hulls)
        survivors = overlap_filter.filter(hulls)
    """

    def __init__(
        self,
        threshold: float = DEFAULT_OVERLAP_THRESHOLD,
        max_workers: int = 1,
        logger: Optional[StructuredLogger] = None
    ):
        """
        Args:
            threshold: Maximum accumulated ratio for a hull to be kept
            max_workers: Thread pool size (1 = sequential)
            logger: Structured logger for observability

        Raises:
            ValueError: If threshold is negative/NaN or max_workers < 1
        """
        if not threshold >= 0:
            raise ValueError(f"threshold must be >= 0, got {threshold}")
        if max_workers < 1:
            raise ValueError(f"max_workers must be >= 1, got {max_workers}")

        self.threshold = threshold
        self.max_workers = max_workers
        self.logger = logger or create_logger("filter")

    def ratios(self, hulls: Sequence[ConvexHull]) -> List[float]:
        """
        Overlap ratio of every hull against all others.

        Args:
            hulls: Input hulls

        Returns:
            Ratios in input order
        """
        hulls = tuple(hulls)

        if self.max_workers > 1 and len(hulls) > 1:
            with ThreadPoolExecutor(max_workers=self.max_workers) as pool:
                return list(pool.map(lambda ref: overlap_ratio(ref, hulls), hulls))

        return [overlap_ratio(ref, hulls) for ref in hulls]

    def evaluate(self, hulls: Sequence[ConvexHull]) -> OverlapReport:
        """
        Compute ratios and keep/drop decisions.

        Args:
            hulls: Input hulls

        Returns:
            OverlapReport with one decision per hull
        """
        hulls = tuple(hulls)
        self.logger.info(
            event=LogEvent.FILTER_STARTED,
            message="Filtering convex hulls",
            metadata={
                'hull_count': len(hulls),
                'threshold': self.threshold,
                'max_workers': self.max_workers,
            }
        )

        decisions = []
        for hull, ratio in zip(hulls, self.ratios(hulls)):
            kept = ratio <= self.threshold
            decisions.append(HullDecision(hull_id=hull.hull_id, ratio=ratio, kept=kept))

            if hull.area == 0:
                self.logger.warning(
                    event=LogEvent.HULL_DEGENERATE,
                    message="Hull has zero area",
                    metadata={'hull_id': hull.hull_id, 'ratio': ratio, 'kept': kept}
                )
            else:
                self.logger.debug(
                    event=LogEvent.HULL_KEPT if kept else LogEvent.HULL_DROPPED,
                    message="Hull kept" if kept else "Hull dropped",
                    metadata={'hull_id': hull.hull_id, 'ratio': ratio}
                )

        report = OverlapReport(threshold=self.threshold, decisions=tuple(decisions))
        self.logger.info(
            event=LogEvent.FILTER_COMPLETED,
            message="Filtered convex hulls",
            metadata={
                'kept': len(report.kept_ids),
                'dropped': len(report.dropped_ids),
            }
        )
        return report

    def filter(self, hulls: Sequence[ConvexHull]) -> List[ConvexHull]:
        """
        Hulls whose overlap ratio is at most the threshold.

        Args:
            hulls: Input hulls

        Returns:
            Surviving hulls in input order
        """
        hulls = tuple(hulls)
        report = self.evaluate(hulls)
        return [hull for hull, keep in zip(hulls, report.kept_mask) if keep]
