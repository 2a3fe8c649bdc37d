"""Reduce a labeled sample to its count of class-homogeneous units.

    from shattering import reduce
    original_size, reduced_size = reduce(X, y, quantile=1.0, epsilon=1e-7)

`SampleReducer.run` gives the full `ReductionResult`, including the label of
every surviving unit.
"""
from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np

from shattering.compression import CompressionResult, SpaceCompressor
from shattering.configs import DEFAULT_EPSILON, DEFAULT_QUANTILE, ReductionSettings
from shattering.relations import DistanceOracle, RadiusEstimator, RelationBuilder, RetainedSet
from shattering.utils.logging import get_logger


logger = get_logger(__name__)


@dataclass
class ReductionResult:
    original_size: int
    retained_size: int
    reduced_size: int
    labels: np.ndarray
    threshold: float
    retained: RetainedSet
    compression: CompressionResult

    def as_tuple(self) -> Tuple[int, int]:
        return self.original_size, self.reduced_size


class SampleReducer:
    """Radius estimation, relation building and compression over one sample."""

    def __init__(self, settings: Optional[ReductionSettings] = None):
        self.settings = settings or ReductionSettings()
        oracle = DistanceOracle(
            batch_size=self.settings.batch_size,
            n_jobs=self.settings.n_jobs,
        )
        self.radius_estimator = RadiusEstimator(self.settings, oracle)
        self.relation_builder = RelationBuilder(self.settings, oracle)
        self.compressor = SpaceCompressor(show_progress=self.settings.show_progress)

    def run(self, X, y) -> ReductionResult:
        start_time = time.time()
        retained = self.radius_estimator.estimate(X, y)
        relations = self.relation_builder.build(retained)
        compression = self.compressor.compress(relations, retained.y)

        logger.info(f"[+] Reduced {retained.original_size} -> {compression.reduced_size} "
                    f"(retained {len(retained)}) in {time.time() - start_time:.2f}s")

        return ReductionResult(
            original_size=retained.original_size,
            retained_size=len(retained),
            reduced_size=compression.reduced_size,
            labels=compression.labels,
            threshold=retained.threshold,
            retained=retained,
            compression=compression,
        )


def reduce(X, y, quantile: float = DEFAULT_QUANTILE, epsilon: float = DEFAULT_EPSILON, **settings) -> Tuple[int, int]:
    """Return (original_size, reduced_size) for one labeled sample."""
    config = ReductionSettings.from_dict(dict(settings, quantile=quantile, epsilon=epsilon))
    return SampleReducer(config).run(X, y).as_tuple()
