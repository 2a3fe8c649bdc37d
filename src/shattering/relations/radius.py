from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np

from shattering.configs import QuantilePolicy, ReductionSettings
from shattering.errors import DegenerateGeometry, InvalidInput, NumericAnomaly
from shattering.utils.logging import get_logger
from .distance import DistanceOracle


logger = get_logger(__name__)


def check_sample(X, y) -> Tuple[np.ndarray, np.ndarray]:
    """Return (X, y) as float64 matrix and numeric label vector, or raise InvalidInput."""
    try:
        X = np.asarray(X, dtype=np.float64)
    except (TypeError, ValueError) as exc:
        raise InvalidInput(f"X must be a real-valued matrix: {exc}") from exc
    y = np.asarray(y)

    if X.ndim != 2:
        raise InvalidInput(f"X must be 2-dimensional, got shape {X.shape}")
    if y.ndim != 1:
        raise InvalidInput(f"y must be 1-dimensional, got shape {y.shape}")
    if X.shape[0] != y.shape[0]:
        raise InvalidInput(f"X has {X.shape[0]} rows but y has {y.shape[0]} labels")
    if X.shape[0] == 0 or X.shape[1] == 0:
        raise InvalidInput(f"sample is empty, got shape {X.shape}")
    if not np.isfinite(X).all():
        raise InvalidInput("X contains NaN or infinite values")
    if not (np.issubdtype(y.dtype, np.number) or np.issubdtype(y.dtype, np.bool_)):
        raise InvalidInput(f"y must hold numeric labels, got dtype {y.dtype}")
    if np.issubdtype(y.dtype, np.floating) and not np.isfinite(y).all():
        raise InvalidInput("y contains NaN or infinite labels")
    return X, y


@dataclass(frozen=True)
class RetainedSet:
    """Points kept after quantile pruning, renumbered 0..k-1 and read-only."""

    X: np.ndarray
    y: np.ndarray
    radius: np.ndarray
    indices: np.ndarray
    threshold: float
    policy: QuantilePolicy
    original_size: int

    def __post_init__(self):
        for arr in (self.X, self.y, self.radius, self.indices):
            arr.setflags(write=False)

    def __len__(self) -> int:
        return int(len(self.indices))


class RadiusEstimator:
    """
    Class-separation radius of every point and quantile pruning.

    radius[i] = distance from i to its nearest point of another class - epsilon

    A negative radius (epsilon >= nearest opposite distance) gives the point no
    neighbors at all, since `dist < radius` never holds. With
    negative_radius='warn' this is logged and the point is kept; with
    'raise' a NumericAnomaly is raised.
    """

    def __init__(self,
                 settings: Optional[ReductionSettings] = None,
                 oracle: Optional[DistanceOracle] = None):
        self.settings = settings or ReductionSettings()
        self.oracle = oracle or DistanceOracle(
            batch_size=self.settings.batch_size,
            n_jobs=self.settings.n_jobs,
        )

    def radii(self, X: np.ndarray, y: np.ndarray) -> np.ndarray:
        X, y = check_sample(X, y)
        classes = np.unique(y)
        if len(classes) < 2:
            raise DegenerateGeometry(
                f"Need at least 2 classes to measure opposite-class distances, got {len(classes)}"
            )

        radius = np.empty(len(y), dtype=np.float64)
        for c in classes:
            mask = (y == c)
            d = self.oracle.nearest_distance(X[mask], X[~mask])
            radius[mask] = d - self.settings.epsilon
            logger.debug(f"[+] Class {c}: {int(mask.sum())} points, nearest opposite distance in [{d.min():.6g}, {d.max():.6g}]")

        negative = int((radius < 0).sum())
        if negative:
            msg = (f"{negative} radii are negative (epsilon={self.settings.epsilon} >= nearest opposite distance); "
                   f"those points have no neighbors")
            if self.settings.negative_radius == 'raise':
                raise NumericAnomaly(msg)
            logger.warning(f"[-] {msg}")
        return radius

    def threshold(self, radius: np.ndarray, y: np.ndarray) -> float:
        q = self.settings.quantile
        if self.settings.quantile_policy == QuantilePolicy.GLOBAL:
            return float(np.quantile(radius, q))
        return float(max(np.quantile(radius[y == c], q) for c in np.unique(y)))

    def estimate(self, X, y) -> RetainedSet:
        X, y = check_sample(X, y)
        radius = self.radii(X, y)
        threshold = self.threshold(radius, y)
        keep = np.flatnonzero(radius <= threshold)

        logger.info(f"[+] Retained {len(keep)} / {len(y)} points "
                    f"(threshold={threshold:.6g}, policy={self.settings.quantile_policy.value}, "
                    f"quantile={self.settings.quantile})")

        return RetainedSet(
            X=X[keep].copy(),
            y=y[keep].copy(),
            radius=radius[keep].copy(),
            indices=keep.astype(np.int64),
            threshold=threshold,
            policy=self.settings.quantile_policy,
            original_size=int(len(y)),
        )
