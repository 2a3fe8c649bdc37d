from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Optional

from shattering.errors import InvalidInput
from .defaults import (
    DEFAULT_QUANTILE,
    DEFAULT_EPSILON,
    DEFAULT_BATCH_SIZE,
    DEFAULT_NEGATIVE_RADIUS,
    NEGATIVE_RADIUS_ACTIONS,
)


class QuantilePolicy(str, Enum):
    """How the radius threshold is taken from the per-point radii.

    PER_CLASS_MAX: quantile of each class's radii, threshold is the largest one.
    GLOBAL: a single quantile over every radius.
    """

    PER_CLASS_MAX = 'per_class_max'
    GLOBAL = 'global'


class ReductionSettings:
    """Validated settings shared by the radius, relation and compression stages."""

    def __init__(self,
                 quantile: float = DEFAULT_QUANTILE,
                 epsilon: float = DEFAULT_EPSILON,
                 quantile_policy: QuantilePolicy | str = QuantilePolicy.PER_CLASS_MAX,
                 negative_radius: str = DEFAULT_NEGATIVE_RADIUS,
                 batch_size: int = DEFAULT_BATCH_SIZE,
                 n_jobs: Optional[int] = None,
                 show_progress: bool = False):
        try:
            self.quantile = float(quantile)
            self.epsilon = float(epsilon)
            self.batch_size = int(batch_size)
        except (TypeError, ValueError) as exc:
            raise InvalidInput(f"Settings must be numeric: {exc}") from exc

        if not 0.0 < self.quantile <= 1.0:
            raise InvalidInput(f"quantile must be in (0, 1], got {self.quantile}")
        if not self.epsilon >= 0.0:
            raise InvalidInput(f"epsilon must be >= 0, got {self.epsilon}")
        if self.batch_size < 1:
            raise InvalidInput(f"batch_size must be positive, got {self.batch_size}")

        try:
            self.quantile_policy = QuantilePolicy(quantile_policy)
        except ValueError as exc:
            choices = [p.value for p in QuantilePolicy]
            raise InvalidInput(f"quantile_policy must be one of {choices}, got {quantile_policy!r}") from exc

        if negative_radius not in NEGATIVE_RADIUS_ACTIONS:
            raise InvalidInput(f"negative_radius must be one of {NEGATIVE_RADIUS_ACTIONS}, got {negative_radius!r}")
        self.negative_radius = negative_radius

        self.n_jobs = n_jobs
        self.show_progress = bool(show_progress)

    @classmethod
    def from_dict(cls, values: Optional[Dict[str, Any]] = None) -> ReductionSettings:
        values = dict(values or {})
        known = set(cls().to_dict())
        unknown = sorted(set(values) - known)
        if unknown:
            raise InvalidInput(f"Unknown settings: {unknown}")
        return cls(**values)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'quantile': self.quantile,
            'epsilon': self.epsilon,
            'quantile_policy': self.quantile_policy.value,
            'negative_radius': self.negative_radius,
            'batch_size': self.batch_size,
            'n_jobs': self.n_jobs,
            'show_progress': self.show_progress,
        }

    def __repr__(self) -> str:
        args = ', '.join(f"{k}={v!r}" for k, v in self.to_dict().items())
        return f"ReductionSettings({args})"
