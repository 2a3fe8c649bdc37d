from .defaults import (
    DEFAULT_QUANTILE,
    DEFAULT_EPSILON,
    DEFAULT_LENGTH,
    MIN_SAMPLE_SIZE,
    MIN_PREFIX_SIZE,
    DEFAULT_BATCH_SIZE,
    ESTIMATION_COLUMNS,
    SHATTERING_COLUMNS,
)
from .settings import QuantilePolicy, ReductionSettings

__all__ = [
    "DEFAULT_QUANTILE",
    "DEFAULT_EPSILON",
    "DEFAULT_LENGTH",
    "MIN_SAMPLE_SIZE",
    "MIN_PREFIX_SIZE",
    "DEFAULT_BATCH_SIZE",
    "ESTIMATION_COLUMNS",
    "SHATTERING_COLUMNS",
    "QuantilePolicy",
    "ReductionSettings",
]
