"""
shattering
==========

Counts the class-homogeneous regions of a labeled sample: every point gets
the largest open ball free of other classes, same-class points inside a ball
are merged into the ball's center, and the surviving units are counted. The
count feeds hyperplane and shattering coefficient estimates.
"""

__version__ = "0.1.0"

from .errors import ShatteringError, InvalidInput, DegenerateGeometry, NumericAnomaly
from .configs import QuantilePolicy, ReductionSettings
from .relations import DistanceOracle, RadiusEstimator, RetainedSet, RelationBuilder
from .compression import SpaceCompressor, CompressionResult
from .reduction import SampleReducer, ReductionResult, reduce
from .estimation import HyperplaneEstimator, HyperplaneEstimate, number_regions, estimate_shattering

__all__ = [
    'ShatteringError',
    'InvalidInput',
    'DegenerateGeometry',
    'NumericAnomaly',
    'QuantilePolicy',
    'ReductionSettings',
    'DistanceOracle',
    'RadiusEstimator',
    'RetainedSet',
    'RelationBuilder',
    'SpaceCompressor',
    'CompressionResult',
    'SampleReducer',
    'ReductionResult',
    'reduce',
    'HyperplaneEstimator',
    'HyperplaneEstimate',
    'number_regions',
    'estimate_shattering',
]
