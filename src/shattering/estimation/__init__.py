from .hyperplanes import HyperplaneEstimator, HyperplaneEstimate
from .shattering import number_regions, estimate_shattering

__all__ = [
    'HyperplaneEstimator',
    'HyperplaneEstimate',
    'number_regions',
    'estimate_shattering',
]
