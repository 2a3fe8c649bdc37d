from .distance import DistanceOracle
from .radius import RadiusEstimator, RetainedSet, check_sample
from .builder import RelationBuilder, Relations, restrict_relations

__all__ = [
    'DistanceOracle',
    'RadiusEstimator',
    'RetainedSet',
    'check_sample',
    'RelationBuilder',
    'Relations',
    'restrict_relations',
]
