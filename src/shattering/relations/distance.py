from typing import List, Optional

import numpy as np
from sklearn.neighbors import NearestNeighbors

from shattering.configs import DEFAULT_BATCH_SIZE
from shattering.utils.logging import get_logger


logger = get_logger(__name__)


class DistanceOracle:
    """
    Euclidean distance queries over arbitrary point subsets.

    - nearest_distance: 1-NN distance from each query row to a reference set
    - within_radius: per-row neighbors strictly inside a per-row radius

    Both go through a KD-tree, which sums squared coordinate differences, so
    radii and in-ball tests agree to the last bit wherever the sample sits in
    space. Queries run in batches of `batch_size` rows; batching and n_jobs
    only change memory use and throughput, never results.
    """

    def __init__(self,
                 batch_size: int = DEFAULT_BATCH_SIZE,
                 n_jobs: Optional[int] = None):
        self.batch_size = int(batch_size)
        self.n_jobs = n_jobs

    def _fit(self, Z: np.ndarray, n_neighbors: int = 1) -> NearestNeighbors:
        nn = NearestNeighbors(n_neighbors=n_neighbors, algorithm='kd_tree', metric='euclidean', n_jobs=self.n_jobs)
        nn.fit(Z)
        return nn

    def nearest_distance(self, Z_query: np.ndarray, Z_reference: np.ndarray) -> np.ndarray:
        if len(Z_reference) == 0:
            raise ValueError("reference set is empty")
        nn = self._fit(Z_reference)
        n = len(Z_query)
        D = np.empty(n, dtype=np.float64)
        for start in range(0, n, self.batch_size):
            end = min(start + self.batch_size, n)
            d, _ = nn.kneighbors(Z_query[start:end], n_neighbors=1, return_distance=True)
            D[start:end] = d[:, 0]
        return D

    def within_radius(self, Z: np.ndarray, radius: np.ndarray) -> List[np.ndarray]:
        """For every row i: sorted indices j != i of Z with dist(i, j) < radius[i]."""
        nn = self._fit(Z)
        n = len(Z)
        rows: List[np.ndarray] = []
        for start in range(0, n, self.batch_size):
            end = min(start + self.batch_size, n)
            r_max = float(radius[start:end].max())
            if r_max <= 0:
                # d >= 0 is never below a non-positive radius
                rows.extend(np.array([], dtype=np.int64) for _ in range(start, end))
                continue
            dist, ind = nn.radius_neighbors(Z[start:end], radius=r_max, return_distance=True)
            for offset, (d, j) in enumerate(zip(dist, ind)):
                local = start + offset
                hits = j[(d < radius[local]) & (j != local)]
                rows.append(np.sort(hits).astype(np.int64))
        return rows
