from __future__ import annotations

from typing import List, Optional

import numpy as np
from tqdm import tqdm

from shattering.configs import ReductionSettings
from shattering.utils.logging import get_logger
from .distance import DistanceOracle
from .radius import RetainedSet


logger = get_logger(__name__)

Relations = List[np.ndarray]


def restrict_relations(relations: Relations, keep: np.ndarray) -> Relations:
    """
    Restrict relations to the indices flagged in `keep` and renumber them.

    Every surviving index i becomes i - (number of dropped indices below i),
    so the result is aligned to a contiguous 0..k-1 index space. Coordinates,
    labels and radii never change, so this equals rebuilding the relation
    from distances over the surviving points.
    """
    keep = np.asarray(keep, dtype=bool)
    new_index = np.cumsum(keep) - 1
    restricted: Relations = []
    for i in np.flatnonzero(keep):
        row = relations[i]
        row = row[keep[row]]
        restricted.append(new_index[row].astype(np.int64))
    return restricted


class RelationBuilder:
    """
    Same-class open-ball relation over a retained point set.

    relations[i] = sorted indices j != i with y[j] == y[i] and dist(i, j) < radius[i]

    Points are partitioned by class before any distance is computed. Each
    class block gets its own KD-tree and is queried in batches of `batch_size`
    rows, so in-ball tests use the same distances as the radii.
    """

    def __init__(self,
                 settings: Optional[ReductionSettings] = None,
                 oracle: Optional[DistanceOracle] = None):
        self.settings = settings or ReductionSettings()
        self.oracle = oracle or DistanceOracle(
            batch_size=self.settings.batch_size,
            n_jobs=self.settings.n_jobs,
        )

    def build(self, retained: RetainedSet) -> Relations:
        return self.build_from_arrays(retained.X, retained.y, retained.radius)

    def build_from_arrays(self, X: np.ndarray, y: np.ndarray, radius: np.ndarray) -> Relations:
        n = len(y)
        relations: Relations = [np.array([], dtype=np.int64)] * n
        classes = np.unique(y)
        for c in tqdm(classes, desc='relations', unit='class', disable=not self.settings.show_progress):
            members = np.flatnonzero(y == c)
            rows = self._class_rows(X[members], radius[members], members)
            for i, row in zip(members, rows):
                relations[i] = row

        linked = sum(1 for row in relations if row.size)
        edges = sum(int(row.size) for row in relations)
        logger.info(f"[+] Built relations for {n} points: {linked} with neighbors, {edges} links")
        return relations

    def _class_rows(self, Z: np.ndarray, radius: np.ndarray, members: np.ndarray) -> Relations:
        return [members[row].astype(np.int64) for row in self.oracle.within_radius(Z, radius)]
