from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Sequence

import numpy as np
from tqdm import tqdm

from shattering.relations.builder import Relations, restrict_relations
from shattering.utils.logging import get_logger


logger = get_logger(__name__)


@dataclass
class CompressionResult:
    reduced_size: int
    # label of each unit's representative
    labels: np.ndarray
    # input index of each unit's representative
    representatives: np.ndarray
    # unit id of every input index
    assignment: np.ndarray
    # fixpoint relation renumbered to the unit index space
    relations: Relations
    merges: int
    passes: int


def flatten(parent: np.ndarray) -> np.ndarray:
    """Follow representative pointers until every entry points at a root."""
    root = parent.copy()
    while True:
        jumped = root[root]
        if np.array_equal(jumped, root):
            return root
        root = jumped


class SpaceCompressor:
    """
    Contract same-class open-ball relations until no unit absorbs another.

    The working index space is an arena of the input indices with an `active`
    mask and a representative pointer per index, so nothing is physically
    removed or renumbered while merging:

    - indices are scanned in increasing order from a worklist
    - an active index r whose row still references active indices absorbs
      them: they become inactive and point at r (carrying the units they had
      absorbed before)
    - a confirming scan with no merge ends the run

    Inactive indices never come back, so a row with no active neighbor stays
    that way and at most n - 1 merges happen.
    """

    def __init__(self, show_progress: bool = False):
        self.show_progress = bool(show_progress)

    def compress(self, relations: Sequence, y) -> CompressionResult:
        y = np.asarray(y)
        relations = self._check_relations(relations, len(y))
        n = len(relations)

        active = np.ones(n, dtype=bool)
        parent = np.arange(n, dtype=np.int64)
        merges = 0
        passes = 0

        while True:
            passes += 1
            merged = self._scan(relations, y, active, parent)
            merges += merged
            logger.debug(f"[+] Pass {passes}: {merged} merges, {int(active.sum())} units left")
            if not merged:
                break

        representatives = np.flatnonzero(active)
        unit_of = np.cumsum(active) - 1
        assignment = unit_of[flatten(parent)].astype(np.int64)

        logger.info(f"[+] Compressed {n} points into {len(representatives)} units "
                    f"({merges} merges, {passes} passes)")

        return CompressionResult(
            reduced_size=int(len(representatives)),
            labels=y[representatives].copy(),
            representatives=representatives.astype(np.int64),
            assignment=assignment,
            relations=restrict_relations(relations, active),
            merges=merges,
            passes=passes,
        )

    def _scan(self, relations: Relations, y: np.ndarray, active: np.ndarray, parent: np.ndarray) -> int:
        merged = 0
        worklist = deque(np.flatnonzero(active).tolist())
        with tqdm(total=len(worklist), desc='compress', unit='point', disable=not self.show_progress) as pbar:
            while worklist:
                r = worklist.popleft()
                pbar.update(1)
                if not active[r]:
                    continue
                row = relations[r]
                connect_to = row[active[row]]
                if connect_to.size == 0:
                    continue
                assert np.all(y[connect_to] == y[r]), f"row {r} links points of another class"
                active[connect_to] = False
                parent[connect_to] = r
                merged += 1
                pbar.set_postfix({"Units": int(active.sum())})
        return merged

    @staticmethod
    def _check_relations(relations: Sequence, n: int) -> Relations:
        assert len(relations) == n, f"{len(relations)} relation rows for {n} labels"
        checked: Relations = []
        for i, row in enumerate(relations):
            row = np.asarray(row, dtype=np.int64).reshape(-1)
            if row.size:
                assert row.min() >= 0 and row.max() < n, f"row {i} references an index outside [0, {n})"
                assert not np.any(row == i), f"row {i} references itself"
            checked.append(row)
        return checked
