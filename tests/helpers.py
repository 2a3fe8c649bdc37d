"""Brute-force references used to cross-check the reduction pipeline on small samples."""

import numpy as np


def brute_force_radii(X, y, epsilon):
    n = len(y)
    radius = np.empty(n)
    for i in range(n):
        radius[i] = min(np.linalg.norm(X[i] - X[j]) for j in range(n) if y[j] != y[i]) - epsilon
    return radius


def brute_force_relations(X, y, radius):
    n = len(y)
    return [
        [j for j in range(n) if j != i and y[j] == y[i] and np.linalg.norm(X[i] - X[j]) < radius[i]]
        for i in range(n)
    ]


def replay_contractions(relations):
    """
    Literal contraction with physical removal and renumbering.

    On a row with neighbors, the neighbors are removed, every remaining index
    j is shifted down by the number of removed indices below j, and the scan
    position moves back by the number removed. Returns the original indices
    of the surviving rows.
    """
    rows = [sorted(set(int(j) for j in r)) for r in relations]
    ids = list(range(len(rows)))
    changed = True
    while changed:
        changed = False
        pos = 0
        while pos < len(rows):
            if rows[pos]:
                connect_to = rows[pos]
                removed = set(connect_to)
                survivors = [i for i in range(len(rows)) if i not in removed]
                rows = [
                    [j - sum(1 for c in connect_to if c < j) for j in rows[i] if j not in removed]
                    for i in survivors
                ]
                ids = [ids[i] for i in survivors]
                changed = True
                pos = max(pos - len(connect_to), 0)
                continue
            pos += 1
    return ids


def connected_components(relations):
    """Number of groups when every `dist < radius` link is merged transitively."""
    parent = list(range(len(relations)))

    def find(i):
        while parent[i] != i:
            parent[i] = parent[parent[i]]
            i = parent[i]
        return i

    for i, row in enumerate(relations):
        for j in row:
            ri, rj = find(i), find(int(j))
            if ri != rj:
                parent[rj] = ri
    return len({find(i) for i in range(len(relations))})


def random_sample(seed, n=20, d=2, classes=3, spread=1.0, offset=0.0):
    rng = np.random.default_rng(seed)
    X = offset + spread * rng.normal(size=(n, d))
    y = rng.integers(0, classes, size=n)
    # every class must be present
    y[:classes] = np.arange(classes)
    return X, y


def separated_clusters(seed, per_cluster=5, spread=0.05, distance=10.0):
    rng = np.random.default_rng(seed)
    centers = np.array([[0.0, 0.0], [distance, 0.0], [0.0, distance]])
    X = np.vstack([c + rng.uniform(-spread, spread, size=(per_cluster, 2)) for c in centers])
    y = np.repeat(np.arange(len(centers)), per_cluster)
    return X, y
