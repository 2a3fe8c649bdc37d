from typing import Optional, Sequence, Tuple

import numpy as np


def two_gaussians(mean: Sequence[float] = (-1.0, 1.0),
                  n: int = 100,
                  sd: float = 1.0,
                  random_state: Optional[int] = None) -> Tuple[np.ndarray, np.ndarray]:
    """
    Two isotropic 2-D Gaussian classes with n points each.

    Class 1 is centred at (mean[0], mean[0]) and class 2 at (mean[1], mean[1]);
    moving the means apart reduces the class overlap.
    """
    rng = np.random.default_rng(random_state)
    X = np.vstack([
        rng.normal(loc=mean[0], scale=sd, size=(n, 2)),
        rng.normal(loc=mean[1], scale=sd, size=(n, 2)),
    ])
    y = np.concatenate([np.full(n, 1), np.full(n, 2)])
    return X, y
