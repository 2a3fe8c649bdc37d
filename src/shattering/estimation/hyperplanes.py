from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np
import pandas as pd
from sklearn.linear_model import LinearRegression
from tqdm import tqdm

from shattering.configs import (
    DEFAULT_EPSILON,
    DEFAULT_LENGTH,
    DEFAULT_QUANTILE,
    ESTIMATION_COLUMNS,
    MIN_PREFIX_SIZE,
    MIN_SAMPLE_SIZE,
    ReductionSettings,
)
from shattering.errors import InvalidInput
from shattering.reduction import reduce
from shattering.relations import check_sample
from shattering.utils.logging import get_logger


logger = get_logger(__name__)


@dataclass
class HyperplaneEstimate:
    # one row per prefix: n, reduced, big_omega, big_o
    estimation: pd.DataFrame
    # reduced ~ n
    regression: LinearRegression

    @property
    def slope(self) -> float:
        return float(self.regression.coef_[0])

    @property
    def intercept(self) -> float:
        return float(self.regression.intercept_)

    def predict(self, n) -> np.ndarray:
        """Reduced sample size h(n) predicted by the fitted line."""
        n = np.atleast_1d(np.asarray(n, dtype=np.float64))
        return self.regression.predict(pd.DataFrame({'n': n}))


class HyperplaneEstimator:
    """
    Number of hyperplanes needed to separate the homogeneous regions of a sample.

    The sample is shuffled once, then `length` increasing prefixes are reduced.
    For each reduced size k in a d-dimensional space the Har-Peled and Jones
    expressions are evaluated:

        big_omega = k^(2/(d+1)) * log(log(k)) / log(k)
        big_o     = d * k^(2/(d+1))

    and a straight line reduced ~ n is fitted over the prefixes. Values that
    are not finite (k <= 1 in big_omega) are stored as NaN.
    """

    def __init__(self,
                 length: int = DEFAULT_LENGTH,
                 quantile: float = DEFAULT_QUANTILE,
                 epsilon: float = DEFAULT_EPSILON,
                 random_state: Optional[int] = None,
                 **settings):
        self.length = int(length)
        if self.length < 2:
            raise InvalidInput(f"length must be at least 2, got {self.length}")
        self.settings = ReductionSettings.from_dict(dict(settings, quantile=quantile, epsilon=epsilon))
        self.random_state = random_state

    def prefix_sizes(self, n: int) -> np.ndarray:
        return np.floor(np.linspace(MIN_PREFIX_SIZE, n, self.length)).astype(np.int64)

    @staticmethod
    def bounds(reduced: int, dimension: int) -> Tuple[float, float]:
        k = float(reduced)
        with np.errstate(divide='ignore', invalid='ignore'):
            growth = k ** (2.0 / (dimension + 1))
            lower = growth * np.log(np.log(k)) / np.log(k)
            upper = dimension * growth
        lower = float(lower) if np.isfinite(lower) else float('nan')
        return lower, float(upper)

    def estimate(self, X, y) -> HyperplaneEstimate:
        X, y = check_sample(X, y)
        n, d = X.shape
        if n < MIN_SAMPLE_SIZE:
            raise InvalidInput(f"The sample must contain at least {MIN_SAMPLE_SIZE} instances, got {n}")
        if n // self.length < MIN_PREFIX_SIZE:
            raise InvalidInput(f"Each prefix step must contain at least {MIN_PREFIX_SIZE} instances "
                               f"(n={n}, length={self.length})")

        start_time = time.time()
        rng = np.random.default_rng(self.random_state)
        order = rng.permutation(n)
        X, y = X[order], y[order]

        rows = []
        sizes = self.prefix_sizes(n)
        for size in tqdm(sizes, desc='prefixes', unit='prefix', disable=not self.settings.show_progress):
            original, reduced = reduce(X[:size], y[:size], **self.settings.to_dict())
            lower, upper = self.bounds(reduced, d)
            rows.append((original, reduced, lower, upper))
            logger.debug(f"[+] Prefix {original}: reduced={reduced}, big_omega={lower:.4f}, big_o={upper:.4f}")

        estimation = pd.DataFrame(rows, columns=ESTIMATION_COLUMNS)
        regression = LinearRegression().fit(estimation[['n']], estimation['reduced'])
        result = HyperplaneEstimate(estimation=estimation, regression=regression)

        logger.info(f"[+] Estimated h(n) = {result.slope:.5f} * n + {result.intercept:.5f} "
                    f"over {len(sizes)} prefixes in {time.time() - start_time:.2f}s")
        return result
