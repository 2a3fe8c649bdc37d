import math
from typing import Optional

import pandas as pd

from shattering.configs import ESTIMATION_COLUMNS, SHATTERING_COLUMNS
from shattering.errors import InvalidInput
from shattering.utils.logging import get_logger


logger = get_logger(__name__)


def number_regions(m: int, n: int) -> int:
    """Maximal number of regions m hyperplanes can cut R^n into."""
    if int(m) != m or int(n) != n or m < 0 or n < 0:
        raise InvalidInput(f"m and n must be non-negative integers, got m={m}, n={n}")
    m, n = int(m), int(n)
    return 1 + sum(math.comb(m, i) for i in range(1, n + 1))


def _binomial_sum(reduced: int, exponent: float) -> Optional[int]:
    """sum_{j=1..round(2^exponent)} C(reduced, j); terms past `reduced` are zero."""
    if exponent is None or not math.isfinite(exponent):
        return None
    if exponent >= 63:
        terms = reduced
    else:
        terms = min(reduced, int(round(2.0 ** exponent)))
    return sum(math.comb(reduced, j) for j in range(1, terms + 1))


def estimate_shattering(estimation: pd.DataFrame) -> pd.DataFrame:
    """
    Lower and upper shattering coefficient per row of a hyperplane estimation.

    Bounds are exact Python integers; a row whose hyperplane bound is not
    finite gets None.
    """
    if not isinstance(estimation, pd.DataFrame):
        raise InvalidInput("estimation must be the DataFrame produced by HyperplaneEstimator")
    if len(estimation) <= 1:
        raise InvalidInput("estimation must have more than a single row")
    missing = [c for c in ESTIMATION_COLUMNS if c not in estimation.columns]
    if missing:
        raise InvalidInput(f"estimation is missing columns {missing}, expected {ESTIMATION_COLUMNS}")

    lower, upper = [], []
    for row in estimation.itertuples(index=False):
        reduced = int(row.reduced)
        lower.append(_binomial_sum(reduced, float(row.big_omega)))
        upper.append(_binomial_sum(reduced, float(row.big_o)))

    logger.debug(f"[+] Shattering bounds computed for {len(estimation)} rows")
    return pd.DataFrame({SHATTERING_COLUMNS[0]: lower, SHATTERING_COLUMNS[1]: upper}, dtype=object)
