#!/usr/bin/env python3
"""
Unit Tests for hyperplane and shattering estimation
===================================================
Prefix sweep, Har-Peled and Jones expressions, regression and binomial sums.
"""

import math
import unittest

import numpy as np
import pandas as pd

from shattering import (
    HyperplaneEstimator,
    InvalidInput,
    estimate_shattering,
    number_regions,
)
from shattering.datasets import two_gaussians


class TestHyperplaneEstimator(unittest.TestCase):

    @classmethod
    def setUpClass(cls):
        cls.X, cls.y = two_gaussians(mean=(-5, 5), n=60, random_state=0)
        cls.estimate = HyperplaneEstimator(length=5, quantile=1.0, random_state=0).estimate(cls.X, cls.y)

    def test_estimation_table(self):
        table = self.estimate.estimation
        self.assertEqual(list(table.columns), ['n', 'reduced', 'big_omega', 'big_o'])
        self.assertEqual(table['n'].tolist(), [10, 37, 65, 92, 120])
        self.assertTrue((table['reduced'] >= 1).all())
        self.assertTrue((table['reduced'] <= table['n']).all())

    def test_bounds_follow_reduced_size(self):
        for row in self.estimate.estimation.itertuples(index=False):
            self.assertAlmostEqual(row.big_o, 2 * row.reduced ** (2 / 3))

    def test_regression_line(self):
        table = self.estimate.estimation
        slope, intercept = np.polyfit(table['n'], table['reduced'], 1)
        self.assertAlmostEqual(self.estimate.slope, slope, places=6)
        self.assertAlmostEqual(self.estimate.intercept, intercept, places=6)
        np.testing.assert_allclose(self.estimate.predict([0, 100]), [intercept, slope * 100 + intercept])

    def test_same_seed_same_estimation(self):
        again = HyperplaneEstimator(length=5, quantile=1.0, random_state=0).estimate(self.X, self.y)
        pd.testing.assert_frame_equal(again.estimation, self.estimate.estimation)

    def test_bounds_formula(self):
        lower, upper = HyperplaneEstimator.bounds(8, 2)
        growth = 8 ** (2 / 3)
        self.assertAlmostEqual(upper, 2 * growth)
        self.assertAlmostEqual(lower, growth * math.log(math.log(8)) / math.log(8))

    def test_lower_bound_undefined_for_single_unit(self):
        lower, upper = HyperplaneEstimator.bounds(1, 3)
        self.assertTrue(math.isnan(lower))
        self.assertAlmostEqual(upper, 3.0)

    def test_sample_too_small(self):
        X, y = two_gaussians(n=40, random_state=1)
        with self.assertRaises(InvalidInput):
            HyperplaneEstimator(length=5).estimate(X, y)

    def test_prefix_steps_too_small(self):
        X, y = two_gaussians(n=50, random_state=1)
        with self.assertRaises(InvalidInput):
            HyperplaneEstimator(length=20).estimate(X, y)

    def test_length_must_allow_a_line(self):
        with self.assertRaises(InvalidInput):
            HyperplaneEstimator(length=1)


class TestShattering(unittest.TestCase):

    def test_number_regions(self):
        self.assertEqual(number_regions(2, 2), 4)
        self.assertEqual(number_regions(3, 2), 7)
        self.assertEqual(number_regions(0, 3), 1)
        self.assertEqual(number_regions(10, 1), 11)

    def test_number_regions_rejects_negative(self):
        with self.assertRaises(InvalidInput):
            number_regions(-1, 2)

    def test_binomial_sums(self):
        estimation = pd.DataFrame({
            'n': [10, 20],
            'reduced': [4, 6],
            'big_omega': [1.0, np.nan],
            'big_o': [2.0, 10.0],
        })
        shattering = estimate_shattering(estimation)
        self.assertEqual(list(shattering.columns), ['lower_bound', 'upper_bound'])
        # C(4,1) + C(4,2)
        self.assertEqual(shattering['lower_bound'][0], 10)
        # C(4,1) + ... + C(4,4)
        self.assertEqual(shattering['upper_bound'][0], 15)
        self.assertIsNone(shattering['lower_bound'][1])
        # 1024 terms, only the first 6 are non-zero
        self.assertEqual(shattering['upper_bound'][1], 2 ** 6 - 1)

    def test_on_hyperplane_estimate(self):
        X, y = two_gaussians(mean=(-5, 5), n=60, random_state=2)
        estimate = HyperplaneEstimator(length=5, quantile=1.0, random_state=2).estimate(X, y)
        shattering = estimate_shattering(estimate.estimation)
        self.assertEqual(len(shattering), 5)
        for value in shattering['upper_bound']:
            self.assertIsInstance(value, int)
            self.assertGreaterEqual(value, 1)

    def test_invalid_tables(self):
        with self.assertRaises(InvalidInput):
            estimate_shattering([[10, 4, 1.0, 2.0]])
        with self.assertRaises(InvalidInput):
            estimate_shattering(pd.DataFrame({'n': [10], 'reduced': [4], 'big_omega': [1.0], 'big_o': [2.0]}))
        with self.assertRaises(InvalidInput):
            estimate_shattering(pd.DataFrame({'n': [10, 20], 'reduced': [4, 6]}))


if __name__ == "__main__":
    unittest.main()
