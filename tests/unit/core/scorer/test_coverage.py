#!/usr/bin/env python3
"""
Test suite for coverage calculations.
"""

import unittest
from core.scorer import coverage
from core.scorer.models import SearchMode
from core.config_loader import ScoringConfig


class TestCoverageCalculations(unittest.TestCase):
    """Test coverage calculation functions."""

    def setUp(self):
        """Set up test configuration."""
        self.config = ScoringConfig(base_weight=60, bonus_weight=40)

    def test_coverage_partial(self):
        self.assertAlmostEqual(coverage.coverage(frozenset({1, 2, 3, 4}), {1, 3, 9}), 0.5)

    def test_coverage_full(self):
        self.assertEqual(coverage.coverage(frozenset({1, 2}), {1, 2, 3}), 1.0)

    def test_coverage_empty_request_is_zero(self):
        """|R ∩ C| / max(|R|, 1) with R empty covers nothing."""
        self.assertEqual(coverage.coverage(frozenset(), {1, 2}), 0.0)

    def test_base_and_bonus_weights(self):
        self.assertEqual(coverage.calculate_base_score(1.0, self.config), 60.0)
        self.assertEqual(coverage.calculate_bonus_score(0.5, self.config), 20.0)

    def test_custom_weights(self):
        config = ScoringConfig(base_weight=80, bonus_weight=20)
        self.assertEqual(coverage.calculate_base_score(0.5, config), 40.0)
        self.assertEqual(coverage.calculate_bonus_score(1.0, config), 20.0)


class TestRequiredGate(unittest.TestCase):

    def test_and_mode_needs_all(self):
        self.assertTrue(coverage.satisfies_required(frozenset({1, 2}), {1, 2, 3}, SearchMode.AND))
        self.assertFalse(coverage.satisfies_required(frozenset({1, 2}), {1, 3}, SearchMode.AND))

    def test_or_mode_needs_any(self):
        self.assertTrue(coverage.satisfies_required(frozenset({1, 2}), {2}, SearchMode.OR))
        self.assertFalse(coverage.satisfies_required(frozenset({1, 2}), {3}, SearchMode.OR))

    def test_empty_required_places_no_constraint(self):
        self.assertTrue(coverage.satisfies_required(frozenset(), set(), SearchMode.AND))
        self.assertTrue(coverage.satisfies_required(frozenset(), set(), SearchMode.OR))

    def test_exclusion(self):
        self.assertTrue(coverage.is_excluded(frozenset({5}), {1, 5}))
        self.assertFalse(coverage.is_excluded(frozenset({5}), {1, 2}))
        self.assertFalse(coverage.is_excluded(frozenset(), {1, 2}))


if __name__ == '__main__':
    unittest.main()
