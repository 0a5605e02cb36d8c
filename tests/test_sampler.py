"""Tests for strategy/sampler.py — inverse-CDF walk and the seeded uniform source."""

import numpy as np
import pytest

from kuhn3p_equilibrium.env import ActionType
from kuhn3p_equilibrium.strategy.sampler import UniformSource, sample_action


class TestSampleAction:
    probs = np.array([0.0, 0.3, 0.7])

    def test_inside_call(self):
        assert sample_action(self.probs, 0.2).type == ActionType.CALL

    def test_inside_raise(self):
        assert sample_action(self.probs, 0.9).type == ActionType.RAISE

    def test_zero_draw_skips_empty_fold(self):
        assert sample_action(self.probs, 0.0).type == ActionType.CALL

    def test_boundary_belongs_to_lower_action(self):
        assert sample_action(self.probs, 0.3).type == ActionType.CALL

    def test_size_is_zero(self):
        assert sample_action(self.probs, 0.5).size == 0

    def test_fold_selected(self):
        assert sample_action(np.array([0.4, 0.6, 0.0]), 0.1).type == ActionType.FOLD
        assert sample_action(np.array([0.4, 0.6, 0.0]), 0.5).type == ActionType.CALL

    def test_rounding_shortfall_falls_back(self):
        """Probabilities summing just under 1 with r above the sum."""
        probs = np.array([0.5, 0.5 - 1e-12, 0.0])
        assert sample_action(probs, 1.0 - 1e-13).type == ActionType.CALL
        probs = np.array([0.0, 0.3, 0.7 - 1e-12])
        assert sample_action(probs, 1.0 - 1e-13).type == ActionType.RAISE

    def test_certain_action(self):
        for r in (0.0, 0.5, 0.999999):
            assert sample_action(np.array([0.0, 1.0, 0.0]), r).type == ActionType.CALL


class TestUniformSource:
    def test_draws_in_unit_interval(self):
        source = UniformSource(123)
        draws = [source.draw() for _ in range(1000)]
        assert min(draws) >= 0.0
        assert max(draws) < 1.0

    def test_same_seed_same_sequence(self):
        a, b = UniformSource(42), UniformSource(42)
        assert [a.draw() for _ in range(50)] == [b.draw() for _ in range(50)]

    def test_different_seeds_differ(self):
        a, b = UniformSource(1), UniformSource(2)
        assert [a.draw() for _ in range(10)] != [b.draw() for _ in range(10)]

    def test_matches_mt19937_reference(self):
        """First 32-bit output of MT19937 seeded with 42 is 1608637542."""
        assert UniformSource(42).draw() == pytest.approx(1608637542 / 2**32, abs=1e-8)

    def test_draws_are_32_bit_grid(self):
        source = UniformSource(9)
        for _ in range(20):
            assert (source.draw() * 2**32).is_integer()

    def test_seed_masked_to_32_bits(self):
        assert UniformSource(2**32 + 5).seed == 5
        assert UniformSource(-1).seed == 2**32 - 1
