"""
tests/test_parallelism.py — sharing one calculator between threads.

The kernels hold no mutable state, so a single TwoLayerResistance evaluated
concurrently from many threads must give bit-identical results to a serial
loop.  The library itself never spawns threads; the pool lives in the test,
standing in for an inversion routine that scans the parameter space.
"""

from __future__ import annotations

import itertools
from concurrent.futures import ThreadPoolExecutor

import numpy as np
import pytest

from pyrsm._resistance import TwoLayerResistance

RHO1 = [1.0, 10.0, 100.0]
RHO2 = [2.0, 10.0, 50.0, 1000.0]
H = [0.0, 0.1, 1.0, 10.0]


@pytest.fixture(scope="module")
def grid():
    return list(itertools.product(RHO1, RHO2, H))


class TestSharedCalculator:
    @pytest.mark.parametrize("n_workers", [2, 4, 8])
    def test_threads_match_serial(self, two_layer, grid, n_workers):
        serial = [two_layer.value(*p) for p in grid]
        with ThreadPoolExecutor(max_workers=n_workers) as executor:
            parallel = list(executor.map(lambda p: two_layer.value(*p), grid))
        np.testing.assert_array_equal(parallel, serial)

    def test_interleaved_geometries(self, small_system, schlumberger_systems, grid):
        """Calculators for different geometries evaluated concurrently do not interfere."""
        calculators = [TwoLayerResistance(s) for s in [small_system, *schlumberger_systems]]
        jobs = [(c, p) for c in calculators for p in grid]
        serial = [c.value(*p) for c, p in jobs]
        with ThreadPoolExecutor(max_workers=4) as executor:
            parallel = list(executor.map(lambda job: job[0].value(*job[1]), jobs))
        np.testing.assert_array_equal(parallel, serial)

    def test_no_instance_state(self, two_layer):
        """Instances carry no per-call state (no __dict__, fixed slots)."""
        assert not hasattr(two_layer, "__dict__")
        assert not hasattr(two_layer.homogeneous, "__dict__")
