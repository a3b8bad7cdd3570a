"""
conftest.py — shared pytest fixtures for pyrsm tests.
"""

from __future__ import annotations

import numpy as np
import pytest

from pyrsm._resistance import HomogeneousResistance, TwoLayerResistance
from pyrsm._types import ElectrodeSystem, TwoLayerModel


# ──────────────────────────────────────────────────────────────────────────────
# Canonical electrode systems
# ──────────────────────────────────────────────────────────────────────────────

@pytest.fixture(scope="session")
def small_system():
    """Compact array, radius_minus = 0.1 m, radius_plus = 0.3 m."""
    return ElectrodeSystem(radius_minus=0.1, radius_plus=0.3)


@pytest.fixture(scope="session")
def two_layer(small_system):
    return TwoLayerResistance(small_system)


@pytest.fixture(scope="session")
def homogeneous(small_system):
    return HomogeneousResistance(small_system)


@pytest.fixture(scope="session")
def schlumberger_systems():
    """Fixed potential spacing, current spacing growing log-uniformly."""
    return [
        ElectrodeSystem.from_spacings(potential=1.0, current=float(l))
        for l in np.geomspace(3.0, 300.0, 12)
    ]


# ──────────────────────────────────────────────────────────────────────────────
# Canonical earth models
# ──────────────────────────────────────────────────────────────────────────────

@pytest.fixture(scope="session")
def ascending_model():
    """Conductive cover over a resistive basement (k12 > 0)."""
    return TwoLayerModel(rho1=10.0, rho2=100.0, h=5.0)


@pytest.fixture(scope="session")
def descending_model():
    """Resistive cover over a conductive basement (k12 < 0)."""
    return TwoLayerModel(rho1=100.0, rho2=10.0, h=5.0)
