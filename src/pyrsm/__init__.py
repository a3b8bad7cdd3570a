"""
pyrsm — resistance of a tetrapolar electrode array on a layered half-space.

Forward model for geoelectric (vertical electrical) sounding: the resistance
measured by a four-electrode linear array over a homogeneous or a two-layer
earth, computed with the method of electrical images.

Public API
----------
compute_sounding(model, systems)  ->  SoundingResult
TwoLayerModel(rho1, rho2, h)
TwoLayerModel.from_k12(k12, rho1, h)
ElectrodeSystem(radius_minus, radius_plus)
ElectrodeSystem.from_spacings(potential, current)
ElectrodeSystem.from_file(path)
HomogeneousResistance(system).value(rho)
TwoLayerResistance(system).value(rho1, rho2, h)
get_k12(rho1, rho2), get_rho1_to_rho2(k12)
"""

from __future__ import annotations

import logging
from typing import Sequence, Union

import numpy as np

from pyrsm._resistance import (
    HomogeneousResistance,
    TwoLayerResistance,
    get_k12,
    get_rho1_to_rho2,
)
from pyrsm._types import FLOAT, ElectrodeSystem, SoundingResult, TwoLayerModel
from pyrsm.logging_config import setup_logging

__version__ = "0.1.0"
__all__ = [
    "compute_sounding",
    "ElectrodeSystem",
    "TwoLayerModel",
    "SoundingResult",
    "HomogeneousResistance",
    "TwoLayerResistance",
    "get_k12",
    "get_rho1_to_rho2",
    "setup_logging",
]

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())


def compute_sounding(
    model: TwoLayerModel,
    systems: Union[ElectrodeSystem, Sequence[ElectrodeSystem]],
) -> SoundingResult:
    """Compute resistance and apparent resistivity for each electrode system.

    Parameters
    ----------
    model : TwoLayerModel
        Two-layer earth model (validated on construction).
    systems : ElectrodeSystem or sequence of ElectrodeSystem
        Array geometries, typically with growing spacing along a sounding.

    Returns
    -------
    SoundingResult
        ``resistance`` (Ohm) and ``apparent_resistivity`` (Ohm-m), one entry
        per system, in input order.

    Examples
    --------
    >>> from pyrsm import compute_sounding, ElectrodeSystem, TwoLayerModel
    >>> systems = [ElectrodeSystem.from_spacings(1.0, l) for l in (3.0, 10.0, 30.0)]
    >>> result = compute_sounding(TwoLayerModel(rho1=10.0, rho2=100.0, h=2.0), systems)
    >>> result.apparent_resistivity.shape
    (3,)
    """
    if isinstance(systems, ElectrodeSystem):
        systems = [systems]
    if len(systems) == 0:
        raise ValueError("systems must contain at least one ElectrodeSystem")

    logger.debug(
        "Sounding over %d electrode systems: rho1=%g, rho2=%g, h=%g",
        len(systems), model.rho1, model.rho2, model.h,
    )

    resistance = np.empty(len(systems), dtype=FLOAT)
    apparent = np.empty(len(systems), dtype=FLOAT)
    for i, system in enumerate(systems):
        calculator = TwoLayerResistance(system)
        resistance[i] = calculator.value(model.rho1, model.rho2, model.h)
        apparent[i] = calculator.homogeneous.apparent_resistivity(resistance[i])

    return SoundingResult(resistance=resistance, apparent_resistivity=apparent)
