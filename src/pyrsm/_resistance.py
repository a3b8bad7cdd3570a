"""
_resistance.py — resistance of a tetrapolar array over a layered half-space.

Both calculators are immutable function objects bound to one electrode
geometry.  They work on plain Python floats (IEEE-754 double precision), never
validate their numeric input and never raise for it: odd input propagates as
``inf``/``nan`` per floating-point rules.

References
----------
Koefoed, O. (1979), *Geosounding Principles 1: Resistivity Sounding
Measurements*, Elsevier, ch. 2 (method of images for a two-layer earth).
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pyrsm._types import ElectrodeSystem


def _same(a: float, b: float) -> bool:
    """Float equality that also treats NaN as equal to NaN."""
    return a == b or (a != a and b != b)


def get_k12(rho1: float, rho2: float) -> float:
    """Reflection coefficient ``(rho2 - rho1) / (rho2 + rho1)`` of the boundary."""
    return (rho2 - rho1) / (rho2 + rho1)


def get_rho1_to_rho2(k12: float) -> float:
    """Inverse of :func:`get_k12`: resistivity ratio ``rho1 / rho2`` for *k12*."""
    return (1.0 - k12) / (1.0 + k12)


class HomogeneousResistance:
    """Resistance (Ohm) of the array on a uniform half-space.

    Parameters
    ----------
    electrode_system : ElectrodeSystem
        Array geometry; only ``radius_minus`` and ``radius_plus`` are read.

    Notes
    -----
    The radii are the full distances ``|L - s|`` and ``L + s`` between the
    current (``L``) and potential (``s``) electrode spacings, i.e. twice the
    electrode-to-electrode distances of the symmetric array.  Summing the four
    point-source potentials of a half-space gives

        R = (2 rho / pi) * (1 / radius_minus - 1 / radius_plus)
    """

    __slots__ = ("_electrode_system",)

    def __init__(self, electrode_system: ElectrodeSystem) -> None:
        self._electrode_system = electrode_system

    @property
    def electrode_system(self) -> ElectrodeSystem:
        return self._electrode_system

    @staticmethod
    def two_rho_by_pi(rho: float) -> float:
        """Scaling ``2 rho / pi`` shared by the homogeneous term and the image series."""
        return 2.0 * rho / math.pi

    def value(self, rho: float) -> float:
        """Resistance in Ohm for resistivity *rho* in Ohm-m."""
        system = self._electrode_system
        return self.two_rho_by_pi(rho) * (1.0 / system.radius_minus - 1.0 / system.radius_plus)

    __call__ = value

    def apparent_resistivity(self, resistance: float) -> float:
        """Resistivity (Ohm-m) of the uniform medium that yields *resistance*."""
        return resistance * self._electrode_system.geometric_factor

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._electrode_system!r})"


class TwoLayerResistance:
    """Full resistance (Ohm) of the array on a two-layer half-space.

    The upper layer (``rho1``, thickness ``h``) lies on a semi-infinite lower
    layer (``rho2``).  The layer boundary is replaced by an infinite series of
    image sources at depths ``2nh`` weighted by ``k12**n``, which adds a
    correction to the homogeneous resistance of the upper layer::

        R = R1(rho1) + 2 * (2 rho1 / pi) * sum_{n>=1} k12**n *
            (1 / hypot(radius_minus, 4nh) - 1 / hypot(radius_plus, 4nh))

    The series is summed until a further term no longer changes the running
    total in double precision.  There is no iteration cap: the caller must
    guarantee ``rho1 > 0`` and ``rho2 > 0`` (hence ``|k12| < 1``), otherwise
    the loop may not terminate.

    Instances hold no mutable state and can be shared between threads.

    Parameters
    ----------
    electrode_system : ElectrodeSystem
        Array geometry.

    Examples
    --------
    >>> from pyrsm import ElectrodeSystem, TwoLayerResistance
    >>> r = TwoLayerResistance(ElectrodeSystem(radius_minus=0.1, radius_plus=0.3))
    >>> r.value(10.0, 10.0, 0.5) == r.homogeneous.value(10.0)
    True
    """

    __slots__ = ("_homogeneous",)

    def __init__(self, electrode_system: ElectrodeSystem) -> None:
        self._homogeneous = HomogeneousResistance(electrode_system)

    @property
    def homogeneous(self) -> HomogeneousResistance:
        return self._homogeneous

    @property
    def electrode_system(self) -> ElectrodeSystem:
        return self._homogeneous.electrode_system

    def value(self, rho1: float, rho2: float, h: float) -> float:
        """Resistance in Ohm.

        Parameters
        ----------
        rho1 : float
            Resistivity of the upper layer in Ohm-m.
        rho2 : float
            Resistivity of the lower layer in Ohm-m.
        h : float
            Thickness of the upper layer in metres.
        """
        resistance = self._homogeneous.value(rho1)
        # exact comparison: any nonzero contrast goes through the series
        if _same(rho1, rho2):
            return resistance
        series = self._sum(get_k12(rho1, rho2), h)
        return resistance + 2.0 * HomogeneousResistance.two_rho_by_pi(rho1) * series

    __call__ = value

    def term(self, n: int, k12: float, h: float) -> float:
        """The *n*-th image term of the series (without the ``2 * 2 rho1 / pi`` scale)."""
        system = self._homogeneous.electrode_system
        b = 4.0 * n * h
        return k12 ** n * (
            1.0 / math.hypot(system.radius_minus, b) - 1.0 / math.hypot(system.radius_plus, b)
        )

    def _sum(self, k12: float, h: float) -> float:
        total = 0.0
        n = 1
        while True:
            prev = total
            total += self.term(n, k12, h)
            # a NaN term leaves the total NaN, which also ends the loop
            if _same(total, prev):
                return total
            n += 1

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.electrode_system!r})"
