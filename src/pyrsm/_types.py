"""
_types.py — dtype aliases and data structures for pyrsm.

Value types only; the resistance kernels live in ``_resistance.py`` and work
on plain floats, not on these objects.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from pathlib import Path

import numpy as np

from pyrsm._resistance import get_k12, get_rho1_to_rho2

# ── dtype aliases ──────────────────────────────────────────────────────────────
FLOAT = np.float64


# ── physical constants ─────────────────────────────────────────────────────────
PI: float = np.pi


# ── ElectrodeSystem dataclass ──────────────────────────────────────────────────
@dataclass(frozen=True)
class ElectrodeSystem:
    """Tetrapolar (four-electrode) linear array reduced to two radii.

    Parameters
    ----------
    radius_minus : float
        Difference of the current and potential electrode spacings in metres.
    radius_plus : float
        Sum of the current and potential electrode spacings in metres.
    """
    radius_minus: float
    radius_plus: float

    def __post_init__(self) -> None:
        # frozen dataclass: bypass __setattr__ to store the coerced values
        object.__setattr__(self, "radius_minus", float(self.radius_minus))
        object.__setattr__(self, "radius_plus", float(self.radius_plus))
        for name in ("radius_minus", "radius_plus"):
            value = getattr(self, name)
            if not math.isfinite(value) or value <= 0.0:
                raise ValueError(f"{name} must be finite and positive, got {value}")

    @property
    def geometric_factor(self) -> float:
        """Factor K (metres) with ``apparent resistivity = K * resistance``."""
        return PI / (2.0 * (1.0 / self.radius_minus - 1.0 / self.radius_plus))

    # ── factory methods ────────────────────────────────────────────────────────
    @classmethod
    def from_spacings(cls, potential: float, current: float) -> "ElectrodeSystem":
        """Build from electrode spacings of a symmetric linear array.

        Current electrodes are ``current`` metres apart, potential electrodes
        ``potential`` metres apart, both pairs sharing the same centre.

        Example
        -------
        >>> s = ElectrodeSystem.from_spacings(potential=10.0, current=30.0)
        >>> (s.radius_minus, s.radius_plus)
        (20.0, 40.0)
        """
        if potential <= 0.0 or current <= 0.0:
            raise ValueError(
                f"Electrode spacings must be positive, got potential={potential}, "
                f"current={current}"
            )
        if potential == current:
            raise ValueError(
                f"Potential and current spacings coincide ({potential}); "
                "electrodes would overlap."
            )
        return cls(radius_minus=abs(current - potential), radius_plus=current + potential)

    @classmethod
    def from_file(cls, path: str | Path) -> list["ElectrodeSystem"]:
        """Read electrode systems from a text file.

        File format::

            N_systems
            potential  current   (systems 1..N, metres)

        ``#`` comment lines and blank lines are skipped.  Malformed content
        raises ``ValueError`` naming the offending line number.
        """
        path = Path(path)
        with open(path) as fh:
            entries = [
                (lineno, text)
                for lineno, text in ((i, raw.strip()) for i, raw in enumerate(fh, start=1))
                if text and not text.startswith("#")
            ]
        if not entries:
            raise ValueError(f"{path}: no system count found (file is empty or comments only).")

        header_no, header = entries[0]
        try:
            n = int(header)
        except ValueError:
            raise ValueError(f"{path}:{header_no}: expected the number of systems, got {header!r}.") from None
        data = entries[1:]
        if len(data) < n:
            raise ValueError(f"{path}: declares {n} systems but only {len(data)} data lines found.")

        systems = []
        for lineno, text in data[:n]:
            fields = text.split()
            if len(fields) != 2:
                raise ValueError(
                    f"{path}:{lineno}: expected 'potential current', got {len(fields)} values."
                )
            try:
                potential, current = map(float, fields)
            except ValueError:
                raise ValueError(f"{path}:{lineno}: non-numeric spacing in {text!r}.") from None
            systems.append(cls.from_spacings(potential=potential, current=current))
        return systems


# ── TwoLayerModel dataclass ────────────────────────────────────────────────────
@dataclass
class TwoLayerModel:
    """Upper layer of finite thickness over a semi-infinite lower layer.

    Parameters
    ----------
    rho1 : float
        Resistivity of the upper layer in Ohm-m.
    rho2 : float
        Resistivity of the lower layer (halfspace) in Ohm-m.
    h : float
        Thickness of the upper layer in metres.
    """
    rho1: float
    rho2: float
    h:    float

    def __post_init__(self) -> None:
        self.rho1 = float(self.rho1)
        self.rho2 = float(self.rho2)
        self.h    = float(self.h)
        if not all(math.isfinite(v) for v in (self.rho1, self.rho2, self.h)):
            raise ValueError(
                f"Model parameters must be finite, got rho1={self.rho1}, "
                f"rho2={self.rho2}, h={self.h}"
            )
        if self.rho1 <= 0.0 or self.rho2 <= 0.0:
            raise ValueError(
                f"Resistivities must be positive, got rho1={self.rho1}, rho2={self.rho2}"
            )
        if self.h < 0.0:
            raise ValueError(f"h must be non-negative, got {self.h}")

    @property
    def k12(self) -> float:
        """Reflection coefficient of the layer boundary."""
        return get_k12(self.rho1, self.rho2)

    @classmethod
    def from_k12(cls, k12: float, rho1: float, h: float) -> "TwoLayerModel":
        """Build a model from the reflection coefficient instead of ``rho2``.

        Example
        -------
        >>> round(TwoLayerModel.from_k12(0.5, rho1=10.0, h=2.0).rho2, 9)
        30.0
        """
        if not -1.0 < k12 < 1.0:
            raise ValueError(f"k12 must lie in (-1, 1), got {k12}")
        return cls(rho1=rho1, rho2=rho1 / get_rho1_to_rho2(k12), h=h)


# ── SoundingResult dataclass ───────────────────────────────────────────────────
@dataclass
class SoundingResult:
    """Output of :func:`pyrsm.compute_sounding`.

    Attributes
    ----------
    resistance : np.ndarray
        Resistance in Ohm, shape *(n_systems,)*.
    apparent_resistivity : np.ndarray
        Apparent resistivity in Ohm-m, shape *(n_systems,)*.
    """
    resistance:           np.ndarray
    apparent_resistivity: np.ndarray
