"""
Single-phase AC power.

    S = V·I            (VA)
    P = V·I·cos(φ)     (W)
    Q = V·I·sin(φ)     (var)
    PF = P/S = cos(φ)

φ is the angle between voltage and current, in radians. Power factor is
not clamped to [-1, 1]; power_factor_angle returns NaN outside that range.
"""

from dataclasses import dataclass

import numpy as np

from eeformulas._numeric import ieee754
from eeformulas.complex_number import Complex
from eeformulas.units import engineering_notation


@dataclass(frozen=True)
class PowerTriangle:
    """Apparent, active and reactive power at one operating point."""
    apparent: float       # VA
    active: float         # W
    reactive: float       # var
    power_factor: float

    def describe(self) -> str:
        return (
            f"S={engineering_notation(self.apparent, 'VA')}, "
            f"P={engineering_notation(self.active, 'W')}, "
            f"Q={engineering_notation(self.reactive, 'var')}, "
            f"PF={self.power_factor:.3f}"
        )


@ieee754
def apparent_power(voltage: float, current: float) -> float:
    return np.multiply(voltage, current)


@ieee754
def active_power(voltage: float, current: float, phi: float) -> float:
    return np.multiply(voltage, current) * np.cos(phi)


@ieee754
def reactive_power(voltage: float, current: float, phi: float) -> float:
    """Positive for lagging (inductive) loads."""
    return np.multiply(voltage, current) * np.sin(phi)


@ieee754
def power_factor(active: float, apparent: float) -> float:
    """PF = P/S, not clamped."""
    return np.divide(active, apparent)


@ieee754
def power_factor_angle(pf: float) -> float:
    """φ = arccos(PF) in radians; NaN for |PF| > 1."""
    return np.arccos(pf)


@ieee754
def apparent_power_from_pq(active: float, reactive: float) -> float:
    """S = sqrt(P² + Q²)"""
    return np.hypot(active, reactive)


@ieee754
def complex_power(voltage: float, current: float, phi: float) -> Complex:
    """S = P + jQ"""
    return Complex(active_power(voltage, current, phi), reactive_power(voltage, current, phi))


@ieee754
def power_triangle(voltage: float, current: float, phi: float) -> PowerTriangle:
    """Resolve V, I and φ into the full power triangle."""
    s = np.multiply(voltage, current)
    return PowerTriangle(
        apparent=s,
        active=s * np.cos(phi),
        reactive=s * np.sin(phi),
        power_factor=np.cos(phi),
    )
