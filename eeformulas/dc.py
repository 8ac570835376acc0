"""
DC circuit formulas.

Ohm's law, resistive power, series/parallel combination, dividers and
Kirchhoff law checks. Resistances in Ohms, voltages in Volts, currents in
Amperes, power in Watts.

Division by zero follows IEEE-754: ohm_law_current(20.0, 0.0) is inf,
not an exception. Callers wanting rejection should use eeformulas.strict.
"""

from typing import Iterable, Optional

import numpy as np

from eeformulas import config
from eeformulas._numeric import ieee754


@ieee754
def ohm_law_voltage(current: float, resistance: float) -> float:
    """V = I·R"""
    return np.multiply(current, resistance)


@ieee754
def ohm_law_current(voltage: float, resistance: float) -> float:
    """I = V/R"""
    return np.divide(voltage, resistance)


@ieee754
def ohm_law_resistance(voltage: float, current: float) -> float:
    """R = V/I"""
    return np.divide(voltage, current)


@ieee754
def power_vi(voltage: float, current: float) -> float:
    """P = V·I"""
    return np.multiply(voltage, current)


@ieee754
def power_resistance_i(current: float, resistance: float) -> float:
    """P = I²·R"""
    return np.multiply(np.square(current), resistance)


@ieee754
def power_resistance_v(voltage: float, resistance: float) -> float:
    """P = V²/R"""
    return np.divide(np.square(voltage), resistance)


@ieee754
def resistance_series(r1: float, r2: float) -> float:
    return np.add(r1, r2)


@ieee754
def resistance_parallel(r1: float, r2: float) -> float:
    """
    Two resistors in parallel: R1·R2 / (R1 + R2).

    Not guarded against R1 + R2 = 0.
    """
    return np.divide(np.multiply(r1, r2), np.add(r1, r2))


@ieee754
def resistance_series_total(resistances: Iterable[float]) -> float:
    """Sum of any number of series resistances."""
    return np.sum(np.asarray(list(resistances), dtype=float))


@ieee754
def resistance_parallel_total(resistances: Iterable[float]) -> float:
    """
    Any number of parallel resistances: 1 / Σ(1/Rk).

    A zero-Ohm branch shorts the combination to 0.
    """
    values = np.asarray(list(resistances), dtype=float)
    return np.divide(1.0, np.sum(np.divide(1.0, values)))


@ieee754
def conductance(resistance: float) -> float:
    """G = 1/R, in Siemens."""
    return np.divide(1.0, resistance)


@ieee754
def voltage_divider(vin: float, r1: float, r2: float) -> float:
    """Output across R2 of a two-resistor divider: Vin·R2/(R1 + R2)."""
    return np.multiply(vin, np.divide(r2, np.add(r1, r2)))


@ieee754
def current_divider(i_total: float, r1: float, r2: float) -> float:
    """Current through R1 of two parallel resistors: I·R2/(R1 + R2)."""
    return np.multiply(i_total, np.divide(r2, np.add(r1, r2)))


def _within_tolerance(values: Iterable[float], tolerance: Optional[float]) -> bool:
    if tolerance is None:
        tolerance = config.KIRCHHOFF_TOLERANCE
    with np.errstate(invalid='ignore', over='ignore'):
        total = np.sum(np.asarray(list(values), dtype=float))
    return bool(abs(total) <= tolerance)


def kcl_check(currents: Iterable[float], tolerance: Optional[float] = None) -> bool:
    """
    Kirchhoff's current law at a node.

    Currents are signed by the caller (e.g. entering positive, leaving
    negative). True iff |Σ I| <= tolerance. A NaN sum is never within
    tolerance.
    """
    return _within_tolerance(currents, tolerance)


def kvl_check(voltages: Iterable[float], tolerance: Optional[float] = None) -> bool:
    """
    Kirchhoff's voltage law around a loop.

    Voltages are signed by the caller (rises positive, drops negative).
    True iff |Σ V| <= tolerance.
    """
    return _within_tolerance(voltages, tolerance)
