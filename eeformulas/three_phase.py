"""
Balanced three-phase systems.

Power is expressed in line quantities, which makes the same expression
valid for star and delta connections:

    P = √3·V_L·I_L·PF

Star:  V_L = √3·V_ph,  I_L = I_ph
Delta: V_L = V_ph,     I_L = √3·I_ph
"""

from typing import Union

import numpy as np

from eeformulas._numeric import ieee754
from eeformulas.ac import impedance_rl
from eeformulas.complex_number import Complex, complex_magnitude

SQRT3 = np.sqrt(3.0)


@ieee754
def three_phase_power_star(v_line: float, i_line: float, pf: float) -> float:
    """Active power (W) of a star-connected load from line quantities."""
    return SQRT3 * np.multiply(np.multiply(v_line, i_line), pf)


@ieee754
def three_phase_power_delta(v_line: float, i_line: float, pf: float) -> float:
    """Active power (W) of a delta-connected load from line quantities."""
    return three_phase_power_star(v_line, i_line, pf)


@ieee754
def three_phase_apparent_power(v_line: float, i_line: float) -> float:
    return SQRT3 * np.multiply(v_line, i_line)


@ieee754
def line_to_phase_voltage_star(v_line: float) -> float:
    return np.divide(v_line, SQRT3)


@ieee754
def phase_to_line_voltage_star(v_phase: float) -> float:
    return np.multiply(v_phase, SQRT3)


@ieee754
def line_to_phase_current_delta(i_line: float) -> float:
    return np.divide(i_line, SQRT3)


@ieee754
def phase_to_line_current_delta(i_phase: float) -> float:
    return np.multiply(i_phase, SQRT3)


def _impedance_magnitude(impedance: Union[float, Complex]) -> float:
    if isinstance(impedance, Complex):
        return complex_magnitude(impedance)
    return np.abs(impedance)


@ieee754
def short_circuit_current(v_source: float, z_total: Union[float, Complex]) -> float:
    """
    Prospective fault current V/|Z|.

    Args:
        v_source: Source voltage (V)
        z_total: Total loop impedance, as a magnitude (Ohms) or a Complex
    """
    return np.divide(v_source, _impedance_magnitude(z_total))


@ieee754
def short_circuit_current_rx(v_source: float, resistance: float, reactance: float) -> float:
    """Fault current through a loop of resistance R and reactance X."""
    return np.divide(v_source, impedance_rl(resistance, reactance))


@ieee754
def three_phase_short_circuit_current(v_line: float, z_phase: Union[float, Complex]) -> float:
    """Symmetrical fault current: V_L/(√3·|Z_ph|)."""
    return np.divide(v_line, SQRT3 * _impedance_magnitude(z_phase))
