"""
AC circuit formulas.

Reactances and series impedance magnitudes for RL, RC and RLC circuits:

    ω   = 2πf
    X_L = ωL
    X_C = 1/(ωC)
    |Z| = sqrt(R² + (X_L - X_C)²)
    f₀  = 1/(2π·sqrt(LC))
    Q   = (1/R)·sqrt(L/C) = ω₀L/R

Frequencies in Hz, inductance in Henries, capacitance in Farads, reactance
and impedance in Ohms. Only impedance_rlc_complex returns a Complex; the
other impedance functions return magnitudes.
"""

import numpy as np

from eeformulas._numeric import ieee754
from eeformulas.complex_number import Complex


@ieee754
def angular_frequency(frequency: float) -> float:
    """ω = 2πf (rad/s)."""
    return 2 * np.pi * frequency


@ieee754
def inductive_reactance(frequency: float, inductance: float) -> float:
    return angular_frequency(frequency) * inductance


@ieee754
def capacitive_reactance(frequency: float, capacitance: float) -> float:
    """X_C = 1/(2πfC); inf at f = 0 or C = 0."""
    return np.divide(1.0, angular_frequency(frequency) * capacitance)


@ieee754
def impedance_rl(resistance: float, inductive_x: float) -> float:
    """|Z| of a series RL circuit."""
    return np.hypot(resistance, inductive_x)


@ieee754
def impedance_rc(resistance: float, capacitive_x: float) -> float:
    """|Z| of a series RC circuit."""
    return np.hypot(resistance, capacitive_x)


@ieee754
def impedance_rlc(resistance: float, inductive_x: float, capacitive_x: float) -> float:
    """|Z| of a series RLC circuit, using the net reactance X_L - X_C."""
    return np.hypot(resistance, np.subtract(inductive_x, capacitive_x))


@ieee754
def impedance_rlc_complex(resistance: float, inductive_x: float, capacitive_x: float) -> Complex:
    """Series RLC impedance as R + j(X_L - X_C)."""
    return Complex(resistance, inductive_x - capacitive_x)


@ieee754
def impedance_phase_angle(resistance: float, reactance: float) -> float:
    """Impedance angle in radians; positive for inductive loads."""
    return np.arctan2(reactance, resistance)


@ieee754
def resonance_frequency(inductance: float, capacitance: float) -> float:
    """f₀ = 1/(2π·sqrt(LC))"""
    return np.divide(1.0, 2 * np.pi * np.sqrt(np.multiply(inductance, capacitance)))


@ieee754
def quality_factor_rlc(inductance: float, capacitance: float, resistance: float) -> float:
    """Q of a series RLC circuit: (1/R)·sqrt(L/C)."""
    return np.divide(1.0, resistance) * np.sqrt(np.divide(inductance, capacitance))


@ieee754
def resonance_bandwidth(resonant_frequency: float, quality_factor: float) -> float:
    """-3 dB bandwidth in Hz: f₀/Q."""
    return np.divide(resonant_frequency, quality_factor)
