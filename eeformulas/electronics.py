"""
Basic electronics: diode drops, op-amp gains and first-order filter
frequencies.

The diode forward voltages are fixed rule-of-thumb values for
conducting junctions, not solutions of the Shockley diode equation.
"""

import numpy as np

from eeformulas._numeric import ieee754
from eeformulas.ac import resonance_frequency

SILICON_FORWARD_VOLTAGE = 0.7     # V
GERMANIUM_FORWARD_VOLTAGE = 0.3   # V


def diode_forward_voltage(is_silicon: bool = True) -> float:
    """Approximate forward drop of a conducting silicon or germanium diode."""
    return SILICON_FORWARD_VOLTAGE if is_silicon else GERMANIUM_FORWARD_VOLTAGE


@ieee754
def opamp_inverting_gain(rf: float, rin: float) -> float:
    """Closed-loop gain -Rf/Rin."""
    return -np.divide(rf, rin)


@ieee754
def opamp_non_inverting_gain(rf: float, rin: float) -> float:
    """Closed-loop gain 1 + Rf/Rin."""
    return 1.0 + np.divide(rf, rin)


@ieee754
def lowpass_cutoff_frequency(resistance: float, capacitance: float) -> float:
    """-3 dB frequency of a first-order RC low-pass: 1/(2πRC)."""
    return np.divide(1.0, 2 * np.pi * np.multiply(resistance, capacitance))


@ieee754
def highpass_cutoff_frequency(resistance: float, capacitance: float) -> float:
    """-3 dB frequency of a first-order RC high-pass; same as the low-pass."""
    return lowpass_cutoff_frequency(resistance, capacitance)


@ieee754
def rl_cutoff_frequency(resistance: float, inductance: float) -> float:
    """-3 dB frequency of a first-order RL filter: R/(2πL)."""
    return np.divide(resistance, np.multiply(2 * np.pi, inductance))


@ieee754
def bandpass_center_frequency(inductance: float, capacitance: float) -> float:
    """Centre frequency of an LC band-pass: 1/(2π·sqrt(LC))."""
    return resonance_frequency(inductance, capacitance)


@ieee754
def bandpass_center_from_cutoffs(f_low: float, f_high: float) -> float:
    """Geometric centre of two cutoff frequencies."""
    return np.sqrt(np.multiply(f_low, f_high))


@ieee754
def led_series_resistor(v_supply: float, v_forward: float, current: float) -> float:
    """Current-limiting resistor for an LED: (Vs - Vf)/I."""
    return np.divide(np.subtract(v_supply, v_forward), current)
