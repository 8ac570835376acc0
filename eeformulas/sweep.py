"""
Frequency-sweep evaluation of AC formulas.

The scalar formulas broadcast over numpy arrays, so a sweep is the same
formula applied to a log-spaced frequency array. Series RLC impedance:

    Z(f) = R + j·(2πf·L - 1/(2πf·C))

First-order RC filters driving no load:

    H_lp(f) = 1 / (1 + j·f/fc)
    H_hp(f) = j·f/fc / (1 + j·f/fc)
"""

from typing import Dict, Optional

import numpy as np

from eeformulas._numeric import ieee754
from eeformulas.ac import capacitive_reactance, inductive_reactance
from eeformulas.electronics import lowpass_cutoff_frequency


@ieee754
def generate_frequencies(
    start: float = 20.0,
    end: float = 20000.0,
    num_points: int = 500,
) -> np.ndarray:
    """Generate logarithmically-spaced frequency array (Hz)."""
    return np.logspace(np.log10(start), np.log10(end), num_points)


@ieee754
def rlc_impedance_sweep(
    resistance: float,
    inductance: float,
    capacitance: Optional[float],
    frequencies: np.ndarray,
) -> np.ndarray:
    """
    Complex impedance of a series R-L-C branch at each frequency.

    Args:
        resistance: Series resistance (Ohms)
        inductance: Series inductance (H); 0 for no inductor
        capacitance: Series capacitance (F); None for no capacitor
        frequencies: Frequencies in Hz

    Returns:
        Complex impedance array (Ohms). Use np.abs() for magnitude.
    """
    frequencies = np.asarray(frequencies, dtype=float)
    reactance = inductive_reactance(frequencies, inductance)
    if capacitance is not None:
        reactance = reactance - capacitive_reactance(frequencies, capacitance)
    # assigned per component so an infinite reactance leaves R intact
    impedance = np.empty(np.shape(reactance), dtype=complex)
    impedance.real = resistance
    impedance.imag = reactance
    return impedance


def _response(H: np.ndarray, frequencies: np.ndarray, cutoff: float) -> Dict:
    magnitude_db = 20 * np.log10(np.maximum(np.abs(H), 1e-10))
    return {
        'frequencies': frequencies.tolist(),
        'magnitude_db': magnitude_db.tolist(),
        'phase_deg': np.degrees(np.angle(H)).tolist(),
        'cutoff_frequency': float(cutoff),
    }


@ieee754
def rc_lowpass_response(resistance: float, capacitance: float, frequencies: np.ndarray) -> Dict:
    """Magnitude (dB) and phase (degrees) of a first-order RC low-pass."""
    frequencies = np.asarray(frequencies, dtype=float)
    fc = lowpass_cutoff_frequency(resistance, capacitance)
    H = 1.0 / (1.0 + 1j * frequencies / fc)
    return _response(H, frequencies, fc)


@ieee754
def rc_highpass_response(resistance: float, capacitance: float, frequencies: np.ndarray) -> Dict:
    """Magnitude (dB) and phase (degrees) of a first-order RC high-pass."""
    frequencies = np.asarray(frequencies, dtype=float)
    fc = lowpass_cutoff_frequency(resistance, capacitance)
    ratio = 1j * frequencies / fc
    H = ratio / (1.0 + ratio)
    return _response(H, frequencies, fc)


def find_resonance(frequencies: np.ndarray, impedance: np.ndarray) -> float:
    """
    Frequency of minimum |Z| in a swept series-resonant impedance.

    Raises ValueError for an empty sweep.
    """
    return float(np.asarray(frequencies)[np.argmin(np.abs(impedance))])
