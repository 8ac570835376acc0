"""
Signal level conversions: RMS/peak for sinusoids and decibel ratios.

Voltage ratios use 20·log10, power ratios 10·log10. voltage_ratio_to_db
gives -inf at a ratio of 0 and NaN for negative ratios.
"""

from typing import Iterable

import numpy as np

from eeformulas._numeric import ieee754

SQRT2 = np.sqrt(2.0)


@ieee754
def rms_sine(peak: float) -> float:
    """RMS of a sine wave: Vp/√2."""
    return np.divide(peak, SQRT2)


peak_to_rms = rms_sine


@ieee754
def rms_to_peak(rms_value: float) -> float:
    return np.multiply(rms_value, SQRT2)


@ieee754
def average_sine(peak: float) -> float:
    """Full-wave rectified average of a sine wave: 2·Vp/π."""
    return np.multiply(peak, 2.0 / np.pi)


@ieee754
def crest_factor(peak: float, rms_value: float) -> float:
    """Vp/Vrms; √2 for a sine wave."""
    return np.divide(peak, rms_value)


@ieee754
def rms(samples: Iterable[float]) -> float:
    """RMS of a sampled signal. NaN for an empty sequence."""
    values = np.asarray(list(samples), dtype=float)
    return np.sqrt(np.mean(np.square(values))) if values.size else np.float64(np.nan)


@ieee754
def db_to_voltage_ratio(db: float) -> float:
    return np.power(10.0, np.divide(db, 20.0))


@ieee754
def voltage_ratio_to_db(ratio: float) -> float:
    return 20.0 * np.log10(ratio)


@ieee754
def db_to_power_ratio(db: float) -> float:
    return np.power(10.0, np.divide(db, 10.0))


@ieee754
def power_ratio_to_db(ratio: float) -> float:
    return 10.0 * np.log10(ratio)
