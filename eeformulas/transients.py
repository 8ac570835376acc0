"""
First-order control systems and RC/RL transients.

    τ_RC = R·C          τ_RL = L/R
    y(t) = y∞·(1 - e^(-t/τ))            step response from rest
    Vc(t) = V0·(1 - e^(-t/RC))          charging
    Vc(t) = V0·e^(-t/RC)                discharging
    iL(t) = I∞·(1 - e^(-tR/L))          current rise
    iL(t) = I0·e^(-tR/L)                current decay

Time in seconds.
"""

import numpy as np

from eeformulas._numeric import ieee754


@ieee754
def first_order_time_constant(resistance: float, capacitance: float) -> float:
    """τ = RC"""
    return np.multiply(resistance, capacitance)


@ieee754
def rl_time_constant(inductance: float, resistance: float) -> float:
    """τ = L/R"""
    return np.divide(inductance, resistance)


@ieee754
def first_order_step_response(final_value: float, t: float, tau: float) -> float:
    return np.multiply(final_value, 1.0 - np.exp(-np.divide(t, tau)))


@ieee754
def capacitor_charging_voltage(v0: float, t: float, resistance: float, capacitance: float) -> float:
    """Capacitor voltage t seconds after connecting an uncharged C to V0 through R."""
    tau = first_order_time_constant(resistance, capacitance)
    return np.multiply(v0, 1.0 - np.exp(-np.divide(t, tau)))


@ieee754
def capacitor_discharging_voltage(v0: float, t: float, resistance: float, capacitance: float) -> float:
    """Voltage of a C charged to V0, t seconds into discharging through R."""
    tau = first_order_time_constant(resistance, capacitance)
    return np.multiply(v0, np.exp(-np.divide(t, tau)))


@ieee754
def inductor_current_rise(i_final: float, t: float, inductance: float, resistance: float) -> float:
    return np.multiply(i_final, 1.0 - np.exp(-np.divide(t, rl_time_constant(inductance, resistance))))


@ieee754
def inductor_current_decay(i0: float, t: float, inductance: float, resistance: float) -> float:
    return np.multiply(i0, np.exp(-np.divide(t, rl_time_constant(inductance, resistance))))


@ieee754
def settling_time(tau: float, band: float = 0.02) -> float:
    """
    Time for a first-order step response to stay within ``band`` of its
    final value: -τ·ln(band). About 3.9τ for the 2% band.
    """
    return -np.multiply(tau, np.log(band))


@ieee754
def capacitor_energy(capacitance: float, voltage: float) -> float:
    """Stored energy ½CV² in Joules."""
    return 0.5 * np.multiply(capacitance, np.square(voltage))


@ieee754
def inductor_energy(inductance: float, current: float) -> float:
    """Stored energy ½LI² in Joules."""
    return 0.5 * np.multiply(inductance, np.square(current))
