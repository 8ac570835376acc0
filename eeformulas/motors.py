"""
Motor formulas: synchronous speed, induction-motor slip, torque and
efficiency.

Speeds are in RPM except where angular velocity (rad/s) is named.
"""

import numpy as np

from eeformulas._numeric import ieee754


@ieee754
def synchronous_speed(frequency: float, pole_pairs: int) -> float:
    """
    Synchronous speed in RPM: 60·f/p.

    Args:
        frequency: Supply frequency (Hz)
        pole_pairs: Number of pole pairs (a 4-pole machine has 2)
    """
    return np.divide(np.multiply(60.0, frequency), pole_pairs)


@ieee754
def slip(synchronous_rpm: float, rotor_rpm: float) -> float:
    """s = (ns - n)/ns"""
    return np.divide(np.subtract(synchronous_rpm, rotor_rpm), synchronous_rpm)


@ieee754
def induction_motor_speed(synchronous_rpm: float, slip_fraction: float) -> float:
    """n = ns·(1 - s)"""
    return np.multiply(synchronous_rpm, np.subtract(1.0, slip_fraction))


@ieee754
def motor_torque(power: float, omega: float) -> float:
    """T = P/ω, with ω in rad/s. Returns N·m."""
    return np.divide(power, omega)


@ieee754
def motor_efficiency(p_out: float, p_in: float) -> float:
    return np.divide(p_out, p_in)


@ieee754
def motor_input_power(p_out: float, efficiency: float) -> float:
    """Electrical input needed for a shaft output at efficiency η."""
    return np.divide(p_out, efficiency)


@ieee754
def motor_output_power(p_in: float, efficiency: float) -> float:
    return np.multiply(p_in, efficiency)


@ieee754
def rpm_to_angular_velocity(rpm: float) -> float:
    """ω = 2π·n/60"""
    return 2 * np.pi * np.divide(rpm, 60.0)


@ieee754
def motor_torque_from_rpm(power: float, rpm: float) -> float:
    return np.divide(power, rpm_to_angular_velocity(rpm))
