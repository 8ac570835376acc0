"""
eeformulas

Closed-form electrical engineering formulas: DC/AC circuits, power
systems, transformers, motors, three-phase systems, signal levels,
basic electronics and first-order transients.

Every function is pure. Division by zero and out-of-domain inputs follow
IEEE-754 (inf/nan) rather than raising; eeformulas.strict provides
validated variants that raise instead.
"""

from eeformulas.complex_number import (
    Complex, complex_number, complex_add, complex_subtract, complex_multiply,
    complex_divide, complex_conjugate, complex_magnitude, complex_phase,
    complex_from_polar, degrees_to_radians, radians_to_degrees,
)
from eeformulas.dc import (
    ohm_law_voltage, ohm_law_current, ohm_law_resistance, power_vi,
    power_resistance_i, power_resistance_v, resistance_series, resistance_parallel,
    resistance_series_total, resistance_parallel_total, conductance,
    voltage_divider, current_divider, kcl_check, kvl_check,
)
from eeformulas.ac import (
    angular_frequency, inductive_reactance, capacitive_reactance, impedance_rl,
    impedance_rc, impedance_rlc, impedance_rlc_complex, impedance_phase_angle,
    resonance_frequency, quality_factor_rlc, resonance_bandwidth,
)
from eeformulas.power import (
    PowerTriangle, apparent_power, active_power, reactive_power, power_factor,
    power_factor_angle, apparent_power_from_pq, complex_power, power_triangle,
)
from eeformulas.transformers import (
    transformer_turns_ratio, transformer_voltage_ratio, transformer_current_ratio,
    transformer_impedance_reflection, transformer_efficiency,
    transformer_voltage_regulation,
)
from eeformulas.motors import (
    synchronous_speed, slip, induction_motor_speed, motor_torque, motor_efficiency,
    motor_input_power, motor_output_power, rpm_to_angular_velocity,
    motor_torque_from_rpm,
)
from eeformulas.three_phase import (
    three_phase_power_star, three_phase_power_delta, three_phase_apparent_power,
    line_to_phase_voltage_star, phase_to_line_voltage_star,
    line_to_phase_current_delta, phase_to_line_current_delta,
    short_circuit_current, short_circuit_current_rx, three_phase_short_circuit_current,
)
from eeformulas.signals import (
    rms_sine, peak_to_rms, rms_to_peak, average_sine, crest_factor, rms,
    db_to_voltage_ratio, voltage_ratio_to_db, db_to_power_ratio, power_ratio_to_db,
)
from eeformulas.electronics import (
    SILICON_FORWARD_VOLTAGE, GERMANIUM_FORWARD_VOLTAGE, diode_forward_voltage,
    opamp_inverting_gain, opamp_non_inverting_gain, lowpass_cutoff_frequency,
    highpass_cutoff_frequency, rl_cutoff_frequency, bandpass_center_frequency,
    bandpass_center_from_cutoffs, led_series_resistor,
)
from eeformulas.transients import (
    first_order_time_constant, rl_time_constant, first_order_step_response,
    capacitor_charging_voltage, capacitor_discharging_voltage,
    inductor_current_rise, inductor_current_decay, settling_time,
    capacitor_energy, inductor_energy,
)
from eeformulas.sweep import (
    generate_frequencies, rlc_impedance_sweep, rc_lowpass_response,
    rc_highpass_response, find_resonance,
)
from eeformulas.units import engineering_notation

__version__ = "0.1.0"
