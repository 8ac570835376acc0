"""
Tests for the validated formula variants.

Valid inputs must give the same results as the permissive API; invalid
inputs must raise ValueError (pydantic.ValidationError) instead of
returning inf/nan.
"""

import logging
import math

import pytest
import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(__file__))))

from pydantic import ValidationError

from eeformulas import strict
from eeformulas import dc, ac, power, motors, signals


class TestSameResults:
    """Validated variants agree with the permissive ones on valid input."""

    def test_ohm_law_current(self):
        assert strict.ohm_law_current(20.0, 10.0) == dc.ohm_law_current(20.0, 10.0)

    def test_resistance_parallel(self):
        assert strict.resistance_parallel(47.0, 68.0) == dc.resistance_parallel(47.0, 68.0)

    def test_resonance(self):
        assert strict.resonance_frequency(0.1, 100e-6) == ac.resonance_frequency(0.1, 100e-6)

    def test_power_factor_angle(self):
        assert strict.power_factor_angle(1.0) == 0.0
        assert strict.power_factor_angle(-1.0) == pytest.approx(math.pi)

    def test_synchronous_speed(self):
        assert strict.synchronous_speed(50.0, 2) == motors.synchronous_speed(50.0, 2)

    def test_voltage_ratio_to_db(self):
        assert strict.voltage_ratio_to_db(10.0) == signals.voltage_ratio_to_db(10.0)

    def test_turns_ratio(self):
        assert strict.transformer_turns_ratio(1000, 100) == 10.0

    def test_step_response_at_zero(self):
        assert strict.first_order_step_response(5.0, 0.0, 1.0) == 0.0

    def test_quality_factor(self):
        assert strict.quality_factor_rlc(0.1, 100e-6, 10.0) == ac.quality_factor_rlc(0.1, 100e-6, 10.0)

    def test_power_factor(self):
        assert strict.power_factor(800.0, 1000.0) == power.power_factor(800.0, 1000.0)


class TestRejection:
    """Out-of-domain inputs raise instead of propagating inf/nan."""

    @pytest.mark.parametrize('call', [
        lambda: strict.ohm_law_current(20.0, 0.0),
        lambda: strict.ohm_law_resistance(20.0, 0.0),
        lambda: strict.power_resistance_v(5.0, 0.0),
        lambda: strict.resistance_parallel(10.0, -10.0),
        lambda: strict.capacitive_reactance(0.0, 1e-6),
        lambda: strict.capacitive_reactance(50.0, 0.0),
        lambda: strict.resonance_frequency(-0.1, 1e-6),
        lambda: strict.quality_factor_rlc(0.1, 1e-6, 0.0),
        lambda: strict.power_factor(100.0, 0.0),
        lambda: strict.power_factor_angle(1.5),
        lambda: strict.transformer_turns_ratio(100, 0),
        lambda: strict.synchronous_speed(50.0, 0),
        lambda: strict.slip(0.0, 1440.0),
        lambda: strict.motor_torque(1000.0, 0.0),
        lambda: strict.voltage_ratio_to_db(0.0),
        lambda: strict.voltage_ratio_to_db(-1.0),
        lambda: strict.lowpass_cutoff_frequency(1e3, 0.0),
        lambda: strict.highpass_cutoff_frequency(0.0, 1e-9),
        lambda: strict.first_order_step_response(1.0, -1.0, 1.0),
        lambda: strict.first_order_step_response(1.0, 1.0, 0.0),
    ])
    def test_raises_value_error(self, call):
        with pytest.raises(ValueError):
            call()

    def test_validation_error_type(self):
        with pytest.raises(ValidationError):
            strict.ohm_law_current(20.0, 0.0)

    def test_nan_rejected_by_positive_constraint(self):
        with pytest.raises(ValueError):
            strict.resonance_frequency(float('nan'), 1e-6)

    @pytest.mark.parametrize('call', [
        lambda: strict.ohm_law_current(20.0, float('nan')),
        lambda: strict.ohm_law_current(20.0, float('inf')),
        lambda: strict.ohm_law_current(float('nan'), 10.0),
        lambda: strict.ohm_law_resistance(float('inf'), 2.0),
        lambda: strict.power_resistance_v(5.0, float('-inf')),
        lambda: strict.power_factor(float('nan'), 1000.0),
        lambda: strict.power_factor(800.0, float('inf')),
        lambda: strict.power_factor_angle(float('nan')),
        lambda: strict.slip(float('nan'), 1440.0),
        lambda: strict.slip(1500.0, float('inf')),
        lambda: strict.motor_torque(float('inf'), 157.0),
        lambda: strict.synchronous_speed(float('inf'), 2),
        lambda: strict.capacitive_reactance(float('inf'), 1e-6),
        lambda: strict.first_order_step_response(float('nan'), 1.0, 1.0),
        lambda: strict.first_order_step_response(1.0, float('inf'), 1.0),
    ])
    def test_non_finite_rejected(self, call):
        with pytest.raises(ValueError):
            call()

    def test_non_numeric_rejected(self):
        with pytest.raises(ValueError):
            strict.ohm_law_current('twenty', 10.0)

    def test_rejection_is_logged(self, caplog):
        with caplog.at_level(logging.WARNING, logger='eeformulas.strict'):
            with pytest.raises(ValueError):
                strict.power_factor_angle(2.0)
        assert 'power_factor_angle' in caplog.text

    def test_permissive_counterpart_unaffected(self):
        assert math.isinf(dc.ohm_law_current(20.0, 0.0))


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
