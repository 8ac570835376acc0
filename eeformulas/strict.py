"""
Validated variants of the domain-sensitive formulas.

The default API follows IEEE-754 and returns inf/nan for division by zero
or out-of-domain inputs. The functions here have the same names and give
the same results for valid inputs, but reject invalid ones with
pydantic.ValidationError (a ValueError subclass):

    >>> from eeformulas import strict
    >>> strict.ohm_law_current(20.0, 0.0)
    Traceback (most recent call last):
    ...
    pydantic_core._pydantic_core.ValidationError: 1 validation error for ohm_law_current
"""

import functools
import logging
from typing import Annotated

from pydantic import (
    AfterValidator,
    Field,
    PositiveInt,
    ValidationError,
    validate_call,
)

from eeformulas import ac, dc, electronics, motors, power, signals, transformers, transients

logger = logging.getLogger(__name__)


def _non_zero(value: float) -> float:
    if value == 0:
        raise ValueError("must be non-zero")
    return value


FiniteFloat = Annotated[float, Field(allow_inf_nan=False)]
NonZeroFloat = Annotated[float, Field(allow_inf_nan=False), AfterValidator(_non_zero)]
PositiveFloat = Annotated[float, Field(gt=0, allow_inf_nan=False)]
NonNegativeFloat = Annotated[float, Field(ge=0, allow_inf_nan=False)]
PowerFactor = Annotated[float, Field(ge=-1.0, le=1.0, allow_inf_nan=False)]


def _validated(func):
    """Validate arguments against annotations, logging rejections."""
    checked = validate_call(func)

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return checked(*args, **kwargs)
        except ValidationError as e:
            logger.warning("%s rejected input: %s", func.__name__, e.errors(include_url=False))
            raise

    return wrapper


# --- DC ---

@_validated
def ohm_law_current(voltage: FiniteFloat, resistance: NonZeroFloat) -> float:
    return dc.ohm_law_current(voltage, resistance)


@_validated
def ohm_law_resistance(voltage: FiniteFloat, current: NonZeroFloat) -> float:
    return dc.ohm_law_resistance(voltage, current)


@_validated
def power_resistance_v(voltage: FiniteFloat, resistance: NonZeroFloat) -> float:
    return dc.power_resistance_v(voltage, resistance)


@_validated
def resistance_parallel(r1: PositiveFloat, r2: PositiveFloat) -> float:
    return dc.resistance_parallel(r1, r2)


# --- AC ---

@_validated
def capacitive_reactance(frequency: PositiveFloat, capacitance: PositiveFloat) -> float:
    return ac.capacitive_reactance(frequency, capacitance)


@_validated
def resonance_frequency(inductance: PositiveFloat, capacitance: PositiveFloat) -> float:
    return ac.resonance_frequency(inductance, capacitance)


@_validated
def quality_factor_rlc(
    inductance: PositiveFloat,
    capacitance: PositiveFloat,
    resistance: PositiveFloat,
) -> float:
    return ac.quality_factor_rlc(inductance, capacitance, resistance)


# --- Power ---

@_validated
def power_factor(active: FiniteFloat, apparent: NonZeroFloat) -> float:
    return power.power_factor(active, apparent)


@_validated
def power_factor_angle(pf: PowerFactor) -> float:
    return power.power_factor_angle(pf)


# --- Transformers & motors ---

@_validated
def transformer_turns_ratio(n1: PositiveInt, n2: PositiveInt) -> float:
    return transformers.transformer_turns_ratio(n1, n2)


@_validated
def synchronous_speed(frequency: NonNegativeFloat, pole_pairs: PositiveInt) -> float:
    return motors.synchronous_speed(frequency, pole_pairs)


@_validated
def slip(synchronous_rpm: NonZeroFloat, rotor_rpm: FiniteFloat) -> float:
    return motors.slip(synchronous_rpm, rotor_rpm)


@_validated
def motor_torque(power: FiniteFloat, omega: NonZeroFloat) -> float:
    return motors.motor_torque(power, omega)


# --- Signals & electronics ---

@_validated
def voltage_ratio_to_db(ratio: PositiveFloat) -> float:
    return signals.voltage_ratio_to_db(ratio)


@_validated
def lowpass_cutoff_frequency(resistance: PositiveFloat, capacitance: PositiveFloat) -> float:
    return electronics.lowpass_cutoff_frequency(resistance, capacitance)


@_validated
def highpass_cutoff_frequency(resistance: PositiveFloat, capacitance: PositiveFloat) -> float:
    return electronics.highpass_cutoff_frequency(resistance, capacitance)


# --- Transients ---

@_validated
def first_order_step_response(final_value: FiniteFloat, t: NonNegativeFloat, tau: PositiveFloat) -> float:
    return transients.first_order_step_response(final_value, t, tau)
