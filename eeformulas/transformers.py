"""
Ideal transformer relations.

    a  = N1/N2
    V2 = V1·N2/N1
    I2 = I1·N1/N2
    Z' = Z·(N1/N2)²

Turns are integer counts; results are floats. Reflection direction is
chosen by which winding is passed as n1: Z on the N2 side seen from the
N1 side is transformer_impedance_reflection(z, n1, n2).
"""

import numpy as np

from eeformulas._numeric import ieee754


@ieee754
def transformer_turns_ratio(n1: int, n2: int) -> float:
    return np.divide(n1, n2)


@ieee754
def transformer_voltage_ratio(v1: float, n1: int, n2: int) -> float:
    """Secondary voltage for primary voltage V1."""
    return np.divide(np.multiply(v1, n2), n1)


@ieee754
def transformer_current_ratio(i1: float, n1: int, n2: int) -> float:
    """Secondary current for primary current I1."""
    return np.divide(np.multiply(i1, n1), n2)


@ieee754
def transformer_impedance_reflection(impedance: float, n1: int, n2: int) -> float:
    return np.multiply(impedance, np.square(np.divide(n1, n2)))


@ieee754
def transformer_efficiency(p_out: float, p_in: float) -> float:
    """η = Pout/Pin as a fraction; 0 < Pout <= Pin is not enforced."""
    return np.divide(p_out, p_in)


@ieee754
def transformer_voltage_regulation(v_no_load: float, v_full_load: float) -> float:
    """(V_nl - V_fl)/V_fl as a fraction."""
    return np.divide(np.subtract(v_no_load, v_full_load), v_full_load)
