"""
Complex number helper for AC phasor arithmetic.

Complex(real, imag) is an immutable value; every operation returns a new
instance. Impedances and phasors are written in rectangular form:

    Z = R + jX
    |Z| = sqrt(R² + X²)
    ∠Z = atan2(X, R)

No validation is performed. NaN and infinity pass through unchanged and
division by the zero value yields inf/nan components rather than raising.
"""

from dataclasses import dataclass

import numpy as np

from eeformulas._numeric import ieee754


@dataclass(frozen=True)
class Complex:
    """A phasor or impedance value in rectangular form."""
    real: float
    imag: float

    @classmethod
    def from_builtin(cls, z: complex) -> 'Complex':
        """Build from a Python ``complex``."""
        return cls(z.real, z.imag)

    @classmethod
    def from_polar(cls, magnitude: float, angle: float) -> 'Complex':
        """Build from magnitude and angle (radians)."""
        return complex_from_polar(magnitude, angle)

    def __add__(self, other: 'Complex') -> 'Complex':
        return complex_add(self, other)

    def __sub__(self, other: 'Complex') -> 'Complex':
        return complex_subtract(self, other)

    def __mul__(self, other: 'Complex') -> 'Complex':
        return complex_multiply(self, other)

    def __truediv__(self, other: 'Complex') -> 'Complex':
        return complex_divide(self, other)

    def __neg__(self) -> 'Complex':
        return Complex(-self.real, -self.imag)

    def __abs__(self) -> float:
        return complex_magnitude(self)

    def __complex__(self) -> complex:
        return complex(self.real, self.imag)

    def __str__(self) -> str:
        sign = '-' if np.signbit(self.imag) else '+'
        return f"{self.real:g}{sign}{abs(self.imag):g}j"


def complex_number(real: float, imag: float) -> Complex:
    """Construct a Complex from its rectangular components."""
    return Complex(real, imag)


@ieee754
def complex_add(a: Complex, b: Complex) -> Complex:
    return Complex(a.real + b.real, a.imag + b.imag)


@ieee754
def complex_subtract(a: Complex, b: Complex) -> Complex:
    return Complex(a.real - b.real, a.imag - b.imag)


@ieee754
def complex_multiply(a: Complex, b: Complex) -> Complex:
    """(a + jb)(c + jd) = (ac - bd) + j(ad + bc)"""
    return Complex(
        a.real * b.real - a.imag * b.imag,
        a.real * b.imag + a.imag * b.real,
    )


@ieee754
def complex_divide(a: Complex, b: Complex) -> Complex:
    """
    Divide a by b.

    Uses a · conj(b) / |b|². Dividing by the zero value gives inf/nan
    components.
    """
    denominator = np.float64(b.real) ** 2 + np.float64(b.imag) ** 2
    numerator = complex_multiply(a, complex_conjugate(b))
    return Complex(
        np.divide(numerator.real, denominator),
        np.divide(numerator.imag, denominator),
    )


@ieee754
def complex_conjugate(z: Complex) -> Complex:
    return Complex(z.real, -z.imag)


@ieee754
def complex_magnitude(z: Complex) -> float:
    """sqrt(real² + imag²); always ≥ 0 and exactly 0 for the zero value."""
    return np.hypot(z.real, z.imag)


@ieee754
def complex_phase(z: Complex) -> float:
    """
    Phase angle in radians, with atan2 semantics.

    Returns ±π/2 on the imaginary axis and 0 at the origin.
    """
    return np.arctan2(z.imag, z.real)


@ieee754
def complex_from_polar(magnitude: float, angle: float) -> Complex:
    """Construct from magnitude and angle in radians."""
    return Complex(magnitude * np.cos(angle), magnitude * np.sin(angle))


@ieee754
def degrees_to_radians(degrees: float) -> float:
    return np.deg2rad(degrees)


@ieee754
def radians_to_degrees(radians: float) -> float:
    return np.rad2deg(radians)
