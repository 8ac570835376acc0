"""Engineering-notation formatting of physical quantities."""

import math

_PREFIXES = (
    (1e12, 'T'),
    (1e9, 'G'),
    (1e6, 'M'),
    (1e3, 'k'),
    (1.0, ''),
    (1e-3, 'm'),
    (1e-6, 'µ'),
    (1e-9, 'n'),
    (1e-12, 'p'),
    (1e-15, 'f'),
)


def engineering_notation(value: float, unit: str = '', precision: int = 3) -> str:
    """
    Format a value with an SI prefix.

    Examples:
        engineering_notation(4700, 'Ω')    → '4.7kΩ'
        engineering_notation(100e-6, 'F')  → '100µF'
        engineering_notation(-0.047, 'H')  → '-47mH'
        engineering_notation(float('inf'), 'A') → 'infA'
    """
    value = float(value)
    if math.isnan(value) or math.isinf(value) or value == 0:
        return f"{value:g}{unit}"

    sign = '-' if value < 0 else ''
    magnitude = abs(value)

    for scale, prefix in _PREFIXES:
        if magnitude >= scale:
            break
    # below 1f the smallest prefix is kept

    scaled = float(f"{magnitude / scale:.{precision}g}")
    if scaled >= 1000 and scale < _PREFIXES[0][0]:
        # rounding carried into the next prefix, e.g. 999.96 → 1000
        index = next(i for i, (s, _) in enumerate(_PREFIXES) if s == scale)
        scale, prefix = _PREFIXES[index - 1]
        scaled = float(f"{magnitude / scale:.{precision}g}")

    return f"{sign}{scaled:g}{prefix}{unit}"
