"""
IEEE-754 evaluation for formula functions.

Every formula in the library is evaluated through numpy so that division
by zero, out-of-domain arccos/log10/sqrt and overflow propagate as
inf/nan instead of raising. Python floats would raise ZeroDivisionError
on ``x / 0.0``; numpy scalars do not.
"""

import dataclasses
import functools
import logging

import numpy as np

logger = logging.getLogger(__name__)


def ieee754(func):
    """Evaluate ``func`` with numpy floating-point errors silenced."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
            result = func(*args, **kwargs)
        if logger.isEnabledFor(logging.DEBUG) and _is_non_finite(result):
            logger.debug("%s%r produced non-finite result %r", func.__name__, args, result)
        return result

    return wrapper


def _is_non_finite(result) -> bool:
    if dataclasses.is_dataclass(result):
        return any(_is_non_finite(getattr(result, f.name)) for f in dataclasses.fields(result))
    if isinstance(result, (float, np.ndarray)):
        return not np.all(np.isfinite(result))
    return False
