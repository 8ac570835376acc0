"""Library defaults, overridable from the environment or a .env file."""

import logging
import os

from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)


def _read_tolerance(name: str, default: str) -> float:
    raw = os.getenv(name, default)
    try:
        value = float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None
    if not value >= 0:
        raise ValueError(f"{name} must be non-negative, got {value}")
    return value


# Default |Σ| tolerance for Kirchhoff current/voltage law checks
KIRCHHOFF_TOLERANCE = _read_tolerance("EEFORMULAS_KIRCHHOFF_TOLERANCE", "1e-9")

logger.debug("Kirchhoff tolerance: %g", KIRCHHOFF_TOLERANCE)
