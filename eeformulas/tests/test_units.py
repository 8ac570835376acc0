"""
Tests for engineering notation formatting.
"""

import pytest
import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(__file__))))

from eeformulas.units import engineering_notation


class TestEngineeringNotation:
    """Test SI prefix formatting."""

    @pytest.mark.parametrize('value, unit, expected', [
        (1000, 'Ω', '1kΩ'),
        (4700, 'Ω', '4.7kΩ'),
        (100e-6, 'F', '100µF'),
        (0.047, 'H', '47mH'),
        (100e-9, 'F', '100nF'),
        (2.2e6, 'Hz', '2.2MHz'),
        (50, 'Hz', '50Hz'),
        (0, 'V', '0V'),
    ])
    def test_formatting(self, value, unit, expected):
        assert engineering_notation(value, unit) == expected

    def test_negative(self):
        assert engineering_notation(-0.047, 'H') == '-47mH'

    def test_rounding_carries_prefix(self):
        """999.96 rounds to 1000 at 3 significant digits → 1k."""
        assert engineering_notation(999.96, 'W') == '1kW'

    def test_precision(self):
        assert engineering_notation(3.14159, 'V', precision=2) == '3.1V'

    def test_non_finite(self):
        assert engineering_notation(float('inf'), 'A') == 'infA'
        assert engineering_notation(float('nan'), 'A') == 'nanA'

    def test_numpy_scalar(self):
        import numpy as np
        assert engineering_notation(np.float64(2200.0), 'VA') == '2.2kVA'


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
