"""
Tests for environment-driven defaults.
"""

import pytest
import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(__file__))))

from eeformulas import config
from eeformulas.config import _read_tolerance


class TestReadTolerance:
    """Test parsing of tolerance environment variables."""

    def test_default_when_unset(self, monkeypatch):
        monkeypatch.delenv('EEFORMULAS_TEST_TOL', raising=False)
        assert _read_tolerance('EEFORMULAS_TEST_TOL', '1e-9') == 1e-9

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv('EEFORMULAS_TEST_TOL', '0.001')
        assert _read_tolerance('EEFORMULAS_TEST_TOL', '1e-9') == 0.001

    def test_zero_allowed(self, monkeypatch):
        monkeypatch.setenv('EEFORMULAS_TEST_TOL', '0')
        assert _read_tolerance('EEFORMULAS_TEST_TOL', '1e-9') == 0.0

    def test_non_numeric_raises(self, monkeypatch):
        monkeypatch.setenv('EEFORMULAS_TEST_TOL', 'tight')
        with pytest.raises(ValueError, match='must be a number'):
            _read_tolerance('EEFORMULAS_TEST_TOL', '1e-9')

    def test_negative_raises(self, monkeypatch):
        monkeypatch.setenv('EEFORMULAS_TEST_TOL', '-1')
        with pytest.raises(ValueError, match='non-negative'):
            _read_tolerance('EEFORMULAS_TEST_TOL', '1e-9')

    def test_nan_raises(self, monkeypatch):
        monkeypatch.setenv('EEFORMULAS_TEST_TOL', 'nan')
        with pytest.raises(ValueError):
            _read_tolerance('EEFORMULAS_TEST_TOL', '1e-9')


def test_module_default_is_non_negative():
    assert config.KIRCHHOFF_TOLERANCE >= 0


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
