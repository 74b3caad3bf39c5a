"""
Tests for Application Settings
"""

import pytest
from pydantic import ValidationError

from bookstore.config import Settings


class TestSettings:
    """Tests for Settings validation."""

    def test_default_thresholds(self):
        settings = Settings(_env_file=None)

        assert settings.low_stock_threshold == 5
        assert settings.medium_stock_threshold == 20

    @pytest.mark.parametrize("low,medium", [(30, 20), (20, 20)])
    def test_thresholds_must_be_ordered(self, low, medium):
        with pytest.raises(ValidationError):
            Settings(
                _env_file=None,
                low_stock_threshold=low,
                medium_stock_threshold=medium,
            )

    def test_invalid_log_level(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, log_level="LOUD")
