"""Tests for report number formatting."""

import pytest

from cultivation_scheduler.utils.formatting import format_number


class TestFormatNumber:

    @pytest.mark.parametrize("value, expected", [
        (8, '8'),
        (8.0, '8'),
        (12.5, '12.5'),
        (0.25, '0.25'),
        (1500000, '1500000'),
        (1500000.0, '1500000'),
        (25000000.5, '25000000.5'),
    ])
    def test_plain_decimal(self, value, expected):
        assert format_number(value) == expected
