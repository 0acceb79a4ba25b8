"""Tests for the CLDR English name tables."""

import pytest

from datepattern.runtime import month_name, weekday_name
from datepattern.runtime.names import (
    DAYS_ABBREVIATED,
    DAYS_WIDE,
    MONTHS_ABBREVIATED,
    MONTHS_WIDE,
)


class TestNameTables:
    """The four tables hold English CLDR names in calendar order."""

    def test_months_abbreviated(self) -> None:
        assert MONTHS_ABBREVIATED == (
            "Jan", "Feb", "Mar", "Apr", "May", "Jun",
            "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
        )

    def test_months_wide(self) -> None:
        assert MONTHS_WIDE == (
            "January", "February", "March", "April", "May", "June",
            "July", "August", "September", "October", "November", "December",
        )

    def test_days_abbreviated_start_on_monday(self) -> None:
        assert DAYS_ABBREVIATED == ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")

    def test_days_wide_start_on_monday(self) -> None:
        assert DAYS_WIDE == (
            "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday",
        )

    def test_tables_are_immutable(self) -> None:
        for table in (MONTHS_ABBREVIATED, MONTHS_WIDE, DAYS_ABBREVIATED, DAYS_WIDE):
            assert isinstance(table, tuple)
            assert all(isinstance(name, str) for name in table)


class TestMonthName:
    """Test month_name() lookups."""

    def test_one_based(self) -> None:
        assert month_name(1) == "Jan"
        assert month_name(12) == "Dec"

    def test_wide(self) -> None:
        assert month_name(3, wide=True) == "March"

    @pytest.mark.parametrize("month", [0, 13, -1])
    def test_out_of_range(self, month: int) -> None:
        with pytest.raises(ValueError, match="month must be in 1..12"):
            month_name(month)


class TestWeekdayName:
    """Test weekday_name() lookups."""

    def test_iso_numbering(self) -> None:
        assert weekday_name(1) == "Mon"
        assert weekday_name(7) == "Sun"

    def test_wide(self) -> None:
        assert weekday_name(6, wide=True) == "Saturday"

    @pytest.mark.parametrize("day", [0, 8])
    def test_out_of_range(self, day: int) -> None:
        with pytest.raises(ValueError, match="isoweekday must be in 1..7"):
            weekday_name(day)
