"""Unit tests for Time and CalendarConfig."""

import pytest

from hakoniwa.core.time import Time, CalendarConfig


class TestTimeNew:
    """Tests for Time.new."""

    def test_derived_fields(self):
        t = Time.new(24 * 365 * 2 + 24 * 3 + 5, 24, 365)
        assert t.day == 365 * 2 + 3
        assert t.remainder_time == 5
        assert t.year == 2
        assert t.remainder_day == 3

    def test_invariants_hold(self):
        for all_ in [0, 1, 23, 24, 25, 8759, 8760, 8761, 10 ** 30 + 7]:
            for d, y in [(24, 365), (1, 1), (7, 3), (1000, 12)]:
                t = Time.new(all_, d, y)
                assert t.all == t.day * d + t.remainder_time
                assert t.day == t.year * y + t.remainder_day
                assert t.all == (t.year * y + t.remainder_day) * d + t.remainder_time

    def test_zero_ratio_rejected(self):
        with pytest.raises(ValueError):
            Time.new(10, 0, 365)
        with pytest.raises(ValueError):
            Time.new(10, 24, 0)

    def test_negative_rejected(self):
        with pytest.raises(ValueError):
            Time.new(-1, 24, 365)

    def test_non_int_rejected(self):
        with pytest.raises(ValueError):
            Time.new(10.5, 24, 365)
        with pytest.raises(ValueError):
            Time.new(10, 24.0, 365)
        with pytest.raises(ValueError):
            Time.new(10, 24, "365")
        with pytest.raises(ValueError):
            Time.new(True, 24, 365)

    def test_non_int_delta_rejected(self):
        with pytest.raises(ValueError):
            Time.new(5, 24, 365).plus(0.5)

    def test_arbitrary_precision(self):
        big = 2 ** 100
        t = Time.new(big, 24, 365)
        assert t.all == big
        assert t.consistent()


class TestTimePlus:
    """Tests for carry-propagating advance."""

    def test_plus_matches_new(self):
        for start in [0, 5, 23, 24 * 364 + 23, 8759, 123456]:
            t = Time.new(start, 24, 365)
            for delta in [0, 1, 18, 24, 100, 8760, 8761 * 3]:
                assert t.plus(delta) == Time.new(start + delta, 24, 365)

    def test_plus_one_increments_all(self):
        t = Time.new(41, 24, 365)
        assert t.plus_one().all == 42

    def test_plus_returns_new_value(self):
        t = Time.new(0, 24, 365)
        t.plus_one()
        assert t.all == 0

    def test_negative_delta_rejected(self):
        with pytest.raises(ValueError):
            Time.new(5, 24, 365).plus(-1)

    def test_day_and_year_rollover(self):
        t = Time.new(0, 24, 365)
        for _ in range(24):
            t = t.plus_one()
        assert t.day == 1
        assert t.remainder_time == 0

        for _ in range(24 * 364):
            t = t.plus_one()
        assert t.all == 24 * 365
        assert t.year == 1
        assert t.remainder_day == 0
        assert t.day == 365

    def test_year_carry_from_last_tick(self):
        t = Time.new(24 * 365 - 1, 24, 365)
        assert t.year == 0
        assert t.remainder_day == 364

        t = t.plus_one()
        assert t.year == 1
        assert t.remainder_day == 0
        assert t.remainder_time == 0


class TestChangeRule:
    """Tests for switching calendar ratios."""

    def test_change_rule_carries_remainders_only(self):
        t = Time.new(30, 24, 365)  # day 1, 6 ticks in
        changed = t.change_rule(5, 365)

        assert changed.all == 30
        assert changed.one_day_of_time == 5
        assert changed.day == 2  # 1 + 6 // 5
        assert changed.remainder_time == 1
        assert changed.remainder_day == 2
        assert changed.year == 0

    def test_change_rule_can_desynchronize(self):
        changed = Time.new(30, 24, 365).change_rule(5, 365)
        assert not changed.consistent()
        assert changed != Time.new(30, 5, 365)

    def test_change_rule_year_carry(self):
        t = Time.new(24 * 10, 24, 365)  # day 10
        changed = t.change_rule(24, 4)
        assert changed.remainder_day == 10 % 4
        assert changed.year == 10 // 4

    def test_rebase_restores_invariant(self):
        rebased = Time.new(30, 24, 365).rebase(5, 365)
        assert rebased == Time.new(30, 5, 365)
        assert rebased.consistent()

    def test_change_rule_zero_ratio_rejected(self):
        with pytest.raises(ValueError):
            Time.new(30, 24, 365).change_rule(0, 365)


class TestDurationArithmetic:
    """Tests for add and minus."""

    def test_add_uses_left_ratios(self):
        a = Time.new(10, 24, 365)
        b = Time.new(20, 5, 7)
        assert a.add(b) == Time.new(30, 24, 365)
        assert a + b == Time.new(30, 24, 365)

    def test_minus(self):
        a = Time.new(100, 24, 365)
        b = Time.new(30, 24, 365)
        assert a.minus(b) == Time.new(70, 24, 365)
        assert a.minus(a) == Time.new(0, 24, 365)

    def test_minus_underflow_is_none(self):
        a = Time.new(10, 24, 365)
        b = Time.new(11, 24, 365)
        assert a.minus(b) is None


class TestCalendarConfig:
    """Tests for CalendarConfig."""

    def test_default_config(self):
        cal = CalendarConfig()
        assert cal.one_day_of_time == 24
        assert cal.one_year_of_day == 365
        assert cal.one_year_of_time == 24 * 365

    def test_constructors(self, calendar):
        assert calendar.zero() == Time.new(0, 24, 365)
        assert calendar.days(2).all == 48
        assert calendar.years(1).year == 1
        assert calendar.at(25).remainder_time == 1

    def test_zero_ratio_rejected(self):
        with pytest.raises(ValueError):
            CalendarConfig(one_day_of_time=0)
