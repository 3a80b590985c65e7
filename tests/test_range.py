# Copyright (c) 2025, NVIDIA CORPORATION & AFFILIATES. ALL RIGHTS RESERVED.
#
# SPDX-License-Identifier: Apache-2.0 WITH LLVM-exception

import numpy as np
import pytest

from loopdrive import (
    DONE,
    Boundary,
    ConfigError,
    Direction,
    OverPullError,
    RangeConfig,
    range_stepper,
)


def test_ascending_exclusive_by_default():
    assert list(range_stepper(0, 10, 3)) == [0, 3, 6, 9]
    assert list(range_stepper(0, 9, 3)) == [0, 3, 6]


def test_ascending_inclusive():
    assert list(range_stepper(0, 9, 3, boundary="inclusive")) == [0, 3, 6, 9]


def test_direction_inferred_from_bounds():
    assert list(range_stepper(3, 0)) == [3, 2, 1]
    assert list(range_stepper(3, 0, boundary=Boundary.INCLUSIVE)) == [3, 2, 1, 0]


def test_only_increment_magnitude_is_used():
    assert list(range_stepper(10, 0, -5)) == [10, 5]
    assert list(range_stepper(0, 4, -2, direction="asc")) == [0, 2]
    assert list(range_stepper(4, 0, 2, direction=Direction.DESCENDING)) == [4, 2]


def test_infinite_ranges():
    assert range_stepper(5).take(3) == [5, 6, 7]
    assert range_stepper(0, None, -2).take(3) == [0, -2, -4]


def test_integer_range_stays_integer():
    values = list(range_stepper(0, 5))
    assert all(type(v) is int for v in values)


def test_float_operand_promotes_whole_range():
    values = list(range_stepper(0, 1, 0.25))
    assert values == [0.0, 0.25, 0.5, 0.75]
    assert all(type(v) is float for v in values)

    # a float end alone is enough
    assert all(type(v) is float for v in range_stepper(0, 2.0))


def test_numpy_operands_promote_with_numpy_rules():
    values = list(range_stepper(np.float32(0), np.float32(1), np.float32(0.5)))
    assert values == [0.0, 0.5]
    assert all(isinstance(v, np.float32) for v in values)

    values = list(range_stepper(np.int16(0), 3))
    assert values == [0, 1, 2]
    assert all(isinstance(v, np.integer) for v in values)


def test_zero_increment_rejected_at_construction():
    with pytest.raises(ConfigError, match="non-zero"):
        range_stepper(0, 10, 0)
    with pytest.raises(ConfigError, match="non-zero"):
        RangeConfig(0, 1, 0.0)


def test_non_numeric_operands_rejected():
    with pytest.raises(ConfigError, match="real numbers"):
        range_stepper("a", "z")


def test_unknown_direction_and_boundary_rejected():
    with pytest.raises(ConfigError, match="unknown direction"):
        range_stepper(0, 3, direction="sideways")
    with pytest.raises(ConfigError, match="unknown boundary"):
        range_stepper(0, 3, boundary="open")


def test_empty_range_reports_done_on_first_pull():
    stepper = range_stepper(0, 0)
    assert stepper.pull() is DONE
    assert list(range_stepper(0, 0, boundary="inclusive")) == [0]
    assert list(range_stepper(3, 0, direction="asc")) == []


def test_over_pull_raises():
    stepper = range_stepper(0, 1)
    assert stepper.pull() == 0
    assert stepper.pull() is DONE
    with pytest.raises(OverPullError, match="RangeStepper"):
        stepper.pull()


def test_current_tracks_last_value():
    stepper = range_stepper(2, 8, 2)
    assert stepper.current is None
    stepper.pull()
    stepper.pull()
    assert stepper.current == 4


def test_peek_does_not_consume():
    stepper = range_stepper(0, 2)
    assert stepper.peek() == 0
    assert stepper.peek() == 0
    assert stepper.pull() == 0
    assert stepper.pull() == 1
    assert stepper.peek() is DONE
    assert stepper.pull() is DONE
    # peeking an exhausted driver is not an over-pull
    assert stepper.peek() is DONE


def test_reset_restarts_from_start(pull_all):
    stepper = range_stepper(0, 3)
    assert pull_all(stepper) == [0, 1, 2]
    stepper.reset()
    assert not stepper.exhausted
    assert stepper.current is None
    assert pull_all(stepper) == [0, 1, 2]


range_count_params = [
    ((0, 10, 3, "asc", "excl"), 4),
    ((0, 9, 3, "asc", "incl"), 4),
    ((0, 9, 3, "asc", "excl"), 3),
    ((5, 0, 2, "desc", "incl"), 3),
    ((5, 1, 2, "desc", "excl"), 2),
    ((5, 1, 2, "desc", "incl"), 3),
    ((0, 0, 1, "asc", "incl"), 1),
    ((0, 0, 1, "asc", "excl"), 0),
    ((3, 0, 1, "asc", "incl"), 0),
    ((-7, 7, 5, "asc", "incl"), 3),
    ((0, 1, 0.25, "asc", "excl"), 4),
    ((0, 1, 0.25, "asc", "incl"), 5),
    ((0, 1, 0.1, "asc", "excl"), 10),
    ((0, 1, 0.1, "asc", "incl"), 11),
    ((1, 0, 0.1, "desc", "excl"), 10),
    ((0, 3.3, 1.1, "asc", "excl"), 3),
]


@pytest.mark.parametrize("description,expected", range_count_params)
def test_count_matches_pulled_values(description, expected, pull_all):
    config = RangeConfig.coerce(description)
    values = pull_all(range_stepper(config))

    assert config.count == expected
    assert len(values) == expected
    assert config.is_empty == (expected == 0)

    # monotonic in the configured direction
    pairs = list(zip(values, values[1:]))
    if config.ascending:
        assert all(a < b for a, b in pairs)
    else:
        assert all(a > b for a, b in pairs)


def test_infinite_config_has_no_count():
    config = RangeConfig(0)
    assert config.infinite
    assert config.count is None
    assert not config.is_empty


class TestRangeConfigCoerce:
    def test_from_mapping(self):
        config = RangeConfig.coerce({"start": 1, "end": 4, "boundary": "inclusive"})
        assert config == RangeConfig(1, 4, 1, Direction.ASCENDING, Boundary.INCLUSIVE)

    def test_from_tuple(self):
        config = RangeConfig.coerce((0, 0.8, 0.4, "asc", "excl"))
        assert config.increment == 0.4
        assert config.value_type is float
        assert config.direction is Direction.ASCENDING
        assert config.boundary is Boundary.EXCLUSIVE

    def test_passthrough(self):
        config = RangeConfig(0, 3)
        assert RangeConfig.coerce(config) is config

    def test_unknown_option(self):
        with pytest.raises(ConfigError, match="unknown range options: step"):
            RangeConfig.coerce({"start": 0, "step": 2})

    def test_bad_tuple_length(self):
        with pytest.raises(ConfigError, match="1 to 5 entries"):
            RangeConfig.coerce(())

    def test_unsupported_object(self):
        with pytest.raises(ConfigError, match="cannot build a range"):
            RangeConfig.coerce(object())

    def test_missing_start(self):
        with pytest.raises(ConfigError, match="start is required"):
            RangeConfig(None, 3)

    def test_direction_aliases(self):
        assert Direction("asc") is Direction.ASCENDING
        assert Direction("DOWN") is Direction.DESCENDING
        assert Boundary("incl") is Boundary.INCLUSIVE
        assert Direction(" Up ") is Direction.ASCENDING
        assert Boundary("EXCL") is Boundary.EXCLUSIVE


def test_float_steps_do_not_accumulate_rounding():
    values = list(range_stepper(0, 1, 0.1))
    assert len(values) == 10
    assert values[-1] == pytest.approx(0.9)
    np.testing.assert_allclose(values, np.arange(10) * 0.1)


def test_narrow_numpy_integers_do_not_wrap(pull_all):
    config = RangeConfig(np.int8(-100), np.int8(100))
    values = pull_all(range_stepper(config))
    assert config.count == 200
    assert len(values) == 200
    assert values[-1] == 99
    assert all(type(v) is np.int8 for v in values)
