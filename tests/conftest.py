# Copyright (c) 2025, NVIDIA CORPORATION & AFFILIATES. ALL RIGHTS RESERVED.
#
# SPDX-License-Identifier: Apache-2.0 WITH LLVM-exception

import pytest

from loopdrive import DONE, OverPullError


def _pull_all(driver, limit=10_000):
    """Pull until DONE, then check the driver refuses to be pulled again."""
    values = []
    for _ in range(limit):
        value = driver.pull()
        if value is DONE:
            break
        values.append(value)
    else:
        raise AssertionError(f"driver did not finish within {limit} pulls")

    assert driver.exhausted
    with pytest.raises(OverPullError):
        driver.pull()
    return values


@pytest.fixture
def pull_all():
    return _pull_all


@pytest.fixture
def wrap_log():
    calls = []

    def on_wrap():
        calls.append(len(calls) + 1)
        return "ignored"

    on_wrap.calls = calls
    return on_wrap
