# Copyright (c) 2025, NVIDIA CORPORATION & AFFILIATES. ALL RIGHTS RESERVED.
#
# SPDX-License-Identifier: Apache-2.0 WITH LLVM-exception

import pytest

from loopdrive import Cell, Place, range_stepper


def test_cell_update():
    cell = Cell(2)
    assert cell.update(lambda v: v * 10) == 20
    assert cell.get() == 20
    assert cell.value == 20
    assert repr(cell) == "Cell(20)"


def test_attribute_place():
    class Counter:
        total = 0

    counter = Counter()
    total = Place.attribute(counter, "total")
    total.update(lambda v: v + 5)
    total.update(lambda v: v + 5)
    assert counter.total == 10


def test_item_place_on_mapping_uses_default():
    hist = {}
    place = Place.item(hist, "a", default=0)
    assert place.get() == 0
    place.update(lambda v: v + 1)
    assert hist == {"a": 1}


def test_item_place_on_list():
    values = [1, 2, 3]
    Place.item(values, 1).update(lambda v: v * 100)
    assert values == [1, 200, 3]
    with pytest.raises(IndexError):
        Place.item(values, 5).get()


def test_owning_loop_accumulates_through_place():
    total = Cell(0)
    for value in range_stepper(1, 5):
        total.update(lambda acc, v=value: acc + v)
    assert total.get() == 10


def test_set_returns_value():
    box = {}
    assert Place(lambda: box.get("v"), lambda v: box.__setitem__("v", v)).set(3) == 3
    assert box == {"v": 3}
