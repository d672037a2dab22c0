import os
import sys

import pytest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "../../..")))

from classics.data_structures.basic.array_list import ArrayList
from classics.exceptions import EmptyError, InvalidArgumentError, OutOfBoundsError


def test_array_list_operations():
    lst = ArrayList()
    lst.add_to_back(2)
    lst.add_to_front(0)
    lst.add_at_index(1, 1)
    lst.add_to_back(3)

    assert lst.execute() == [0, 1, 2, 3]
    assert lst.get(2) == 2
    assert lst[3] == 3
    assert lst.remove_at_index(1) == 1
    assert lst.remove_from_front() == 0
    assert lst.remove_from_back() == 3
    assert lst.execute() == [2]
    assert len(lst) == 1


def test_capacity_doubles_on_overflow():
    lst = ArrayList()
    assert lst.capacity == 9
    for item in range(9):
        lst.add_to_back(item)
    assert lst.capacity == 9
    lst.add_to_back(9)
    assert lst.capacity == 18
    assert lst.execute() == list(range(10))

    for _ in range(10):
        lst.remove_from_back()
    assert lst.is_empty()
    assert lst.capacity == 18

    lst.clear()
    assert lst.capacity == 9


def test_out_of_bounds():
    lst = ArrayList()
    lst.add_to_back("a")
    with pytest.raises(OutOfBoundsError):
        lst.add_at_index(2, "b")
    with pytest.raises(OutOfBoundsError):
        lst.add_at_index(-1, "b")
    with pytest.raises(OutOfBoundsError):
        lst.get(1)
    with pytest.raises(OutOfBoundsError):
        lst.remove_at_index(1)
    with pytest.raises(IndexError):
        lst[5]
    assert lst.execute() == ["a"]


def test_empty_and_none():
    lst = ArrayList()
    with pytest.raises(EmptyError):
        lst.remove_from_front()
    with pytest.raises(EmptyError):
        lst.remove_from_back()
    with pytest.raises(InvalidArgumentError):
        lst.add_to_back(None)
    assert lst.size() == 0
