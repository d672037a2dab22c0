import os
import sys

import pytest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "../../..")))

from classics.data_structures.basic.linked_list import DoublyLinkedList
from classics.exceptions import EmptyError, InvalidArgumentError, NotFoundError, OutOfBoundsError


def _links_consistent(ll):
    forward = ll.to_list()
    backward = []
    node = ll.tail
    while node is not None:
        backward.append(node.data)
        node = node.previous
    return forward == backward[::-1] and len(forward) == ll.size()


def test_linked_list_operations():
    ll = DoublyLinkedList()
    ll.add_to_back(1)
    ll.add_to_back(3)
    ll.add_to_front(0)
    ll.add_at_index(2, 2)

    assert ll.to_list() == [0, 1, 2, 3]
    assert ll.get(0) == 0
    assert ll.get(3) == 3
    assert ll.remove_at_index(2) == 2
    assert ll.execute() == [0, 1, 3]
    assert _links_consistent(ll)


def test_index_access_from_both_ends():
    ll = DoublyLinkedList()
    for item in range(10):
        ll.add_to_back(item)
    assert [ll.get(i) for i in range(10)] == list(range(10))
    ll.add_at_index(8, "x")
    ll.add_at_index(1, "y")
    assert ll.to_list() == [0, "y", 1, 2, 3, 4, 5, 6, 7, "x", 8, 9]
    assert _links_consistent(ll)


def test_remove_from_ends():
    ll = DoublyLinkedList()
    for item in "abc":
        ll.add_to_back(item)
    assert ll.remove_from_front() == "a"
    assert ll.remove_from_back() == "c"
    assert ll.remove_from_back() == "b"
    assert ll.is_empty()
    assert ll.head is None and ll.tail is None
    with pytest.raises(EmptyError):
        ll.remove_from_front()
    with pytest.raises(EmptyError):
        ll.remove_from_back()


def test_remove_last_occurrence():
    ll = DoublyLinkedList()
    for item in [1, 2, 1, 3, 1, 4]:
        ll.add_to_back(item)
    assert ll.remove_last_occurrence(1) == 1
    assert ll.to_list() == [1, 2, 1, 3, 4]
    assert ll.remove_last_occurrence(4) == 4
    assert ll.tail.data == 3
    with pytest.raises(NotFoundError):
        ll.remove_last_occurrence(9)
    assert ll.to_list() == [1, 2, 1, 3]
    assert _links_consistent(ll)


def test_bounds_and_none():
    ll = DoublyLinkedList()
    with pytest.raises(OutOfBoundsError):
        ll.get(0)
    with pytest.raises(OutOfBoundsError):
        ll.add_at_index(1, "a")
    with pytest.raises(OutOfBoundsError):
        ll.remove_at_index(0)
    with pytest.raises(InvalidArgumentError):
        ll.add_to_front(None)
    with pytest.raises(InvalidArgumentError):
        ll.remove_last_occurrence(None)


def test_clear():
    ll = DoublyLinkedList()
    ll.add_to_back(1)
    ll.clear()
    assert ll.size() == 0
    assert ll.to_list() == []
