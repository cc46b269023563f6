import pytest

from structlab.linked_list import (
    DoublyLinkedList,
    Node,
    SinglyLinkedList,
    from_values,
    has_cycle,
)


def _nth(head, n):
    node = head
    for _ in range(n):
        node = node.next
    return node


def test_from_values_builds_chain():
    head = from_values([10, 20, 30])
    assert [head.value, head.next.value, head.next.next.value] == [10, 20, 30]
    assert head.next.next.next is None


def test_from_values_empty():
    assert from_values([]) is None


def test_has_cycle_detects_loop():
    head = from_values([10, 20, 30, 40, 50, 60])
    _nth(head, 4).next = head
    assert has_cycle(head) is True


def test_has_cycle_false_for_plain_chain():
    assert has_cycle(from_values([1, 2, 3, 4])) is False
    assert has_cycle(None) is False


def test_has_cycle_self_loop():
    node = Node(1)
    node.next = node
    assert has_cycle(node) is True


def test_singly_reverse():
    lst = SinglyLinkedList([1, 2, 3, 4, 5])
    lst.reverse()
    assert list(lst) == [5, 4, 3, 2, 1]
    assert str(lst) == "5 -> 4 -> 3 -> 2 -> 1"


def test_singly_reverse_twice_round_trip():
    values = [3, 1, 4, 1, 5]
    lst = SinglyLinkedList(values)
    lst.reverse()
    lst.reverse()
    assert list(lst) == values
    lst.insert_at_end(9)
    assert list(lst)[-1] == 9


def test_singly_reverse_keeps_tail_for_append():
    lst = SinglyLinkedList([1, 2])
    lst.reverse()
    lst.insert_at_end(0)
    assert list(lst) == [2, 1, 0]


def test_singly_source_sequence():
    lst = SinglyLinkedList()
    lst.insert_at_head(1)
    lst.insert_at_end(5)
    lst.insert_at_head(10)
    assert list(lst) == [10, 1, 5]
    assert lst.delete_end() == 5
    lst.insert_at(50, 2)
    assert list(lst) == [10, 50, 1]
    assert lst.delete_at(3) == 1
    assert list(lst) == [10, 50]
    assert len(lst) == 2


def test_singly_insert_at_one_past_end():
    lst = SinglyLinkedList([1, 2])
    lst.insert_at(3, 3)
    assert list(lst) == [1, 2, 3]


def test_singly_insert_out_of_bounds():
    lst = SinglyLinkedList([1, 2])
    with pytest.raises(IndexError):
        lst.insert_at(9, 5)


def test_singly_invalid_position():
    lst = SinglyLinkedList([1])
    with pytest.raises(ValueError):
        lst.insert_at(9, 0)
    with pytest.raises(ValueError):
        lst.delete_at(-1)


def test_singly_delete_from_empty():
    with pytest.raises(IndexError):
        SinglyLinkedList().delete_end()
    with pytest.raises(IndexError):
        SinglyLinkedList().delete_at(1)


def test_singly_delete_head_and_empty():
    lst = SinglyLinkedList([7])
    assert lst.delete_at(1) == 7
    assert list(lst) == []
    lst.insert_at_end(8)
    assert list(lst) == [8]


def test_doubly_source_sequence():
    dll = DoublyLinkedList()
    dll.insert_at_head(1)
    dll.insert_at_end(5)
    dll.insert_at_head(10)
    assert list(dll) == [10, 1, 5]
    dll.delete_end()
    assert list(dll) == [10, 1]
    dll.insert_at(50, 2)
    assert list(dll) == [10, 50, 1]
    assert dll.delete_at(2) == 50
    assert list(dll) == [10, 1]


def test_doubly_reversed_matches_forward():
    dll = DoublyLinkedList([1, 2, 3, 4])
    dll.insert_at(9, 3)
    dll.delete_at(1)
    assert list(reversed(dll)) == list(dll)[::-1]
    assert len(dll) == 4


def test_doubly_delete_out_of_bounds():
    dll = DoublyLinkedList([1, 2])
    with pytest.raises(IndexError):
        dll.delete_at(3)


def test_doubly_invalid_position_and_empty():
    with pytest.raises(ValueError):
        DoublyLinkedList([1]).insert_at(2, 0)
    with pytest.raises(IndexError):
        DoublyLinkedList().delete_end()