"""Singly linked lists of decimal digits and their addition."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass
class ListNode:
    """A node of a singly linked list."""

    val: int
    next: ListNode | None = None

    def __iter__(self) -> Iterator[int]:
        node: ListNode | None = self
        while node is not None:
            yield node.val
            node = node.next


def build_list(values: Iterable[int]) -> ListNode | None:
    """Build a linked list holding ``values`` in order."""
    head: ListNode | None = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def list_values(node: ListNode | None) -> list[int]:
    """Return the values of the list starting at ``node``."""
    return [] if node is None else list(node)


def add_two_numbers(l1: ListNode | None, l2: ListNode | None) -> ListNode | None:
    """Add two numbers stored as little-endian digit lists.

    The result is a new list; the inputs are left untouched.
    """
    digits: list[int] = []
    carry = 0
    a, b = l1, l2

    while a is not None or b is not None:
        total = carry
        if a is not None:
            total += a.val
            a = a.next
        if b is not None:
            total += b.val
            b = b.next
        digits.append(total % 10)
        carry = total // 10

    if carry:
        digits.append(carry)

    return build_list(digits)