"""
Singly linked list used as the query-term container.

Search consumes it front-to-back; callers build it once and never hand it over
for mutation. Every predicate is called as ``is_match(node, index, linked_list)``.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, List, Optional, Tuple

from .config import RENDER_SEPARATOR


class NoMatchFound(LookupError):
    """Raised by LinkedList.insert when no node satisfies the predicate."""


@dataclass(eq=False)
class Node:
    value: Any
    next: Optional["Node"] = None


Predicate = Callable[[Node, int, "LinkedList"], bool]


class LinkedList:
    def __init__(self, values: Optional[Iterable[Any]] = None) -> None:
        self.head: Optional[Node] = None
        if values is not None:
            # head-insert in reverse so iteration order matches `values`
            for value in reversed(list(values)):
                self.insert_at_head(value)

    # ---- size / iteration ----

    @property
    def length(self) -> int:
        """Number of nodes; walks the whole list."""
        n = 0
        node = self.head
        while node:
            n += 1
            node = node.next
        return n

    def __len__(self) -> int:
        return self.length

    def __iter__(self) -> Iterator[Any]:
        node = self.head
        while node:
            yield node.value
            node = node.next

    # ---- lookup ----

    def find(self, is_match: Predicate) -> Optional[Node]:
        """Return the first node where `is_match(node, index, self)` is true, or None."""
        return self.find_with_previous(is_match)[0]

    def find_with_previous(self, is_match: Predicate) -> Tuple[Optional[Node], Optional[Node]]:
        """
        Return (matched node, previous node).
        Both are None when nothing matches; previous is None when the head matched.
        """
        index = 0
        previous: Optional[Node] = None
        node = self.head
        while node:
            if is_match(node, index, self):
                return node, previous
            index += 1
            previous = node
            node = node.next
        return None, None

    # ---- mutation (chainable) ----

    def insert_at_head(self, value: Any) -> "LinkedList":
        self.head = Node(value, self.head)
        return self

    def insert(self, value: Any, is_match: Optional[Predicate] = None) -> "LinkedList":
        """
        Insert `value` after the first matching node; by default after the last one.
        On an empty list the value becomes the head.

        Raises NoMatchFound if the list is not empty and nothing matches.
        """
        if self.head is None:
            return self.insert_at_head(value)

        if is_match is None:
            last = self.length - 1
            is_match = lambda node, index, lst: index == last

        previous = self.find(is_match)
        if previous is None:
            raise NoMatchFound("No match found.")
        previous.next = Node(value, previous.next)
        return self

    def remove(self, is_match: Predicate) -> "LinkedList":
        """Unlink the first matching node. A list with no match is left as is."""
        node, previous = self.find_with_previous(is_match)
        if node is None:
            return self
        if previous is None:
            self.head = node.next
        else:
            previous.next = node.next
        return self

    # ---- conversion ----

    def as_list(self) -> List[Any]:
        return list(self)

    def render(self, separator: str = RENDER_SEPARATOR) -> str:
        return "|" + separator.join(str(v) for v in self) + "|"

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"LinkedList({self.as_list()!r})"
