#    entry.py
#        The (element, priority) pair handed out by the mapping view of a PrioritySet
#
#   - License : MIT - See LICENSE file.
#   - Project :  PrioritySet (github.com/codeswarm/priority-set)
#
#   Copyright (c) 2026 PrioritySet

__all__ = ['PriorityEntry']

from priorityset.core.node import Node
from priorityset.tools.typing import *

if TYPE_CHECKING:
    from priorityset.core.priority_set import PrioritySet

T = TypeVar('T')
P = TypeVar('P')


class PriorityEntry(Generic[T, P], tuple):  # type: ignore[type-arg]
    """A ``(element, priority)`` tuple read from a PrioritySet.

    The pair is a snapshot: it keeps the priority the element had when the entry was read.
    :meth:`set_value` changes the priority in the PrioritySet, not in the entry.
    """

    _priority_set: "PrioritySet[T, P]"

    def __new__(cls, node: Node[T, P], priority_set: "PrioritySet[T, P]") -> "PriorityEntry[T, P]":
        entry = super().__new__(cls, (node.element, node.priority))
        entry._priority_set = priority_set
        return entry

    @property
    def key(self) -> T:
        return cast(T, self[0])

    @property
    def value(self) -> P:
        return cast(P, self[1])

    def set_value(self, priority: P) -> Optional[P]:
        """Sets the priority of this entry's element in the PrioritySet. Returns the previous priority"""
        return self._priority_set.set_priority(self.key, priority)

    def __str__(self) -> str:
        return f'{self[0]}={self[1]}'
