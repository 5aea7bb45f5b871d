#    iterators.py
#        Fail-fast iterators over a PrioritySet, able to remove the element they are
#        positioned on without breaking the traversal.
#
#   - License : MIT - See LICENSE file.
#   - Project :  PrioritySet (github.com/codeswarm/priority-set)
#
#   Copyright (c) 2026 PrioritySet

__all__ = ['NodeIterator', 'ElementIterator', 'EntryIterator']

from priorityset.core.node import Node
from priorityset.core.entry import PriorityEntry
from priorityset.core.exceptions import IllegalIteratorStateError, ConcurrentModificationError
from priorityset.tools.typing import *

if TYPE_CHECKING:
    from priorityset.core.priority_set import PrioritySet

T = TypeVar('T')
P = TypeVar('P')


class NodeIterator(Generic[T, P]):
    """Walks the ordered index of a PrioritySet by position, ascending or descending.

    Ready -> positioned on a node (after advance()) -> exhausted.
    The iterator remembers the revision of the set it expects. Any structural change made
    by another path than :meth:`remove_current` makes the next step fail with
    :class:`ConcurrentModificationError`.
    """

    __slots__ = ('_priority_set', '_descending', '_next_position', '_current_position', '_expected_revision', '_exhausted')

    _priority_set: "PrioritySet[T, P]"
    _descending: bool
    _next_position: int
    _current_position: Optional[int]
    """Position of the node returned by the last advance(). None when there is nothing to remove"""
    _expected_revision: int
    _exhausted: bool

    def __init__(self, priority_set: "PrioritySet[T, P]", descending: bool = False) -> None:
        self._priority_set = priority_set
        self._descending = descending
        self._next_position = len(priority_set) - 1 if descending else 0
        self._current_position = None
        self._expected_revision = priority_set._revision
        self._exhausted = False

    @property
    def descending(self) -> bool:
        return self._descending

    def advance(self) -> Node[T, P]:
        """Returns the next node. Raises ``StopIteration`` when there is none"""
        if self._exhausted:
            raise StopIteration
        self._check_revision()

        if self._descending:
            has_next = self._next_position >= 0
        else:
            has_next = self._next_position < len(self._priority_set)

        if not has_next:
            self._exhausted = True
            self._current_position = None
            raise StopIteration

        node = self._priority_set._node_at(self._next_position)
        self._current_position = self._next_position
        self._next_position += -1 if self._descending else 1
        return node

    def remove_current(self) -> None:
        """Removes the node returned by the last call to advance(), from both indexes"""
        if self._current_position is None:
            raise IllegalIteratorStateError("remove() can only be called once after each successful next()")
        self._check_revision()

        self._priority_set._remove_at(self._current_position)
        if not self._descending:
            self._next_position -= 1    # Everything after the removed node shifted by one
        self._current_position = None
        self._expected_revision = self._priority_set._revision

    def _check_revision(self) -> None:
        if self._priority_set._revision != self._expected_revision:
            raise ConcurrentModificationError("PrioritySet has been modified during iteration")


class ElementIterator(Generic[T], Iterator[T]):
    """Iterates the elements of a PrioritySet in priority order"""

    __slots__ = ('_nodes',)

    _nodes: NodeIterator[T, Any]

    def __init__(self, nodes: NodeIterator[T, Any]) -> None:
        self._nodes = nodes

    def __next__(self) -> T:
        return self._nodes.advance().element

    def remove(self) -> None:
        """Removes from the PrioritySet the last element returned by next()"""
        self._nodes.remove_current()


class EntryIterator(Generic[T, P], Iterator[PriorityEntry[T, P]]):
    """Iterates the (element, priority) pairs of a PrioritySet in priority order"""

    __slots__ = ('_priority_set', '_nodes')

    _priority_set: "PrioritySet[T, P]"
    _nodes: NodeIterator[T, P]

    def __init__(self, priority_set: "PrioritySet[T, P]", nodes: Optional[NodeIterator[T, P]] = None) -> None:
        self._priority_set = priority_set
        self._nodes = nodes if nodes is not None else NodeIterator(priority_set)

    def __next__(self) -> PriorityEntry[T, P]:
        node = self._nodes.advance()
        return PriorityEntry(node, self._priority_set)

    def remove(self) -> None:
        """Removes from the PrioritySet the last entry returned by next()"""
        self._nodes.remove_current()
