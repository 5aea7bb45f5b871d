#    priority_set.py
#        A mutable collection of unique elements, each mapped to a priority and iterated
#        in priority order. Keeps a hash index and an ordered index in sync.
#
#   - License : MIT - See LICENSE file.
#   - Project :  PrioritySet (github.com/codeswarm/priority-set)
#
#   Copyright (c) 2026 PrioritySet

__all__ = ['PrioritySet']

import logging

from sortedcontainers import SortedKeyList

from priorityset.core.node import Node
from priorityset.core.ordering import NodeOrdering
from priorityset.core.iterators import NodeIterator, ElementIterator
from priorityset.core.views import SetView, MapView
from priorityset.core.exceptions import UnsupportedOperationError
from priorityset.tools import validation
from priorityset.tools.typing import *

T = TypeVar('T')
P = TypeVar('P')


class PrioritySet(Generic[T, P], Collection[T]):
    """
    A mutable collection of elements ordered by priorities. Changing the priority of an
    element is reflected by the iteration order.
    In other words, a finite mapping sorted by its values.

    Elements are iterated by ascending priority, then by the ordering of the elements
    themselves when two priorities are equal. Both orderings use the natural ordering of
    the values unless a comparator is given (see :class:`PrioritySetBuilder`).

    Equality and hash are based on the (element, priority) pairs. Two sets holding the same
    elements with different priorities are not equal. Use :meth:`as_set` for an element-only view
    and :meth:`as_map` for a mapping view; both are backed by this object.
    """

    _logger: logging.Logger
    _lookup: Dict[T, Node[T, P]]
    """Element to node. Source of truth for membership and priorities"""
    _ordered: "SortedKeyList[Node[T, P]]"
    """The same nodes as _lookup, sorted by (priority, element)"""
    _ordering: NodeOrdering
    _default_priority: Optional[P]
    _revision: int
    """Incremented on every structural change. Lets the iterators detect modifications made behind their back"""
    _set_view: Optional[SetView[T]]
    _map_view: Optional[MapView[T, P]]

    @classmethod
    def new_priority_set(cls) -> "PrioritySet[T, P]":
        """An empty set using the natural ordering of the elements and of the priorities"""
        return cls()

    def __init__(self,
                 element_comparator: Optional[Comparator] = None,
                 priority_comparator: Optional[Comparator] = None,
                 default_priority: Optional[P] = None
                 ) -> None:
        """
        :param element_comparator: cmp-style function that sorts elements having the same priority.
            Natural ordering of the elements when ``None``. Must be consistent with ``==``.
        :param priority_comparator: cmp-style function that sorts the priorities.
            Natural ordering of the priorities when ``None``. Must be consistent with ``==``.
        :param default_priority: Priority given by :meth:`add`. :meth:`add` is unsupported when ``None``.
        """
        self._logger = logging.getLogger(self.__class__.__name__)
        self._ordering = NodeOrdering(element_comparator=element_comparator, priority_comparator=priority_comparator)
        self._lookup = {}
        self._ordered = SortedKeyList(key=self._ordering.sort_key)
        self._default_priority = default_priority
        self._revision = 0
        self._set_view = None
        self._map_view = None

    @property
    def default_priority(self) -> Optional[P]:
        return self._default_priority

    def set_priority(self, element: T, priority: P) -> Optional[P]:
        """
        Inserts ``element`` in the set and sets its priority. If ``element`` already belongs to
        the set, its priority is updated and the size stays the same.

        :return: The previous priority of ``element``, or ``None`` if it was not a member.
            When the returned value equals ``priority``, the set was not modified.
        """
        validation.assert_not_none(element, 'element')
        validation.assert_not_none(priority, 'priority')

        node = self._lookup.get(element, None)
        if node is None:
            self._insert(Node(element, priority))
            return None

        previous_priority = node.priority
        if previous_priority != priority:
            self._replace(node, Node(element, priority))
        return previous_priority

    def add(self, element: T) -> bool:
        """
        Inserts ``element`` with the default priority. A member keeps its current priority.

        :return: ``True`` if the element was added
        :raise UnsupportedOperationError: If no default priority is configured
        """
        if self._default_priority is None:
            raise UnsupportedOperationError("No default priority is configured. Use set_priority() instead")
        validation.assert_not_none(element, 'element')

        if element in self._lookup:
            return False

        self._insert(Node(element, self._default_priority))
        return True

    def remove(self, element: T) -> bool:
        """Removes ``element`` if present. Returns ``True`` if the set was modified"""
        node = self._lookup.get(element, None)
        if node is None:
            return False

        self._ordered.remove(node)
        del self._lookup[element]
        self._revision += 1
        return True

    def discard(self, element: T) -> None:
        self.remove(element)

    def clear(self) -> None:
        self._logger.debug(f"Clearing {len(self._lookup)} elements")
        self._ordered.clear()
        self._lookup.clear()
        self._revision += 1

    def get_priority(self, element: T) -> Optional[P]:
        """The priority of ``element``, ``None`` if not a member"""
        node = self._lookup.get(element, None)
        if node is None:
            return None
        return node.priority

    def size(self) -> int:
        return len(self._lookup)

    def is_empty(self) -> bool:
        return len(self._lookup) == 0

    def iterator(self) -> ElementIterator[T]:
        """Iterator over the elements by ascending priority. Supports ``remove()``"""
        return ElementIterator(NodeIterator(self))

    def descending_iterator(self) -> ElementIterator[T]:
        """Iterator in the reverse order of :meth:`iterator`. Higher priorities come first"""
        return ElementIterator(NodeIterator(self, descending=True))

    def as_set(self) -> SetView[T]:
        """A set of the elements, backed by this PrioritySet. Supports removal, not insertion"""
        if self._set_view is None:
            self._set_view = SetView(self)
        return self._set_view

    def as_map(self) -> MapView[T, P]:
        """A mutable mapping of element -> priority, backed by this PrioritySet"""
        if self._map_view is None:
            self._map_view = MapView(self)
        return self._map_view

    def __contains__(self, element: object) -> bool:
        return element in self._lookup

    def __len__(self) -> int:
        return len(self._lookup)

    def __iter__(self) -> ElementIterator[T]:
        return self.iterator()

    def __reversed__(self) -> ElementIterator[T]:
        return self.descending_iterator()

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, PrioritySet):
            return NotImplemented
        # Node equality covers both the element and the priority
        return self._lookup == other._lookup

    def __hash__(self) -> int:
        return hash(frozenset(self._lookup.values()))

    def __str__(self) -> str:
        return '[' + ', '.join(str(node) for node in self._ordered) + ']'

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}({self})'

    def _insert(self, node: Node[T, P]) -> None:
        # The ordered index compares first. If the ordering fails, nothing has changed yet
        self._ordered.add(node)
        self._lookup[node.element] = node
        self._revision += 1

    def _replace(self, old_node: Node[T, P], new_node: Node[T, P]) -> None:
        if self._logger.isEnabledFor(logging.DEBUG):  # pragma: no cover
            self._logger.debug(f"Moving {old_node.element!r} from priority {old_node.priority!r} to {new_node.priority!r}")

        self._ordered.remove(old_node)
        try:
            self._ordered.add(new_node)
        except Exception:
            self._ordered.add(old_node)
            raise
        self._lookup[new_node.element] = new_node
        self._revision += 1

    def _node_at(self, index: int) -> Node[T, P]:
        node: Node[T, P] = self._ordered[index]
        return node

    def _remove_at(self, index: int) -> Node[T, P]:
        """Removes the node at a position of the ordered index. Used by the iterators"""
        node: Node[T, P] = self._ordered.pop(index)
        del self._lookup[node.element]
        self._revision += 1
        return node
