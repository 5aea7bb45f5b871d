#    ordering.py
#        Comparison policy of a PrioritySet. Orders nodes by priority first, then by element,
#        using either a user comparator or the natural ordering of the values.
#
#   - License : MIT - See LICENSE file.
#   - Project :  PrioritySet (github.com/codeswarm/priority-set)
#
#   Copyright (c) 2026 PrioritySet

__all__ = ['OrderingAxis', 'OrderingPolicy', 'NodeOrdering']

import enum
import functools
import logging

from priorityset.core.node import Node
from priorityset.core.exceptions import OrderingUnsupportedError
from priorityset.tools.typing import *


class OrderingAxis(enum.Enum):
    ELEMENT = 'element'
    PRIORITY = 'priority'

    def get_display_name(self) -> str:
        return self.value.capitalize()


class OrderingPolicy:
    """Compares two values of the same axis (two elements or two priorities).

    When a comparator is given, it is used unconditionally. Otherwise, the natural ordering
    (``<``) is used. When ``<`` fails with a ``TypeError``, each operand type is checked by
    ordering a value of that type against itself. A type that can't do that has no natural
    ordering and fails with :class:`OrderingUnsupportedError`. A ``TypeError`` between two
    orderable types (an ``int`` and a ``str`` for instance) goes through untouched.
    The result of the check is remembered per type.
    """

    __slots__ = ('_axis', '_comparator', '_natural_capability', '_logger')

    _axis: OrderingAxis
    _comparator: Optional[Comparator]
    _natural_capability: Dict[type, bool]
    """Cache of the natural ordering check, per type"""
    _logger: logging.Logger

    def __init__(self, axis: OrderingAxis, comparator: Optional[Comparator] = None) -> None:
        self._axis = axis
        self._comparator = comparator
        self._natural_capability = {}
        self._logger = logging.getLogger(self.__class__.__name__)

    @property
    def axis(self) -> OrderingAxis:
        return self._axis

    @property
    def comparator(self) -> Optional[Comparator]:
        return self._comparator

    def has_comparator(self) -> bool:
        return self._comparator is not None

    def compare(self, a: Any, b: Any) -> int:
        if self._comparator is not None:
            return self._comparator(a, b)

        try:
            if a < b:
                return -1
            if b < a:
                return 1
            return 0
        except TypeError as e:
            for value in (a, b):
                if not self._has_natural_ordering(value):
                    value_type = type(value)
                    name = self._axis.get_display_name()
                    msg = f"{name} type {value_type.__name__} has no natural ordering, and no {self._axis.value} comparator is configured."
                    self._logger.debug(msg)
                    raise OrderingUnsupportedError(msg) from e
            raise

    def _has_natural_ordering(self, value: Any) -> bool:
        value_type = type(value)
        capable = self._natural_capability.get(value_type, None)
        if capable is None:
            try:
                value < value
                capable = True
            except TypeError:
                capable = False
            self._natural_capability[value_type] = capable
        return capable


class NodeOrdering:
    """Total order over the nodes of a PrioritySet: by priority, then by element on a tie"""

    __slots__ = ('element_policy', 'priority_policy', 'sort_key')

    element_policy: OrderingPolicy
    priority_policy: OrderingPolicy
    sort_key: Callable[[Node[Any, Any]], Any]
    """Key function for the ordered index, built from :meth:`compare`"""

    def __init__(self,
                 element_comparator: Optional[Comparator] = None,
                 priority_comparator: Optional[Comparator] = None
                 ) -> None:
        self.element_policy = OrderingPolicy(OrderingAxis.ELEMENT, element_comparator)
        self.priority_policy = OrderingPolicy(OrderingAxis.PRIORITY, priority_comparator)
        self.sort_key = functools.cmp_to_key(self.compare)

    def compare(self, a: Node[Any, Any], b: Node[Any, Any]) -> int:
        if a is b:
            return 0

        c = self.priority_policy.compare(a.priority, b.priority)
        if c != 0:
            return c

        return self.element_policy.compare(a.element, b.element)