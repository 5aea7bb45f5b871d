#    node.py
#        The immutable (element, priority) pair stored in both indexes of a PrioritySet
#
#   - License : MIT - See LICENSE file.
#   - Project :  PrioritySet (github.com/codeswarm/priority-set)
#
#   Copyright (c) 2026 PrioritySet

__all__ = ['Node']

from dataclasses import dataclass

from priorityset.tools import validation
from priorityset.tools.typing import *

T = TypeVar('T')
P = TypeVar('P')


@dataclass(frozen=True, slots=True)
class Node(Generic[T, P]):
    """(Immutable struct) One element and its priority.
    A priority change always creates a new Node, never touches an existing one."""

    element: T
    priority: P

    def __post_init__(self) -> None:
        validation.assert_not_none(self.element, 'element')
        validation.assert_not_none(self.priority, 'priority')

    def __str__(self) -> str:
        return f'{self.element}={self.priority}'
