#    builder.py
#        Configuration holder that builds PrioritySet instances
#
#   - License : MIT - See LICENSE file.
#   - Project :  PrioritySet (github.com/codeswarm/priority-set)
#
#   Copyright (c) 2026 PrioritySet

__all__ = ['PrioritySetConfig', 'PrioritySetBuilder', 'priority_set_builder']

import dataclasses
from dataclasses import dataclass
import logging

from priorityset.core.priority_set import PrioritySet
from priorityset.tools.typing import *

T = TypeVar('T')
P = TypeVar('P')


@dataclass(frozen=True, slots=True)
class PrioritySetConfig:
    """(Immutable struct) Everything needed to construct a PrioritySet"""

    element_comparator: Optional[Comparator] = None
    """Sorts the elements that have the same priority. Natural ordering when None"""
    priority_comparator: Optional[Comparator] = None
    """Sorts the priorities. Natural ordering when None"""
    default_priority: Optional[Any] = None
    """Priority given by PrioritySet.add(). add() is unsupported when None"""


class PrioritySetBuilder(Generic[T, P]):
    """Collects the settings of a PrioritySet. Every setter returns the builder so calls can be chained.

    The builder can be reused to build many sets. It is mutable, but a set that has been built
    does not see the changes made to the builder afterward.

    Defaults: no default priority, natural ordering for both the elements and the priorities.
    """

    _config: PrioritySetConfig
    _logger: logging.Logger

    def __init__(self) -> None:
        self._config = PrioritySetConfig()
        self._logger = logging.getLogger(self.__class__.__name__)

    @property
    def config(self) -> PrioritySetConfig:
        return self._config

    def with_default_priority(self, default_priority: Optional[P]) -> "PrioritySetBuilder[T, P]":
        self._config = dataclasses.replace(self._config, default_priority=default_priority)
        return self

    def with_element_comparator(self, element_comparator: Optional[Comparator]) -> "PrioritySetBuilder[T, P]":
        self._config = dataclasses.replace(self._config, element_comparator=element_comparator)
        return self

    def with_priority_comparator(self, priority_comparator: Optional[Comparator]) -> "PrioritySetBuilder[T, P]":
        self._config = dataclasses.replace(self._config, priority_comparator=priority_comparator)
        return self

    def build(self) -> PrioritySet[T, P]:
        self._logger.debug(f"Building a PrioritySet with {self._config}")
        return PrioritySet(
            element_comparator=self._config.element_comparator,
            priority_comparator=self._config.priority_comparator,
            default_priority=self._config.default_priority
        )


def priority_set_builder() -> PrioritySetBuilder[Any, Any]:
    return PrioritySetBuilder()
