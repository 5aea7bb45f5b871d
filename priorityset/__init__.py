#    __init__.py
#        A mutable collection of unique elements ordered by priorities
#
#   - License : MIT - See LICENSE file.
#   - Project :  PrioritySet (github.com/codeswarm/priority-set)
#
#   Copyright (c) 2026 PrioritySet

__all__ = [
    'PrioritySet',
    'PrioritySetBuilder',
    'PrioritySetConfig',
    'priority_set_builder',
    'SetView',
    'MapView',
    'EntrySetView',
    'PriorityEntry',
    'ElementIterator',
    'EntryIterator',
    'PrioritySetError',
    'InvalidArgumentError',
    'OrderingUnsupportedError',
    'UnsupportedOperationError',
    'IllegalIteratorStateError',
    'ConcurrentModificationError',
]

__version__ = '1.2.0'

from priorityset.core.exceptions import *
from priorityset.core.priority_set import PrioritySet
from priorityset.core.builder import PrioritySetBuilder, PrioritySetConfig, priority_set_builder
from priorityset.core.views import SetView, MapView, EntrySetView
from priorityset.core.entry import PriorityEntry
from priorityset.core.iterators import ElementIterator, EntryIterator
