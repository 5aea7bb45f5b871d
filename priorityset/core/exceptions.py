#    exceptions.py
#        All the errors raised by a PrioritySet and its views
#
#   - License : MIT - See LICENSE file.
#   - Project :  PrioritySet (github.com/codeswarm/priority-set)
#
#   Copyright (c) 2026 PrioritySet

__all__ = [
    'PrioritySetError',
    'InvalidArgumentError',
    'OrderingUnsupportedError',
    'UnsupportedOperationError',
    'IllegalIteratorStateError',
    'ConcurrentModificationError',
]


class PrioritySetError(Exception):
    pass


class InvalidArgumentError(PrioritySetError, ValueError):
    """An element or a priority is None"""
    pass


class OrderingUnsupportedError(PrioritySetError, TypeError):
    """Two elements (or two priorities) needed to be compared, but no comparator is configured
    and the type has no natural ordering"""
    pass


class UnsupportedOperationError(PrioritySetError, TypeError):
    """The operation is not available with the current configuration or on this view"""
    pass


class IllegalIteratorStateError(PrioritySetError, RuntimeError):
    """remove() called on an iterator that is not positioned on an element"""
    pass


class ConcurrentModificationError(PrioritySetError, RuntimeError):
    """The PrioritySet changed while being iterated, by another path than the iterator itself"""
    pass
