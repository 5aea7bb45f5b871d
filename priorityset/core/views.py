#    views.py
#        Set and mapping views of a PrioritySet. The views hold no data, every call goes
#        through the PrioritySet that created them.
#
#   - License : MIT - See LICENSE file.
#   - Project :  PrioritySet (github.com/codeswarm/priority-set)
#
#   Copyright (c) 2026 PrioritySet

__all__ = ['SetView', 'MapView', 'EntrySetView']

from priorityset.core.iterators import ElementIterator, EntryIterator
from priorityset.core.exceptions import UnsupportedOperationError
from priorityset.tools.typing import *

if TYPE_CHECKING:
    from priorityset.core.priority_set import PrioritySet

T = TypeVar('T')
P = TypeVar('P')

_MISSING = object()


class SetView(Generic[T], MutableSet[T]):
    """The elements of a PrioritySet, in priority order.
    Removal is supported, insertion is not since a bare element has no priority."""

    __slots__ = ('_priority_set',)

    _priority_set: "PrioritySet[T, Any]"

    def __init__(self, priority_set: "PrioritySet[T, Any]") -> None:
        self._priority_set = priority_set

    @classmethod
    def _from_iterable(cls, it: Iterable[Any]) -> Set[Any]:
        # Set operators (&, |, -, ^) give a plain set
        return set(it)

    def __len__(self) -> int:
        return len(self._priority_set)

    def __contains__(self, element: object) -> bool:
        return element in self._priority_set

    def __iter__(self) -> ElementIterator[T]:
        return self._priority_set.iterator()

    def add(self, element: T) -> None:
        raise UnsupportedOperationError("Cannot add an element without a priority. Use PrioritySet.set_priority()")

    def discard(self, element: T) -> None:
        self._priority_set.remove(element)

    def remove(self, element: T) -> None:
        if not self._priority_set.remove(element):
            raise KeyError(element)

    def clear(self) -> None:
        self._priority_set.clear()

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}({list(self)!r})'


class EntrySetView(ItemsView[T, P]):
    """The (element, priority) pairs of a PrioritySet, in priority order.
    The iterator supports ``remove()``"""

    __slots__ = ()

    _mapping: "MapView[T, P]"

    def __init__(self, map_view: "MapView[T, P]") -> None:
        super().__init__(map_view)

    def __iter__(self) -> EntryIterator[T, P]:
        return EntryIterator(self._mapping.priority_set)

    def __contains__(self, entry: object) -> bool:
        if not isinstance(entry, tuple) or len(entry) != 2:
            return False
        return super().__contains__(entry)

    def remove(self, entry: Tuple[T, P]) -> bool:
        """Removes the element of ``entry``, whatever its priority. Returns ``True`` if the set was modified"""
        if not isinstance(entry, tuple) or len(entry) != 2:
            return False
        return self._mapping.priority_set.remove(entry[0])

    def discard(self, entry: Tuple[T, P]) -> None:
        self.remove(entry)

    def clear(self) -> None:
        self._mapping.clear()


class MapView(Generic[T, P], MutableMapping[T, P]):
    """A mapping element -> priority backed by a PrioritySet.
    Keys, values and items come in priority order."""

    __slots__ = ('_priority_set',)

    _priority_set: "PrioritySet[T, P]"

    def __init__(self, priority_set: "PrioritySet[T, P]") -> None:
        self._priority_set = priority_set

    @property
    def priority_set(self) -> "PrioritySet[T, P]":
        return self._priority_set

    def __len__(self) -> int:
        return len(self._priority_set)

    def __contains__(self, key: object) -> bool:
        return key in self._priority_set

    def __getitem__(self, key: T) -> P:
        priority = self._priority_set.get_priority(key)
        if priority is None:
            raise KeyError(key)
        return priority

    def __setitem__(self, key: T, priority: P) -> None:
        self._priority_set.set_priority(key, priority)

    def __delitem__(self, key: T) -> None:
        if not self._priority_set.remove(key):
            raise KeyError(key)

    def __iter__(self) -> ElementIterator[T]:
        return self._priority_set.iterator()

    def put(self, key: T, priority: P) -> Optional[P]:
        """Same as ``self[key] = priority``, but gives back the previous priority (``None`` if the key was absent)"""
        return self._priority_set.set_priority(key, priority)

    def remove(self, key: T) -> Optional[P]:
        """Removes ``key``. Returns its priority, ``None`` if it was absent"""
        priority = self._priority_set.get_priority(key)
        if priority is not None:
            self._priority_set.remove(key)
        return priority

    def pop(self, key: T, default: Any = _MISSING) -> Any:
        priority = self.remove(key)
        if priority is None:
            if default is _MISSING:
                raise KeyError(key)
            return default
        return priority

    def clear(self) -> None:
        self._priority_set.clear()

    def items(self) -> EntrySetView[T, P]:
        return EntrySetView(self)

    def __repr__(self) -> str:
        return '{' + ', '.join(f'{key!r}: {priority!r}' for key, priority in self.items()) + '}'
