#    validation.py
#        Argument checks that raise the exceptions of the priorityset package
#
#   - License : MIT - See LICENSE file.
#   - Project :  PrioritySet (github.com/codeswarm/priority-set)
#
#   Copyright (c) 2026 PrioritySet

__all__ = ['assert_not_none']

from priorityset.core.exceptions import InvalidArgumentError
from priorityset.tools.typing import *


def assert_not_none(value: Any, name: str) -> None:
    if value is None:
        raise InvalidArgumentError(f"{name} cannot be None")
