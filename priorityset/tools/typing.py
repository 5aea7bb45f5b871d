#    typing.py
#        Single import point for the typing symbols used across the project.
#        Meant to be used as ``from priorityset.tools.typing import *``
#
#   - License : MIT - See LICENSE file.
#   - Project :  PrioritySet (github.com/codeswarm/priority-set)
#
#   Copyright (c) 2026 PrioritySet

from typing import *

Comparator: TypeAlias = Callable[[Any, Any], int]
"""A cmp-style function: negative, zero or positive when a < b, a == b, a > b"""
