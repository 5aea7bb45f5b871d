#    __init__.py
#        Shared base class for the priorityset test suites
#
#   - License : MIT - See LICENSE file.
#   - Project :  PrioritySet (github.com/codeswarm/priority-set)
#
#   Copyright (c) 2026 PrioritySet

import unittest
import logging

from priorityset import PrioritySet
from priorityset.tools.typing import *

logging.getLogger().setLevel(logging.CRITICAL)


class PrioritySetUnitTest(unittest.TestCase):

    def assert_order(self, priority_set: PrioritySet[Any, Any], expected: List[Any]) -> None:
        """Checks the forward and the descending iteration orders at once"""
        self.assertEqual(list(priority_set), expected)
        self.assertEqual(list(priority_set.descending_iterator()), list(reversed(expected)))

    def assert_consistent(self, priority_set: PrioritySet[Any, Any]) -> None:
        """Both indexes hold the exact same nodes"""
        self.assertEqual(len(priority_set._lookup), len(priority_set._ordered))
        for node in priority_set._ordered:
            self.assertIs(priority_set._lookup[node.element], node)
