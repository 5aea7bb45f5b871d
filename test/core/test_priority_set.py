#    test_priority_set.py
#        A test suite for the PrioritySet engine
#
#   - License : MIT - See LICENSE file.
#   - Project :  PrioritySet (github.com/codeswarm/priority-set)
#
#   Copyright (c) 2026 PrioritySet

from test import PrioritySetUnitTest
from priorityset import (PrioritySet, priority_set_builder, InvalidArgumentError, UnsupportedOperationError,
                         OrderingUnsupportedError)
from priorityset.core.node import Node


class NotOrderable:
    pass


class TestPrioritySet(PrioritySetUnitTest):

    def make_set(self) -> PrioritySet:
        s = priority_set_builder().build()
        s.set_priority("two", 2)
        s.set_priority("four", 4)
        s.set_priority("three", 3)
        s.set_priority("one", 1)
        s.set_priority("six", 6)
        s.set_priority("five", 5)
        return s

    def test_empty(self):
        s = priority_set_builder().build()
        self.assertEqual(len(s), 0)
        self.assertEqual(s.size(), 0)
        self.assertTrue(s.is_empty())
        self.assertFalse(s)
        self.assertEqual(list(s), [])
        self.assertEqual(list(reversed(s)), [])

    def test_not_empty(self):
        s = priority_set_builder().build()
        s.set_priority(8, 6)
        self.assertFalse(s.is_empty())
        self.assertTrue(s)
        s.clear()
        self.assertTrue(s.is_empty())

    def test_contains(self):
        s = priority_set_builder().build()
        s.set_priority("abc", 5)
        s.set_priority("ab", 5)
        self.assertIn("abc", s)
        self.assertIn("ab", s)
        self.assertNotIn("abcd", s)
        s.remove("abc")
        self.assertNotIn("abc", s)
        self.assertIn("ab", s)

    def test_set_priority_return_value(self):
        s = priority_set_builder().build()
        self.assertIsNone(s.set_priority("abc", 5))
        self.assertEqual(s.set_priority("abc", 5), 5)
        self.assertEqual(s.set_priority("abc", 6), 5)
        self.assertEqual(s.get_priority("abc"), 6)
        self.assertEqual(len(s), 1)

        s.clear()
        self.assertEqual(len(s), 0)
        self.assertIsNone(s.set_priority("abc", 5))

    def test_same_priority_is_not_a_modification(self):
        s = self.make_set()
        revision = s._revision
        node = s._lookup["three"]
        self.assertEqual(s.set_priority("three", 3), 3)
        self.assertEqual(s._revision, revision)
        self.assertIs(s._lookup["three"], node)
        self.assert_order(s, ["one", "two", "three", "four", "five", "six"])

    def test_priority_change_creates_new_node(self):
        s = self.make_set()
        node = s._lookup["three"]
        s.set_priority("three", 10)
        self.assertIsNot(s._lookup["three"], node)
        self.assertEqual(node.priority, 3)    # Old node untouched
        self.assert_consistent(s)

    def test_get_priority(self):
        s = priority_set_builder().build()
        s.set_priority("abc", 5)
        self.assertEqual(s.get_priority("abc"), 5)
        self.assertIsNone(s.get_priority("xyz"))

    def test_remove(self):
        s = self.make_set()
        self.assertTrue(s.remove("three"))
        self.assertFalse(s.remove("three"))
        self.assertFalse(s.remove("seven"))
        self.assertEqual(len(s), 5)
        self.assertNotIn("three", s)
        self.assertNotIn("three", s.as_set())
        self.assertNotIn("three", s.as_map())
        self.assert_consistent(s)

        s.discard("four")
        s.discard("four")
        self.assert_order(s, ["one", "two", "five", "six"])

    def test_size_follows_distinct_elements(self):
        s = priority_set_builder().build()
        for i in range(50):
            s.set_priority(i % 20, i)
        self.assertEqual(len(s), 20)
        for i in range(0, 20, 2):
            s.remove(i)
        self.assertEqual(len(s), 10)
        self.assert_consistent(s)

    def test_iteration(self):
        self.assert_order(self.make_set(), ["one", "two", "three", "four", "five", "six"])

    def test_iteration_after_modification(self):
        s = priority_set_builder().build()
        s.set_priority("two", 86)
        s.set_priority("four", -345)
        s.set_priority("three", 3)
        s.set_priority("one", 4)
        s.set_priority("six", 6)
        s.set_priority("five", 5)
        s.remove("three")
        s.set_priority("four", 4)
        s.set_priority("one", 1)
        s.set_priority("two", 2)
        self.assert_order(s, ["one", "two", "four", "five", "six"])
        self.assert_consistent(s)

    def test_element_breaks_priority_ties(self):
        s = priority_set_builder().build()
        s.set_priority("c", 1)
        s.set_priority("a", 1)
        s.set_priority("b", 1)
        s.set_priority("z", 0)
        self.assert_order(s, ["z", "a", "b", "c"])

    def test_snap_crackle_pop(self):
        s = priority_set_builder().build()
        s.set_priority("crackle", 2.0)
        s.set_priority("pop", 3.0)
        s.set_priority("snap", 1.0)
        self.assert_order(s, ["snap", "crackle", "pop"])

        s.set_priority("snap", 2.5)
        self.assert_order(s, ["crackle", "snap", "pop"])

    def test_reverse_priority(self):
        s = priority_set_builder().with_priority_comparator(lambda a, b: b - a).build()
        s.set_priority("two", 2)
        s.set_priority("four", 4)
        s.set_priority("three", 3)
        s.set_priority("one", 1)
        s.set_priority("six", 6)
        s.set_priority("five", 5)
        self.assert_order(s, ["six", "five", "four", "three", "two", "one"])

    def test_default_priority(self):
        s = priority_set_builder().with_default_priority(7).build()
        self.assertTrue(s.add("abc"))
        self.assertEqual(s.get_priority("abc"), 7)

        s.set_priority("abd", 5)
        self.assertEqual(s.get_priority("abd"), 5)
        self.assertFalse(s.add("abd"))     # Keeps its priority
        self.assertEqual(s.get_priority("abd"), 5)
        self.assertEqual(len(s), 2)

    def test_duck_goose(self):
        s = priority_set_builder() \
            .with_default_priority(5.0) \
            .with_priority_comparator(lambda a, b: (a < b) - (a > b)) \
            .build()
        s.add("duck")
        s.add("duck")
        s.set_priority("goose", 1.0)
        self.assert_order(s, ["duck", "goose"])
        self.assertEqual(s.get_priority("duck"), 5.0)

    def test_add_without_default_priority(self):
        s = priority_set_builder().build()
        with self.assertRaises(UnsupportedOperationError):
            s.add("abc")
        self.assertEqual(len(s), 0)

    def test_none_rejected(self):
        s = priority_set_builder().with_default_priority(1).build()
        s.set_priority("abc", 4)

        with self.assertRaises(InvalidArgumentError):
            s.set_priority(None, 4)
        with self.assertRaises(InvalidArgumentError):
            s.set_priority("four", None)
        with self.assertRaises(InvalidArgumentError):
            s.set_priority("abc", None)
        with self.assertRaises(InvalidArgumentError):
            s.add(None)
        with self.assertRaises(ValueError):    # Also a ValueError
            s.set_priority(None, 4)

        self.assertEqual(len(s), 1)
        self.assertEqual(s.get_priority("abc"), 4)
        self.assert_consistent(s)

    def test_not_orderable_element(self):
        s = priority_set_builder().build()
        s.set_priority(NotOrderable(), 5)
        s.set_priority(NotOrderable(), 6)     # Priorities are enough to order these two
        with self.assertRaises(OrderingUnsupportedError) as ctx:
            s.set_priority(NotOrderable(), 5)
        self.assertIn("Element", str(ctx.exception))
        self.assertEqual(len(s), 2)
        self.assert_consistent(s)

    def test_failed_priority_change_restores_node(self):
        s = priority_set_builder().build()
        s.set_priority("a", 1)
        s.set_priority("b", 2)
        with self.assertRaises(TypeError):
            s.set_priority("a", "high")
        self.assertEqual(s.get_priority("a"), 1)
        self.assert_order(s, ["a", "b"])
        self.assert_consistent(s)

    def test_equality(self):
        self.assertEqual(priority_set_builder().build(), priority_set_builder().build())
        self.assertEqual(hash(priority_set_builder().build()), hash(priority_set_builder().build()))

        a = priority_set_builder().build()
        b = priority_set_builder().build()
        a.set_priority("abc", 5)
        self.assertNotEqual(a, b)
        b.set_priority("abc", 5)
        self.assertEqual(a, b)
        self.assertEqual(hash(a), hash(b))

        b.set_priority("abc", 6)
        self.assertNotEqual(a, b)

        c = priority_set_builder().build()
        c.set_priority("abcd", 5)
        self.assertNotEqual(a, c)
        self.assertNotEqual(a, {"abc": 5})

    def test_equality_ignores_insertion_order(self):
        a = priority_set_builder().build()
        b = priority_set_builder().build()
        for k, v in [("x", 1), ("y", 2), ("z", 3)]:
            a.set_priority(k, v)
        for k, v in [("z", 3), ("x", 7), ("y", 2), ("x", 1)]:
            b.set_priority(k, v)
        self.assertEqual(a, b)
        self.assertEqual(hash(a), hash(b))

    def test_to_string(self):
        s = priority_set_builder().build()
        self.assertEqual(str(s), "[]")
        s.set_priority("abc", 4)
        self.assertEqual(str(s), "[abc=4]")
        s.set_priority("def", 6)
        self.assertEqual(str(s), "[abc=4, def=6]")
        self.assertEqual(repr(s), "PrioritySet([abc=4, def=6])")

    def test_views_are_cached(self):
        s = priority_set_builder().build()
        self.assertIs(s.as_set(), s.as_set())
        self.assertIs(s.as_map(), s.as_map())

    def test_new_priority_set(self):
        s = PrioritySet.new_priority_set()
        s.set_priority("b", 1)
        s.set_priority("a", 1)
        self.assert_order(s, ["a", "b"])
        self.assertIsNone(s.default_priority)


class TestNode(PrioritySetUnitTest):
    def test_node(self):
        node = Node("abc", 4)
        self.assertEqual(node, Node("abc", 4))
        self.assertNotEqual(node, Node("abc", 5))
        self.assertNotEqual(node, Node("abd", 4))
        self.assertEqual(hash(node), hash(Node("abc", 4)))
        self.assertEqual(str(node), "abc=4")

        with self.assertRaises(AttributeError):
            node.priority = 5   # type: ignore

        with self.assertRaises(InvalidArgumentError):
            Node(None, 4)
        with self.assertRaises(InvalidArgumentError):
            Node("abc", None)


if __name__ == '__main__':
    import unittest
    unittest.main()
