import unittest

from lineargraph.classes.node import Node, compare_labels, node_constructor


class TestNodeOrdering(unittest.TestCase):

    def test_equality_ignores_payload_and_successors(self):
        self.assertEqual(Node("a", 1, [2]), Node("b", 1, [3, 4]))
        self.assertNotEqual(Node("a", 1), Node("a", 2))

    def test_ordering_follows_labels(self):
        nodes = [Node("c", 3), Node("a", 1), Node("b", 2)]
        self.assertEqual([n.payload for n in sorted(nodes)], ["a", "b", "c"])
        self.assertTrue(Node(None, 1) < Node(None, 2))
        self.assertTrue(Node(None, 2) >= Node(None, 2))

    def test_hash_by_label(self):
        self.assertEqual(len({Node("a", "x"), Node("b", "x"), Node("c", "y")}), 2)

    def test_compare_labels(self):
        self.assertEqual(compare_labels(1, 1), 0)
        self.assertEqual(compare_labels(1, 2), -1)
        self.assertEqual(compare_labels("b", "a"), 1)

    def test_compare_checks_equality_first(self):
        # NaN is never equal to itself and never <= anything, so it sorts high
        nan = float("nan")
        self.assertEqual(compare_labels(nan, 1.0), 1)
        self.assertEqual(compare_labels(1.0, nan), 1)

    def test_str_and_constructor(self):
        node = node_constructor(("payload", 7, [8, 9]))
        self.assertEqual(node.successors, (8, 9))
        self.assertEqual(str(node), "'payload'[7]")
        self.assertIn("successors=[8, 9]", repr(node))


if __name__ == "__main__":
    unittest.main()
