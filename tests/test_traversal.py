import unittest

from lineargraph import graph_from_edged_vertices, mk_graph
from lineargraph.analysis.traversal import Tree, dff, dff_with, dfs, dfs_with, postorder, preorder
from lineargraph.exceptions import VertexOutOfBoundsError


class TestDepthFirst(unittest.TestCase):

    def setUp(self):
        # 0 -> 1 -> 2 -> 0, 1 -> 3, 4 isolated
        self.graph = graph_from_edged_vertices([
            ("a", "a", ["b"]),
            ("b", "b", ["c", "d"]),
            ("c", "c", ["a"]),
            ("d", "d", []),
            ("e", "e", []),
        ])

    def test_dfs_from_root(self):
        forest = dfs(self.graph, [0])
        self.assertEqual(len(forest), 1)
        self.assertEqual(preorder(forest), [0, 1, 2, 3])
        self.assertEqual(postorder(forest), [2, 3, 1, 0])

    def test_tree_shape(self):
        tree = dfs(self.graph, [1])[0]
        self.assertEqual(tree.root, 1)
        self.assertEqual([c.root for c in tree.children], [2, 3])
        self.assertEqual(tree.children[0].children, [Tree(0)])

    def test_dff_covers_every_vertex_once(self):
        forest = dff(self.graph)
        self.assertEqual([t.root for t in forest], [0, 4])
        self.assertEqual(sorted(preorder(forest)), self.graph.vertices())

    def test_visited_roots_skipped(self):
        forest = dfs(self.graph, [2, 0, 4])
        self.assertEqual([t.root for t in forest], [2, 4])

    def test_custom_adjacency(self):
        forest = dff_with((1, 3), lambda v: [v + 1] if v < 3 else [])
        self.assertEqual(preorder(forest), [1, 2, 3])
        self.assertEqual(len(forest), 1)

    def test_deep_chain(self):
        n = 5000
        forest = dfs_with((0, n - 1), lambda v: [v + 1] if v < n - 1 else [], [0])
        self.assertEqual(preorder(forest), list(range(n)))
        self.assertEqual(postorder(forest), list(range(n - 1, -1, -1)))

    def test_root_out_of_bounds(self):
        with self.assertRaises(VertexOutOfBoundsError):
            dfs(self.graph, [7])

    def test_empty(self):
        self.assertEqual(dff(mk_graph([])), [])


if __name__ == "__main__":
    unittest.main()
