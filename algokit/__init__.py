"""Classic algorithms and data structures: sorting, searching, heaps, trees,
range queries, graphs, strings, backtracking and number theory."""

__version__ = "0.1.0"

__all__ = [
    "avl",
    "binary_tree",
    "bst",
    "combinatorics",
    "connectivity",
    "dsu",
    "fenwick",
    "graph",
    "heap",
    "linked_list",
    "mo",
    "mst",
    "numbers",
    "scheduling",
    "searching",
    "segment_tree",
    "shortest_paths",
    "sorting",
    "strings",
    "tree_queries",
    "trie",
]