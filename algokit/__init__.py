"""Classic algorithms and data structures for number theory, graphs, trees and strings."""

__version__ = "0.1.0"

__all__ = [
    "annealing",
    "automata",
    "connectivity",
    "dsu",
    "flow",
    "fraction",
    "linear_system",
    "matrix",
    "mo",
    "mst",
    "numtheory",
    "polynomial",
    "range_query",
    "scapegoat",
    "shortest_path",
    "splay",
    "strings",
    "treap",
    "tree_queries",
    "vector2d",
]