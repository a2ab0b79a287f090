"""Classic data structures and algorithms: searching, sorting, selection,
binary trees, graph traversal, recursion, Huffman coding, knapsack and
matrix sums."""

__version__ = "0.1.0"