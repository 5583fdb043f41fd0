"""Classic small algorithms: sorting, numbers, strings, Huffman codes, matrices, scheduling and more."""

__version__ = "0.1.0"