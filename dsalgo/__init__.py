"""Classic data structures and algorithms: linked lists, stacks, queues,
arrays, hash maps, trees, string search, sorting, backtracking and
dynamic programming."""

__version__ = "0.1.0"