"""Classic data structures and graph algorithms: queues, stacks, linked lists, search trees, heaps, BFS and DFS."""

__version__ = "0.1.0"