"""Classic data structures and algorithms: stack and queue, hash table, binary search trees, graphs and numeric integration."""

__version__ = "0.1.0"