"""Classic data structures and algorithms, plus a small in-process event-driven service."""

__version__ = "0.1.0"

__all__ = [
    "app",
    "avl",
    "binary_trees",
    "bst",
    "consumers",
    "github",
    "graphs",
    "hashing",
    "linked_list",
    "linked_queue",
    "message_queue",
    "rest_api",
    "stack",
    "tries",
    "vector",
]