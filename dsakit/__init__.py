"""Classic data structures and algorithms: recursion, strings, sorting, arrays,
matrices, heaps, hashing, linked lists, stacks, queues, trees and graphs."""

__version__ = "0.1.0"