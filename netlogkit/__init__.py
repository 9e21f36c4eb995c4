"""Search routines, linked lists, a sorted linked list and binary search trees."""

__version__ = "0.1.0"