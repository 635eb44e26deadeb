"""Linked list, queue, stacks, bracket checking and in-place array routines."""

__version__ = "0.1.0"