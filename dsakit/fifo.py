"""A first-in, first-out queue."""

from collections import deque


class Queue:
    """FIFO queue; reading from an empty queue raises IndexError."""

    def __init__(self):
        self._data = deque()

    def enqueue(self, val):
        self._data.append(val)

    def dequeue(self):
        if not self._data:
            raise IndexError("dequeue from empty queue")
        return self._data.popleft()

    def peek(self):
        if not self._data:
            raise IndexError("peek at empty queue")
        return self._data[0]

    def is_empty(self):
        return not self._data

    def size(self):
        return len(self._data)

    def __len__(self):
        return len(self._data)