"""Command that walks a small queue and prints what it sees."""

from dsakit.fifo import Queue


def main(argv=None):
    """Fill a queue with 1..3, then peek and dequeue five times."""
    q = Queue()
    for value in range(1, 4):
        q.enqueue(value)

    for _ in range(5):
        ok = not q.is_empty()
        front = q.dequeue() if ok else 0
        print(str(ok).lower(), front, q.size())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())