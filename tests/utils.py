import sys
from contextlib import contextmanager


@contextmanager
def recursion_limit(n):
    limit = sys.getrecursionlimit()
    sys.setrecursionlimit(n)
    try:
        yield
    finally:
        sys.setrecursionlimit(limit)
