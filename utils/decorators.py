from __future__ import annotations
from functools import wraps


def exclusive(fn):
    """
    Run a handler while holding its storage's lock.
    The handler must take the MemoryStorage as its first argument, so each
    read-modify-write step completes before another request touches the store.
    """
    @wraps(fn)
    def wrapper(storage, *args, **kwargs):
        with storage.lock:
            return fn(storage, *args, **kwargs)

    return wrapper
