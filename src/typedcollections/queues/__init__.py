from ._linked_queue import LinkedQueue

__all__ = ["LinkedQueue"]
