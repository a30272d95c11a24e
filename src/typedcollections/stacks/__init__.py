from ._linked_stack import LinkedStack

__all__ = ["LinkedStack"]
