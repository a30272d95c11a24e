from ._hash_set import HashSet

__all__ = ["HashSet"]
