from ._hash_map import HashMap

__all__ = ["HashMap"]
