"""Hash functions, an insertion-ordered hash map, a growable array list and string key helpers."""

__version__ = "0.1.0"
__all__ = ["arraylist", "hashing", "hashmap", "siphash", "stringmap", "utils"]