from .heap import Comparable, MinHeap

__all__ = [
    "Comparable",
    "MinHeap",
]
