from __future__ import annotations
from typing import Generic, Iterable, Iterator, List, Tuple, TypeVar

from combenum.combination import CombinationEnumerator

T = TypeVar("T")


class LazyCombinations(Generic[T]):
    """
    Element tuples for every k-subset of `data`, ordered like the offsets
    CombinationEnumerator produces. k == 0 and k > len(data) yield nothing.
    """

    def __init__(self, data: Iterable[T], k: int):
        self.data: List[T] = list(data)
        self.k: int = k
        if k < 0:
            raise ValueError("k must be >= 0")
        self.enumerator = CombinationEnumerator(len(self.data), k)

    def offsets(self) -> Iterator[Tuple[int, ...]]:
        return iter(self.enumerator)

    def __iter__(self) -> Iterator[Tuple[T, ...]]:
        arr = self.data
        for r in self.enumerator:
            yield tuple(arr[i] for i in r)
