from __future__ import annotations
from typing import Iterator, List, Tuple

from combenum.combination_conf import EnumerationConfig, check_count

Subset = Tuple[int, ...]


class CombinationCursor:
    """
    Forward cursor over the k-subsets of range(n) in lexicographic order.

    Holds its own copy of n and k, so advancing and comparing never needs the
    enumerator that created it. Cursors are only built by
    CombinationEnumerator.start()/end(); the bare constructor gives the
    empty (0, 0) end position.
    """

    def __init__(self):
        self._n: int = 0
        self._k: int = 0
        self._idx: List[int] = []
        self._exhausted: bool = True

    @classmethod
    def _at(cls, n: int, k: int, anchor: int, exhausted: bool) -> CombinationCursor:
        cur = cls()
        cur._n = n
        cur._k = k
        cur._idx = [anchor + i for i in range(k)]
        cur._exhausted = exhausted
        return cur

    @property
    def indices(self) -> Subset:
        return tuple(self._idx)

    @property
    def exhausted(self) -> bool:
        return self._exhausted

    def total_elements(self) -> int:
        return self._n

    def subset_size(self) -> int:
        return self._k

    def advance(self) -> CombinationCursor:
        if self._exhausted:
            return self

        n, k, r = self._n, self._k, self._idx
        i = k - 1
        # position i tops out at n - k + i
        while i >= 0 and r[i] == i + (n - k):
            i -= 1
        if i < 0:
            # last subset: keep the indices, step past the end
            self._exhausted = True
            return self

        r[i] += 1
        for j in range(i + 1, k):
            r[j] = r[j - 1] + 1
        return self

    def post_advance(self) -> CombinationCursor:
        previous = self.copy()
        self.advance()
        return previous

    def copy(self) -> CombinationCursor:
        cur = CombinationCursor()
        cur._n = self._n
        cur._k = self._k
        cur._idx = list(self._idx)
        cur._exhausted = self._exhausted
        return cur

    __copy__ = copy

    def __deepcopy__(self, memo) -> CombinationCursor:
        return self.copy()

    def move(self) -> CombinationCursor:
        cur = CombinationCursor()
        self.swap(cur)
        return cur

    def swap(self, other: CombinationCursor) -> None:
        self._n, other._n = other._n, self._n
        self._k, other._k = other._k, self._k
        self._idx, other._idx = other._idx, self._idx
        self._exhausted, other._exhausted = other._exhausted, self._exhausted

    def __eq__(self, other) -> bool:
        if not isinstance(other, CombinationCursor):
            return NotImplemented
        return (self._n == other._n
                and self._k == other._k
                and self._idx == other._idx
                and self._exhausted == other._exhausted)

    __hash__ = None

    def __len__(self) -> int:
        return len(self._idx)

    def __getitem__(self, pos):
        return self.indices[pos]

    def __iter__(self) -> Iterator[int]:
        return iter(self.indices)

    def __repr__(self) -> str:
        state = "end" if self._exhausted else "at"
        return f"CombinationCursor(n={self._n}, k={self._k}, {state}={list(self._idx)})"


class CombinationEnumerator:
    """
    Enumerates the k-element subsets of range(n) as sorted offset tuples.

    The enumerator never sees caller data; use the offsets to select elements
    (see LazyCombinations and index_batches). K > n, n == 0 and k == 0 all
    give an empty enumeration, k == 0 included.

        for subset in CombinationEnumerator(5, 2):
            print([letters[i] for i in subset])
    """

    def __init__(self, total_elements: int = 0, subset_size: int = 0):
        self._n: int = check_count("total_elements", total_elements)
        self._k: int = check_count("subset_size", subset_size)

    @classmethod
    def from_config(cls, cfg: EnumerationConfig) -> CombinationEnumerator:
        cfg.validate()
        return cls(cfg.total_elements, cfg.subset_size)

    def total_elements(self) -> int:
        return self._n

    def subset_size(self) -> int:
        return self._k

    def _is_empty(self) -> bool:
        return self._k > self._n or self._n == 0 or self._k == 0

    def _end_anchor(self) -> int:
        # n - k only exists for k <= n
        if self._k > self._n:
            return 0
        return self._n - self._k

    def start(self) -> CombinationCursor:
        if self._is_empty():
            return self.end()
        return CombinationCursor._at(self._n, self._k, 0, exhausted=False)

    def end(self) -> CombinationCursor:
        return CombinationCursor._at(self._n, self._k, self._end_anchor(), exhausted=True)

    def __iter__(self) -> Iterator[Subset]:
        cur = self.start()
        end = self.end()
        while cur != end:
            yield cur.indices
            cur.advance()

    def copy(self) -> CombinationEnumerator:
        return CombinationEnumerator(self._n, self._k)

    __copy__ = copy

    def __deepcopy__(self, memo) -> CombinationEnumerator:
        return self.copy()

    def move(self) -> CombinationEnumerator:
        moved = CombinationEnumerator(self._n, self._k)
        self._n, self._k = 0, 0
        return moved

    def __eq__(self, other) -> bool:
        if not isinstance(other, CombinationEnumerator):
            return NotImplemented
        return self._n == other._n and self._k == other._k

    def __repr__(self) -> str:
        return f"CombinationEnumerator(total_elements={self._n}, subset_size={self._k})"
