from __future__ import annotations
from typing import Iterator, List, Tuple
import numpy as np
from tqdm.auto import tqdm

from combenum.combination import CombinationEnumerator
from combenum.combination_conf import EnumerationConfig


def _pbar(iterable, progress: bool, **kwargs):
    return tqdm(iterable, **kwargs) if progress else iterable


def iter_index_batches(
        enumerator: CombinationEnumerator,
        batch_size: int = 1024,
        progress: bool = False,
        verbose: bool = False,
) -> Iterator[np.ndarray]:
    """
    Stack consecutive subsets into int64 arrays of shape (b, k), 1 <= b <= batch_size.
    The last batch may be short; an empty enumeration yields no batch.
    """
    if batch_size <= 0:
        raise ValueError("batch_size must be > 0.")

    k = enumerator.subset_size()
    if verbose:
        print(f"[Batch] n={enumerator.total_elements()} k={k} batch_size={batch_size}")

    buf: List[Tuple[int, ...]] = []
    n_batches = 0
    for subset in _pbar(enumerator, progress, desc="Enumerate subsets", unit="subset"):
        buf.append(subset)
        if len(buf) == batch_size:
            n_batches += 1
            yield np.asarray(buf, dtype=np.int64).reshape(len(buf), k)
            buf = []
    if buf:
        n_batches += 1
        yield np.asarray(buf, dtype=np.int64).reshape(len(buf), k)

    if verbose:
        print(f"[Batch] done: {n_batches} batch(es)")


def iter_config_batches(cfg: EnumerationConfig) -> Iterator[np.ndarray]:
    enumerator = CombinationEnumerator.from_config(cfg)
    return iter_index_batches(
        enumerator,
        batch_size=cfg.batch_size,
        progress=cfg.progress,
        verbose=cfg.verbose,
    )


def gather_subsets(array, batch: np.ndarray) -> np.ndarray:
    """
    array: caller data, indexed along axis 0
    batch: (b, k) offsets from iter_index_batches
    Returns array[batch] with shape (b, k, *array.shape[1:]).
    """
    batch = np.asarray(batch)
    if batch.ndim != 2:
        raise ValueError(f"batch must be 2-D (b, k), got shape {batch.shape}")
    arr = np.asarray(array)
    if batch.size:
        lo, hi = int(batch.min()), int(batch.max())
        # negative offsets would wrap around
        if lo < 0 or hi >= arr.shape[0]:
            bad = lo if lo < 0 else hi
            raise ValueError(
                f"offset {bad} out of range for array with {arr.shape[0]} rows"
            )
    return arr[batch]
