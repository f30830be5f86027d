import sys
from typing import List, Optional, Sequence

from combenum.combination import CombinationEnumerator
from combenum.combination_conf import EnumerationConfig
from combenum.index_batches import iter_config_batches
from combenum.lazy_combinations import LazyCombinations

TOTAL_ELEMENTS = 5
SUBSET_SIZE = 2
BATCH_SIZE = 4
PROGRESS = False

# letters are shown next to the offsets when n fits
LABELS = "abcdefghijklmnopqrstuvwxyz"


USAGE = "usage: python -m combenum.main_enumerate [N K]"


def parse_args(argv: Sequence[str]) -> EnumerationConfig:
    if len(argv) not in (0, 2):
        raise SystemExit(USAGE)
    try:
        n, k = (int(a) for a in argv) if argv else (TOTAL_ELEMENTS, SUBSET_SIZE)
    except ValueError:
        raise SystemExit(f"{USAGE}\nN and K must be integers, got {list(argv)}") from None
    cfg = EnumerationConfig(
        total_elements=n,
        subset_size=k,
        batch_size=BATCH_SIZE,
        progress=PROGRESS,
        verbose=True,
    )
    cfg.validate()
    return cfg


def main(argv: Optional[List[str]] = None) -> int:
    cfg = parse_args(sys.argv[1:] if argv is None else argv)
    enumerator = CombinationEnumerator.from_config(cfg)
    print(f"[Enum] {enumerator}")

    if enumerator.start() == enumerator.end():
        print("[Enum] empty enumeration (k > n, n == 0 or k == 0)")
        return 0

    labels = None
    if cfg.total_elements <= len(LABELS):
        labels = LazyCombinations(LABELS[:cfg.total_elements], cfg.subset_size)

    count = 0
    for batch in iter_config_batches(cfg):
        for row in batch.tolist():
            count += 1
            print(f"  {count:>6}: {row}")

    if labels is not None:
        print("\n===== Labels =====")
        for i, subset in enumerate(labels, start=1):
            print(f"  {i:>6}: {''.join(subset)}")

    print(f"[Enum] visited {count} subset(s)")
    return 0


if __name__ == "__main__":
    sys.exit(main())
