from __future__ import annotations
from dataclasses import dataclass
import operator


def check_count(name: str, value) -> int:
    # ints and numpy integers pass, bool / float / str do not
    if isinstance(value, bool):
        raise TypeError(f"{name} must be an int, got bool")
    try:
        value = operator.index(value)
    except TypeError:
        raise TypeError(f"{name} must be an int, got {type(value).__name__}") from None
    if value < 0:
        raise ValueError(f"{name} must be >= 0")
    return value


@dataclass
class EnumerationConfig:
    total_elements: int = 0
    subset_size: int = 0  # k > total_elements -> empty enumeration

    # batching
    batch_size: int = 1024
    progress: bool = False
    verbose: bool = False

    def validate(self) -> None:
        self.total_elements = check_count("total_elements", self.total_elements)
        self.subset_size = check_count("subset_size", self.subset_size)
        self.batch_size = check_count("batch_size", self.batch_size)
        if self.batch_size == 0:
            raise ValueError("batch_size must be > 0.")
