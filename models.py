from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass
class _Node(Generic[T]):
    value: T
    next: Optional["_Node[T]"] = field(default=None, repr=False)


@dataclass
class QueueConfig:
    """
    Queue の設定

    max_value_len: 追加できる値の最大長（文字数）
                   None なら無制限
    """
    max_value_len: Optional[int] = None

    def __post_init__(self) -> None:
        if self.max_value_len is not None and self.max_value_len < 0:
            raise ValueError("max_value_len must be >= 0")
