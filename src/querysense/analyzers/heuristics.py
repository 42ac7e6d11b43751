import re
from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True, slots=True)
class StructuralFeatures:
    """Coarse syntactic features found in normalized query text."""

    has_join: bool = False
    has_group_by: bool = False
    has_order_by: bool = False

    _join: ClassVar[re.Pattern[str]] = re.compile(r"\bjoin\b")
    _group_by: ClassVar[re.Pattern[str]] = re.compile(r"\bgroup\s+by\b")
    _order_by: ClassVar[re.Pattern[str]] = re.compile(r"\border\s+by\b")

    JOIN_INCREMENT: ClassVar[int] = 30
    GROUP_BY_INCREMENT: ClassVar[int] = 20
    ORDER_BY_INCREMENT: ClassVar[int] = 10

    @classmethod
    def detect(cls, normalized: str) -> "StructuralFeatures":
        return cls(
            has_join=cls._join.search(normalized) is not None,
            has_group_by=cls._group_by.search(normalized) is not None,
            has_order_by=cls._order_by.search(normalized) is not None,
        )

    @property
    def increment(self) -> int:
        """Score added on top of the rule engine's result."""
        total = 0
        if self.has_join:
            total += self.JOIN_INCREMENT
        if self.has_group_by:
            total += self.GROUP_BY_INCREMENT
        if self.has_order_by:
            total += self.ORDER_BY_INCREMENT
        return total
