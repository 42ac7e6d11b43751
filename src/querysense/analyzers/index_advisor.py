import re
from typing import ClassVar

from querysense.analyzers.heuristics import StructuralFeatures


class IndexAdvisor:
    """Proposes index names from the first WHERE column and the presence of joins."""

    JOIN_SUGGESTION: ClassVar[str] = "fk_join_columns"

    _where_column: ClassVar[re.Pattern[str]] = re.compile(r"where\s+([a-z0-9_.]+)")

    def suggest(self, normalized: str, features: StructuralFeatures) -> tuple[str, ...]:
        suggestions: list[str] = []

        match = self._where_column.search(normalized)
        if match:
            suggestions.append(self.index_name(match.group(1)))

        if features.has_join:
            suggestions.append(self.JOIN_SUGGESTION)

        return tuple(suggestions)

    @staticmethod
    def index_name(column: str) -> str:
        return f"idx_{column.replace('.', '_', 1)}"
