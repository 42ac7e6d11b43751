import re
from typing import ClassVar


class QueryRewriter:
    """Best-effort textual rewrite of the original query.

    Every ``*`` is replaced once ``SELECT *`` is seen, multiplication included.
    """

    COLUMN_PLACEHOLDER: ClassVar[str] = "id, name, created_at /* specific columns */"
    LIMIT_CLAUSE: ClassVar[str] = "\nLIMIT 100"

    _select_star: ClassVar[re.Pattern[str]] = re.compile(r"select\s+\*", re.IGNORECASE)
    _limit: ClassVar[re.Pattern[str]] = re.compile(r"\blimit\b", re.IGNORECASE)
    _where: ClassVar[re.Pattern[str]] = re.compile(r"\bwhere\b", re.IGNORECASE)

    def rewrite(self, original: str) -> str | None:
        rewritten = original
        if self._select_star.search(rewritten):
            rewritten = rewritten.replace("*", self.COLUMN_PLACEHOLDER)
        if not self._limit.search(rewritten) and not self._where.search(rewritten):
            rewritten += self.LIMIT_CLAUSE

        if rewritten == original:
            return None
        return rewritten
