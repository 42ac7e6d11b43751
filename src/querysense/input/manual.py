from collections.abc import Sequence

from querysense.domain import Query, QueryMetadata


class ManualInput:
    """Manual input source for programmatically feeding queries."""

    def __init__(self, queries: Sequence[Query | str], database_type: str = "postgresql") -> None:
        self._queries: tuple[Query, ...] = tuple(
            q if isinstance(q, Query) else Query(sql=q, metadata=QueryMetadata(database_type=database_type))
            for q in queries
        )
        self._index: int = 0

    def __aiter__(self) -> "ManualInput":
        return self

    async def __anext__(self) -> Query:
        if self._index >= len(self._queries):
            raise StopAsyncIteration
        query = self._queries[self._index]
        self._index += 1
        return query
