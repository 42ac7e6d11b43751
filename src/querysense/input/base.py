from typing import Protocol, Self, runtime_checkable

from querysense.domain import Query


@runtime_checkable
class QueryInput(Protocol):
    """Protocol for async query input sources."""

    def __aiter__(self) -> Self:
        ...

    async def __anext__(self) -> Query:
        ...
