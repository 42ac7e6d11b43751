from typing import Protocol, runtime_checkable

from querysense.domain import AnalyzedQuery


@runtime_checkable
class ReportOutput(Protocol):
    """Protocol for analysis report destinations."""

    @property
    def name(self) -> str:
        ...

    async def send(self, analyzed: AnalyzedQuery) -> None:
        ...
