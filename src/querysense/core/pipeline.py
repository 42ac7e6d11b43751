import logging
from collections.abc import Sequence

from querysense.core.analyzer import SqlAnalyzer
from querysense.domain import AnalyzedQuery
from querysense.exceptions import InvalidInput
from querysense.input import QueryInput
from querysense.output import ReportOutput

logger = logging.getLogger(__name__)


class ReportPipeline:
    def __init__(
        self,
        input_source: QueryInput,
        analyzer: SqlAnalyzer,
        outputs: Sequence[ReportOutput],
    ) -> None:
        self._input = input_source
        self._analyzer = analyzer
        self._outputs = tuple(outputs)

    async def run(self) -> int:
        """Analyze every query from the input and deliver each report to all outputs."""
        delivered = 0
        async for query in self._input:
            try:
                report = self._analyzer.analyze(query.sql, query.metadata.database_type)
            except InvalidInput as exc:
                logger.warning("Skipping query from %s: %s", query.metadata.source or "input", exc)
                continue

            analyzed = AnalyzedQuery(query=query, report=report)
            for output in self._outputs:
                await output.send(analyzed)
            delivered += 1

        logger.info("Delivered %d report(s) to %d output(s)", delivered, len(self._outputs))
        return delivered
