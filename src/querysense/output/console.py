from querysense.domain import AnalyzedQuery
from querysense.serialization import report_to_json


class ConsoleReportOutput:
    """Console output adapter for analysis reports."""

    def __init__(self, prefix: str = "[REPORT]") -> None:
        self._prefix = prefix

    @property
    def name(self) -> str:
        return "console"

    async def send(self, analyzed: AnalyzedQuery) -> None:
        report = analyzed.report
        flat_sql = " ".join(report.query_text.split())
        sql_preview = flat_sql[:50]
        if len(flat_sql) > 50:
            sql_preview += "..."

        issue_count = len(report.detected_issues)
        print(
            f"{self._prefix} [{report.workload_category.value}] {sql_preview} - {issue_count} issue(s)"
        )

        for issue in report.detected_issues:
            print(f"  - {issue.severity.label}: {issue.description}")
        for index_name in report.index_suggestions:
            print(f"  + index: {index_name}")
        if report.optimized_query is not None:
            print("  rewritten:")
            for line in report.optimized_query.splitlines():
                print(f"    {line}")


class JsonReportOutput:
    """Prints each report as a JSON document."""

    def __init__(self, indent: int | None = 2) -> None:
        self._indent = indent

    @property
    def name(self) -> str:
        return "json"

    async def send(self, analyzed: AnalyzedQuery) -> None:
        print(report_to_json(analyzed, indent=self._indent))
