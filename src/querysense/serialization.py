"""JSON-ready views of analysis reports.

Field names follow the ``query_analyses`` history record: ``query_text``,
``database_type``, ``workload_category`` and so on. Severities are written as
their lower-case labels.
"""

import json
from dataclasses import asdict
from typing import Any

from querysense.domain import AnalysisReport, AnalyzedQuery


def report_to_dict(report: AnalysisReport) -> dict[str, Any]:
    return {
        "query_text": report.query_text,
        "database_type": report.database_type,
        "workload_category": report.workload_category.value,
        "complexity_score": report.complexity_score,
        "estimated_execution_time": report.estimated_execution_time,
        "estimated_rows_scanned": report.estimated_rows_scanned,
        "detected_issues": [
            {
                "type": issue.category,
                "severity": issue.severity.label,
                "description": issue.description,
            }
            for issue in report.detected_issues
        ],
        "optimization_suggestions": [
            {"suggestion": s.suggestion, "impact": s.impact.label}
            for s in report.optimization_suggestions
        ],
        "index_suggestions": list(report.index_suggestions),
        "optimized_query": report.optimized_query,
        "explanation": report.explanation,
        "performance_comparison": asdict(report.performance_comparison),
    }


def analyzed_query_to_dict(analyzed: AnalyzedQuery) -> dict[str, Any]:
    payload = report_to_dict(analyzed.report)
    payload["source"] = analyzed.query.metadata.source
    payload["created_date"] = analyzed.timestamp.isoformat()
    return payload


def report_to_json(report: AnalysisReport | AnalyzedQuery, indent: int | None = None) -> str:
    if isinstance(report, AnalyzedQuery):
        payload = analyzed_query_to_dict(report)
    else:
        payload = report_to_dict(report)
    return json.dumps(payload, indent=indent)
