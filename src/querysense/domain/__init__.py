"""Domain models for query analysis and reporting."""

from querysense.domain.models import (
    AnalysisReport,
    AnalyzedQuery,
    ChatMessage,
    Issue,
    PerformanceComparison,
    Query,
    QueryMetadata,
    Rule,
    Severity,
    Suggestion,
    WorkloadCategory,
)

__all__ = [
    "AnalysisReport",
    "AnalyzedQuery",
    "ChatMessage",
    "Issue",
    "PerformanceComparison",
    "Query",
    "QueryMetadata",
    "Rule",
    "Severity",
    "Suggestion",
    "WorkloadCategory",
]
