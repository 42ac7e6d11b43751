__version__ = "0.1.0"

from querysense.analyzers import (
    DEFAULT_RULES,
    IndexAdvisor,
    QueryRewriter,
    RuleEngine,
    RuleSet,
    StructuralFeatures,
    normalize,
)
from querysense.chat import KnowledgeBase, KnowledgeBaseMatcher, match
from querysense.core import ReportPipeline, SqlAnalyzer, analyze
from querysense.domain import (
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
from querysense.exceptions import InvalidInput, QuerySenseError
from querysense.input import ManualInput, QueryInput, SqlFileInput
from querysense.output import ConsoleReportOutput, ReportOutput

__all__ = [
    "__version__",
    "analyze",
    "match",
    "SqlAnalyzer",
    "ReportPipeline",
    "RuleSet",
    "RuleEngine",
    "DEFAULT_RULES",
    "StructuralFeatures",
    "QueryRewriter",
    "IndexAdvisor",
    "normalize",
    "KnowledgeBase",
    "KnowledgeBaseMatcher",
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
    "InvalidInput",
    "QuerySenseError",
    "QueryInput",
    "ManualInput",
    "SqlFileInput",
    "ReportOutput",
    "ConsoleReportOutput",
]
