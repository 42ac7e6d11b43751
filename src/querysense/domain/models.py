"""Core domain models for query analysis and reporting."""

from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum, IntEnum


class Severity(IntEnum):
    """Issue severity levels, ordered for comparison (higher value = higher severity)."""

    LOW = 1
    MEDIUM = 2
    HIGH = 3

    @property
    def label(self) -> str:
        return self.name.lower()


class WorkloadCategory(str, Enum):
    """Coarse workload bucket derived from the complexity score."""

    FAST = "FAST"
    MODERATE = "MODERATE"
    HEAVY = "HEAVY"


@dataclass(frozen=True, slots=True)
class Rule:
    """A declarative anti-pattern detector.

    ``predicate`` receives normalized query text and must be a pure function of it.
    """

    id: str
    severity: Severity
    category: str
    predicate: Callable[[str], bool]
    issue: str
    suggestion: str

    def matches(self, normalized: str) -> bool:
        return bool(self.predicate(normalized))


@dataclass(frozen=True, slots=True)
class Issue:
    category: str
    severity: Severity
    description: str
    rule_id: str | None = None


@dataclass(frozen=True, slots=True)
class Suggestion:
    suggestion: str
    impact: Severity


@dataclass(frozen=True, slots=True)
class PerformanceComparison:
    original_cost: int
    optimized_cost: int
    improvement_percent: int


@dataclass(frozen=True, slots=True)
class AnalysisReport:
    """The aggregate result of analyzing one query."""

    query_text: str
    database_type: str
    workload_category: WorkloadCategory
    complexity_score: int
    estimated_execution_time: str
    estimated_rows_scanned: int
    detected_issues: tuple[Issue, ...]
    optimization_suggestions: tuple[Suggestion, ...]
    index_suggestions: tuple[str, ...]
    optimized_query: str | None
    explanation: str
    performance_comparison: PerformanceComparison

    @property
    def rule_ids(self) -> tuple[str, ...]:
        return tuple(issue.rule_id for issue in self.detected_issues if issue.rule_id)


@dataclass(frozen=True, slots=True)
class QueryMetadata:
    """Optional metadata associated with a query."""

    database_type: str = "postgresql"
    timestamp: datetime | None = None
    source: str | None = None


@dataclass(frozen=True, slots=True)
class Query:
    """A SQL statement submitted for analysis."""

    sql: str
    metadata: QueryMetadata = field(default_factory=QueryMetadata)


@dataclass(frozen=True, slots=True)
class AnalyzedQuery:
    """A query paired with the report produced for it."""

    query: Query
    report: AnalysisReport
    timestamp: datetime = field(default_factory=datetime.now)


@dataclass(frozen=True, slots=True)
class ChatMessage:
    role: str
    content: str
