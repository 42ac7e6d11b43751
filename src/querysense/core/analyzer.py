import logging
from typing import ClassVar

from querysense.analyzers import (
    IndexAdvisor,
    QueryRewriter,
    RuleEngine,
    RuleSet,
    StructuralFeatures,
    classify,
    normalize,
)
from querysense.domain import AnalysisReport, Issue, Severity, Suggestion
from querysense.exceptions import InvalidInput

logger = logging.getLogger(__name__)

DEFAULT_DATABASE_TYPE = "postgresql"


class SqlAnalyzer:
    """Deterministic, rule-based SQL analyzer.

    Runs the normalized query through the rule engine and the structural
    heuristics, classifies the resulting score and assembles an AnalysisReport
    together with a textual rewrite and index suggestions.
    """

    EXPLANATION: ClassVar[str] = "Static analysis performed based on query syntax and best practices."
    NO_ISSUES: ClassVar[Issue] = Issue(
        category="INFO",
        severity=Severity.LOW,
        description="No obvious anti-patterns detected.",
    )
    NO_SUGGESTIONS: ClassVar[Suggestion] = Suggestion(
        suggestion="Verify execution plan with EXPLAIN.",
        impact=Severity.LOW,
    )

    def __init__(
        self,
        rule_set: RuleSet | None = None,
        rewriter: QueryRewriter | None = None,
        index_advisor: IndexAdvisor | None = None,
    ) -> None:
        self._engine = RuleEngine(rule_set if rule_set is not None else RuleSet.default())
        self._rewriter = rewriter or QueryRewriter()
        self._index_advisor = index_advisor or IndexAdvisor()

    @property
    def rule_set(self) -> RuleSet:
        return self._engine.rule_set

    def analyze(self, query: str, database_type: str = DEFAULT_DATABASE_TYPE) -> AnalysisReport:
        if not isinstance(query, str):
            raise InvalidInput(f"Query must be a string, got {type(query).__name__}")
        if not query.strip():
            raise InvalidInput("Query is required")

        normalized = normalize(query)
        evaluation = self._engine.evaluate(normalized)
        features = StructuralFeatures.detect(normalized)
        score = evaluation.score + features.increment
        classification = classify(score)

        logger.debug(
            "Scored query at %d (%s), rules fired: %s",
            score,
            classification.category.value,
            ", ".join(evaluation.fired) or "none",
        )

        return AnalysisReport(
            query_text=query,
            database_type=database_type,
            workload_category=classification.category,
            complexity_score=score,
            estimated_execution_time=classification.estimated_execution_time,
            estimated_rows_scanned=classification.estimated_rows_scanned,
            detected_issues=evaluation.issues or (self.NO_ISSUES,),
            optimization_suggestions=evaluation.suggestions or (self.NO_SUGGESTIONS,),
            index_suggestions=self._index_advisor.suggest(normalized, features),
            optimized_query=self._rewriter.rewrite(query),
            explanation=self.EXPLANATION,
            performance_comparison=classification.performance_comparison,
        )


_default_analyzer = SqlAnalyzer()


def analyze(query: str, database_type: str = DEFAULT_DATABASE_TYPE) -> AnalysisReport:
    """Analyze ``query`` with the default rule set."""
    return _default_analyzer.analyze(query, database_type)
