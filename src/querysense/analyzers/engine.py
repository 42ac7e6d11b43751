import logging
from dataclasses import dataclass
from typing import ClassVar

from querysense.analyzers.registry import RuleSet
from querysense.domain import Issue, Severity, Suggestion

logger = logging.getLogger(__name__)

BASE_SCORE = 10


@dataclass(frozen=True, slots=True)
class RuleEvaluation:
    """Issues, suggestions and score accumulated from one pass over a RuleSet."""

    issues: tuple[Issue, ...]
    suggestions: tuple[Suggestion, ...]
    score: int
    fired: tuple[str, ...]


class RuleEngine:
    """Evaluates every rule of a RuleSet against normalized query text."""

    _increments: ClassVar[dict[Severity, int]] = {
        Severity.HIGH: 50,
        Severity.MEDIUM: 20,
        Severity.LOW: 20,
    }

    def __init__(self, rule_set: RuleSet) -> None:
        self._rule_set = rule_set

    @property
    def rule_set(self) -> RuleSet:
        return self._rule_set

    @classmethod
    def increment_for(cls, severity: Severity) -> int:
        return cls._increments[severity]

    def evaluate(self, normalized: str, base_score: int = BASE_SCORE) -> RuleEvaluation:
        issues: list[Issue] = []
        suggestions: list[Suggestion] = []
        fired: list[str] = []
        score = base_score

        for rule in self._rule_set:
            if not rule.matches(normalized):
                continue
            logger.debug("Rule %s fired (%s)", rule.id, rule.severity.label)
            issues.append(
                Issue(
                    category=rule.category,
                    severity=rule.severity,
                    description=rule.issue,
                    rule_id=rule.id,
                )
            )
            suggestions.append(Suggestion(suggestion=rule.suggestion, impact=rule.severity))
            fired.append(rule.id)
            score += self.increment_for(rule.severity)

        return RuleEvaluation(
            issues=tuple(issues),
            suggestions=tuple(suggestions),
            score=score,
            fired=tuple(fired),
        )
