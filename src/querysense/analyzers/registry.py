from collections.abc import Iterable, Iterator

from querysense.analyzers.rules import DEFAULT_RULES
from querysense.domain import Rule
from querysense.exceptions import DuplicateRuleError


class RuleSet:
    """Ordered collection of anti-pattern rules with unique identifiers."""

    def __init__(self, rules: Iterable[Rule] = ()) -> None:
        self._rules: list[Rule] = []
        for rule in rules:
            self.register(rule)

    @classmethod
    def default(cls) -> "RuleSet":
        return cls(DEFAULT_RULES)

    def register(self, rule: Rule) -> None:
        if any(existing.id == rule.id for existing in self._rules):
            raise DuplicateRuleError(rule.id)
        self._rules.append(rule)

    @property
    def rules(self) -> tuple[Rule, ...]:
        return tuple(self._rules)

    def get(self, rule_id: str) -> Rule | None:
        for rule in self._rules:
            if rule.id == rule_id:
                return rule
        return None

    def __iter__(self) -> Iterator[Rule]:
        return iter(tuple(self._rules))

    def __len__(self) -> int:
        return len(self._rules)
