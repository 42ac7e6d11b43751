import re

from querysense.domain import Rule, Severity

_WHERE = re.compile(r"\bwhere\b")
_LIMIT = re.compile(r"\blimit\b")
_FROM = re.compile(r"\bfrom\b")
_JOIN = re.compile(r"\bjoin\b")
_COMMA_TABLE_LIST = re.compile(
    r",\s*[a-z0-9_]+"
    r"(?:\s+(?:as\s+)?(?!(?:asc|desc|from|where|on|using)\b)[a-z0-9_]+)?"
    r"\s*(?:where|;|$)"
)


def pattern_rule(
    id: str,
    severity: Severity,
    category: str,
    pattern: str,
    issue: str,
    suggestion: str,
) -> Rule:
    """Build a rule that fires when ``pattern`` is found in the normalized text."""
    compiled = re.compile(pattern)
    return Rule(
        id=id,
        severity=severity,
        category=category,
        predicate=lambda text: compiled.search(text) is not None,
        issue=issue,
        suggestion=suggestion,
    )


def _unbounded(text: str) -> bool:
    return bool(_FROM.search(text)) and not _WHERE.search(text) and not _LIMIT.search(text)


def _implicit_join(text: str) -> bool:
    # Rough: "a, b [alias] where", "a, b;" or "a, b" at the end, and no explicit JOIN.
    return bool(_COMMA_TABLE_LIST.search(text)) and not _JOIN.search(text)


SELECT_STAR = pattern_rule(
    "select_star",
    Severity.MEDIUM,
    "Pattern",
    r"select\s+\*",
    "SELECT * detected. This fetches all columns, which is inefficient.",
    "Replace * with the specific columns you need.",
)

LEADING_WILDCARD = pattern_rule(
    "leading_wildcard",
    Severity.HIGH,
    "Performance",
    r"like\s+['\"]%",
    "Leading wildcard in LIKE clause ('%value'). This disables index usage.",
    "Remove the leading % or use Full Text Search.",
)

NO_WHERE = Rule(
    id="no_where",
    severity=Severity.HIGH,
    category="Scalability",
    predicate=_unbounded,
    issue="Unbounded query. No WHERE or LIMIT clause detected.",
    suggestion="Add a WHERE clause to filter rows or a LIMIT to restrict result size.",
)

CROSS_JOIN = Rule(
    id="cross_join",
    severity=Severity.HIGH,
    category="Performance",
    predicate=_implicit_join,
    issue="Implicit JOIN (comma-separated tables) detected. Risk of Cartesian Product.",
    suggestion="Use explicit INNER JOIN syntax with ON conditions.",
)

ORDER_BY_RAND = pattern_rule(
    "order_by_rand",
    Severity.HIGH,
    "Performance",
    r"order\s+by\s+(?:rand|random)\(",
    "Ordering by random() is extremely slow on large tables.",
    "Retrieve random rows by selecting a random ID range or using TABLESAMPLE.",
)

DEFAULT_RULES: tuple[Rule, ...] = (
    SELECT_STAR,
    LEADING_WILDCARD,
    NO_WHERE,
    CROSS_JOIN,
    ORDER_BY_RAND,
)
