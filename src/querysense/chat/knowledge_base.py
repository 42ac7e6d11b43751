"""Keyword matcher behind the SQL assistant chat.

A message is answered with a greeting, the first topic whose keyword appears in
it, or the default response. Earlier turns are accepted but never consulted.
"""

import random
import re
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import ClassVar

from querysense.domain import ChatMessage


@dataclass(frozen=True, slots=True)
class KnowledgeBase:
    greetings: tuple[str, ...]
    default: str
    topics: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.greetings:
            raise ValueError("Knowledge base needs at least one greeting")
        if not self.default:
            raise ValueError("Knowledge base needs a default response")
        object.__setattr__(self, "topics", MappingProxyType(dict(self.topics)))


DEFAULT_KNOWLEDGE_BASE = KnowledgeBase(
    greetings=(
        "Hello! I am your SQL Optimization Assistant. I analyze queries using static rules.",
        "Hi there! Paste a SQL query to get a detailed breakdown of potential performance issues.",
    ),
    default=(
        "I can help you optimize SQL queries. I look for missing indexes, wildcard selects, "
        "and expensive joins. Try asking about 'joins' or 'indexes'."
    ),
    topics={
        "index": (
            "Indexes are crucial for performance. They allow the database to find rows without "
            "scanning the entire table. You should index columns used in WHERE, JOIN, and "
            "ORDER BY clauses."
        ),
        "join": (
            "Joins combine rows from two or more tables. INNER JOINs are generally faster than "
            "OUTER JOINs. Always join on indexed columns, typically Foreign Keys."
        ),
        "select": (
            "Avoid 'SELECT *'. It fetches all columns, increasing network load and memory usage. "
            "Explicitly list the columns you need."
        ),
        "where": (
            "The WHERE clause filters data. Without it, you might scan the whole table. "
            "Ensure columns in WHERE are indexed."
        ),
        "like": (
            "Using 'LIKE %value' prevents index usage because of the leading wildcard. "
            "Use 'LIKE value%' if possible, or Full Text Search."
        ),
        "limit": (
            "LIMIT restricts the number of rows returned, which saves resources. "
            "It's great for pagination or sampling data."
        ),
        "explain": (
            "EXPLAIN (or EXPLAIN ANALYZE) shows the execution plan of your query. It tells you "
            "if indexes are being used or if a sequential scan is happening."
        ),
    },
)


class KnowledgeBaseMatcher:
    _greeting: ClassVar[re.Pattern[str]] = re.compile(r"\b(?:hi|hello|hey)\b")

    def __init__(
        self,
        knowledge_base: KnowledgeBase = DEFAULT_KNOWLEDGE_BASE,
        rng: random.Random | None = None,
    ) -> None:
        self._knowledge_base = knowledge_base
        self._rng = rng or random.Random()

    @property
    def knowledge_base(self) -> KnowledgeBase:
        return self._knowledge_base

    def match(self, history: Sequence[ChatMessage], message: str) -> str:
        if not isinstance(message, str):
            return self._knowledge_base.default

        lowered = message.lower()
        if self._greeting.search(lowered):
            return self._rng.choice(self._knowledge_base.greetings)

        for keyword, response in self._knowledge_base.topics.items():
            if keyword in lowered:
                return response

        return self._knowledge_base.default


_default_matcher = KnowledgeBaseMatcher()


def match(history: Sequence[ChatMessage], message: str) -> str:
    return _default_matcher.match(history, message)
