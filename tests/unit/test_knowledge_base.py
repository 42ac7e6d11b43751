import random

import pytest

from querysense.chat import DEFAULT_KNOWLEDGE_BASE, KnowledgeBase, KnowledgeBaseMatcher, match
from querysense.domain import ChatMessage


class FixedChoice(random.Random):
    """Always picks the element at ``index``."""

    def __init__(self, index: int) -> None:
        super().__init__()
        self._fixed = index

    def choice(self, seq):  # type: ignore[override]
        return seq[self._fixed]


class TestGreetings:
    @pytest.mark.parametrize("message", ["hello", "Hi!", "hey there", "Well, HELLO"])
    def test_greeting_returns_known_greeting(self, message: str) -> None:
        assert match([], message) in DEFAULT_KNOWLEDGE_BASE.greetings

    def test_greeting_uses_injected_randomness(self) -> None:
        first = KnowledgeBaseMatcher(rng=FixedChoice(0))
        second = KnowledgeBaseMatcher(rng=FixedChoice(1))

        assert first.match([], "hello") == DEFAULT_KNOWLEDGE_BASE.greetings[0]
        assert second.match([], "hello") == DEFAULT_KNOWLEDGE_BASE.greetings[1]

    def test_seeded_rng_is_reproducible(self) -> None:
        answers_a = [KnowledgeBaseMatcher(rng=random.Random(7)).match([], "hi") for _ in range(3)]
        answers_b = [KnowledgeBaseMatcher(rng=random.Random(7)).match([], "hi") for _ in range(3)]

        assert answers_a == answers_b

    def test_greeting_must_be_whole_word(self) -> None:
        assert match([], "this is high priority shipping") == DEFAULT_KNOWLEDGE_BASE.default

    def test_greeting_wins_over_topics(self) -> None:
        assert match([], "hey, what is an index?") in DEFAULT_KNOWLEDGE_BASE.greetings


class TestTopics:
    def test_index_topic(self) -> None:
        assert match([], "tell me about index") == DEFAULT_KNOWLEDGE_BASE.topics["index"]

    def test_topic_match_is_case_insensitive(self) -> None:
        assert match([], "What does EXPLAIN do?") == DEFAULT_KNOWLEDGE_BASE.topics["explain"]

    def test_substring_match(self) -> None:
        assert match([], "how do indexes work") == DEFAULT_KNOWLEDGE_BASE.topics["index"]

    def test_first_topic_in_mapping_order_wins(self) -> None:
        assert match([], "should I use select or where first") == DEFAULT_KNOWLEDGE_BASE.topics["select"]
        assert match([], "where should the join go") == DEFAULT_KNOWLEDGE_BASE.topics["join"]

    def test_topic_order(self) -> None:
        assert list(DEFAULT_KNOWLEDGE_BASE.topics) == [
            "index",
            "join",
            "select",
            "where",
            "like",
            "limit",
            "explain",
        ]


class TestDefaultResponse:
    def test_unknown_message(self) -> None:
        assert match([], "banana") == DEFAULT_KNOWLEDGE_BASE.default

    def test_empty_message(self) -> None:
        assert match([], "") == DEFAULT_KNOWLEDGE_BASE.default

    def test_non_string_message_does_not_raise(self) -> None:
        assert match([], None) == DEFAULT_KNOWLEDGE_BASE.default  # type: ignore[arg-type]


class TestHistory:
    def test_history_does_not_change_answer(self) -> None:
        history = [
            ChatMessage(role="user", content="tell me about joins"),
            ChatMessage(role="assistant", content=DEFAULT_KNOWLEDGE_BASE.topics["join"]),
        ]

        assert match(history, "banana") == DEFAULT_KNOWLEDGE_BASE.default
        assert match(history, "and limit?") == DEFAULT_KNOWLEDGE_BASE.topics["limit"]


class TestCustomKnowledgeBase:
    def test_injected_knowledge_base(self) -> None:
        kb = KnowledgeBase(
            greetings=("Yo.",),
            default="No idea.",
            topics={"vacuum": "VACUUM reclaims storage."},
        )
        matcher = KnowledgeBaseMatcher(kb)

        assert matcher.match([], "hello") == "Yo."
        assert matcher.match([], "when to run vacuum") == "VACUUM reclaims storage."
        assert matcher.match([], "tell me about index") == "No idea."

    def test_topics_are_read_only(self) -> None:
        with pytest.raises(TypeError):
            DEFAULT_KNOWLEDGE_BASE.topics["new"] = "value"  # type: ignore[index]

    def test_requires_greetings(self) -> None:
        with pytest.raises(ValueError):
            KnowledgeBase(greetings=(), default="x")

    def test_requires_default(self) -> None:
        with pytest.raises(ValueError):
            KnowledgeBase(greetings=("hi",), default="")
