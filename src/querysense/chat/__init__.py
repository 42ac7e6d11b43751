from querysense.chat.knowledge_base import (
    DEFAULT_KNOWLEDGE_BASE,
    KnowledgeBase,
    KnowledgeBaseMatcher,
    match,
)

__all__ = ["DEFAULT_KNOWLEDGE_BASE", "KnowledgeBase", "KnowledgeBaseMatcher", "match"]
