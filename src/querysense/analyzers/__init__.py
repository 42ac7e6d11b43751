from querysense.analyzers.classifier import Classification, categorize, classify
from querysense.analyzers.engine import BASE_SCORE, RuleEngine, RuleEvaluation
from querysense.analyzers.heuristics import StructuralFeatures
from querysense.analyzers.index_advisor import IndexAdvisor
from querysense.analyzers.normalizer import normalize
from querysense.analyzers.registry import RuleSet
from querysense.analyzers.rewriter import QueryRewriter
from querysense.analyzers.rules import DEFAULT_RULES, pattern_rule

__all__ = [
    "BASE_SCORE",
    "Classification",
    "DEFAULT_RULES",
    "IndexAdvisor",
    "QueryRewriter",
    "RuleEngine",
    "RuleEvaluation",
    "RuleSet",
    "StructuralFeatures",
    "categorize",
    "classify",
    "normalize",
    "pattern_rule",
]
