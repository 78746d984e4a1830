from .completeness import analyze_completeness
from .evaluator import evaluate_answer
from .keywords import analyze_keywords
from .relevance import analyze_relevance
from .structure import analyze_structure

__all__ = [
    "analyze_completeness", "analyze_relevance", "analyze_keywords",
    "analyze_structure", "evaluate_answer",
]
