from .reconciliation import (
    ExactMatchPredicate,
    FuzzyMatchPredicate,
    MatchPredicate,
    aggregate,
    build_timeline_span,
    calculate_value,
    classify,
    match,
)
from .reporting import ReportingService

__all__ = [
    "MatchPredicate",
    "FuzzyMatchPredicate",
    "ExactMatchPredicate",
    "match",
    "aggregate",
    "classify",
    "calculate_value",
    "build_timeline_span",
    "ReportingService",
]
