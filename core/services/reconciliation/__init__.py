from .aggregation import aggregate
from .matching import (
    DEFAULT_PREDICATE,
    ExactMatchPredicate,
    FuzzyMatchPredicate,
    MatchPredicate,
    ambiguous_claims,
    match,
    match_all,
)
from .models import DateRange, MatchedAggregate, ProgressResult, TimelineSpan, ValueBreakdown
from .normalize import code_matches, normalize_text, resolve_zone
from .parsing import parse_bool, parse_date, parse_number, parse_optional_number
from .progress import classify, percent_of, status_for_progress
from .scope import activities_for_project, activity_in_project, records_for_project
from .timeline import build_timeline_span, resolve_planned_end, timeline_date_range
from .valuation import calculate_rate, calculate_value

__all__ = [
    "normalize_text",
    "resolve_zone",
    "code_matches",
    "parse_number",
    "parse_optional_number",
    "parse_date",
    "parse_bool",
    "MatchPredicate",
    "FuzzyMatchPredicate",
    "ExactMatchPredicate",
    "DEFAULT_PREDICATE",
    "match",
    "match_all",
    "ambiguous_claims",
    "aggregate",
    "classify",
    "percent_of",
    "status_for_progress",
    "calculate_rate",
    "calculate_value",
    "build_timeline_span",
    "resolve_planned_end",
    "timeline_date_range",
    "activity_in_project",
    "activities_for_project",
    "records_for_project",
    "MatchedAggregate",
    "ProgressResult",
    "ValueBreakdown",
    "TimelineSpan",
    "DateRange",
]
