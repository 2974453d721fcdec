from __future__ import annotations

from typing import Optional

from core.services.reconciliation import DEFAULT_PREDICATE, MatchPredicate
from core.services.reconciliation.timeline import DEFAULT_PADDING_DAYS

from .progress import ReportingProgressMixin
from .summary import ReportingSummaryMixin
from .timeline import ReportingTimelineMixin


class ReportingService(
    ReportingSummaryMixin,
    ReportingTimelineMixin,
    ReportingProgressMixin,
):
    """
    Reconciles BOQ activities with KPI measurements for the dashboard views.

    Stateless between calls: every method works on the snapshot it is given,
    and the same measurement list is shared by all activities of a screen.
    The matching rule is swappable without touching aggregation or reporting.
    """

    def __init__(
        self,
        predicate: Optional[MatchPredicate] = None,
        *,
        timeline_padding_days: int = DEFAULT_PADDING_DAYS,
    ):
        self._predicate: MatchPredicate = predicate or DEFAULT_PREDICATE
        self._timeline_padding_days: int = timeline_padding_days
