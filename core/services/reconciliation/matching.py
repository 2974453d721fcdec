from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional, Protocol, Sequence

from core.domain.activity import Activity
from core.domain.identifiers import normalize_code
from core.domain.measurement import MeasurementRecord
from core.services.reconciliation.normalize import code_matches, normalize_text, resolve_zone

logger = logging.getLogger(__name__)


class MatchPredicate(Protocol):
    """Decides whether one measurement record reports against one activity."""

    def matches(self, activity: Activity, record: MeasurementRecord) -> bool:
        ...


def _record_zone(activity: Activity, record: MeasurementRecord) -> str:
    return resolve_zone(
        record.zone,
        record.project_code or activity.project_code,
        record.code or activity.full_code,
    )


def _activity_zone(activity: Activity) -> str:
    return resolve_zone(activity.zone, activity.project_code, activity.full_code)


class FuzzyMatchPredicate:
    """
    Default reconciliation rule. A record belongs to an activity when:

    - project: its code equals or starts with the activity's project code or
      full code, or its short code equals the activity's project code;
    - name: one normalized name contains the other (blank names never match);
    - zone: both zones resolved and agreeing (equal or containing), or either
      side left unspecified.

    A record may satisfy several activities.
    """

    def matches(self, activity: Activity, record: MeasurementRecord) -> bool:
        return (
            self.project_matches(activity, record)
            and self.name_matches(activity, record)
            and self.zone_matches(activity, record)
        )

    @staticmethod
    def project_matches(activity: Activity, record: MeasurementRecord) -> bool:
        if code_matches(record.code, activity.match_codes):
            return True
        short_code = normalize_code(record.project_code)
        return bool(short_code) and short_code == normalize_code(activity.project_code)

    @staticmethod
    def name_matches(activity: Activity, record: MeasurementRecord) -> bool:
        activity_name = normalize_text(activity.display_name)
        record_name = normalize_text(record.activity_name)
        if not activity_name or not record_name:
            return False
        return activity_name in record_name or record_name in activity_name

    @staticmethod
    def zone_matches(activity: Activity, record: MeasurementRecord) -> bool:
        activity_zone = _activity_zone(activity)
        record_zone = _record_zone(activity, record)
        if not activity_zone or not record_zone:
            return True
        return (
            activity_zone == record_zone
            or activity_zone in record_zone
            or record_zone in activity_zone
        )


class ExactMatchPredicate:
    """Strict alternative: same project code, same normalized name, same resolved zone."""

    def matches(self, activity: Activity, record: MeasurementRecord) -> bool:
        if normalize_code(record.code) not in activity.match_codes:
            return False
        activity_name = normalize_text(activity.display_name)
        if not activity_name or activity_name != normalize_text(record.activity_name):
            return False
        return _activity_zone(activity) == _record_zone(activity, record)


DEFAULT_PREDICATE: MatchPredicate = FuzzyMatchPredicate()


def match(
    activity: Activity,
    records: Iterable[MeasurementRecord],
    predicate: Optional[MatchPredicate] = None,
) -> List[MeasurementRecord]:
    """
    Records from the batched set that report against ``activity``.

    ``records`` is the whole screen's measurement set, loaded once by the
    caller; it is scanned, never filtered in place.
    """
    rule = predicate or DEFAULT_PREDICATE
    matched = [record for record in records if rule.matches(activity, record)]
    logger.debug(
        "Matched %d record(s) to activity %s (%s)",
        len(matched),
        activity.id,
        activity.display_name,
    )
    return matched


def match_all(
    activities: Sequence[Activity],
    records: Sequence[MeasurementRecord],
    predicate: Optional[MatchPredicate] = None,
) -> Dict[str, List[MeasurementRecord]]:
    """Matched records per activity id, every activity scanning the same shared set."""
    return {activity.id: match(activity, records, predicate) for activity in activities}


def ambiguous_claims(
    activities: Sequence[Activity],
    records: Sequence[MeasurementRecord],
    predicate: Optional[MatchPredicate] = None,
) -> Dict[str, List[str]]:
    """
    Record id -> ids of every activity that claims it, for records claimed more
    than once. Diagnostic only: matching results are not changed by it.
    """
    rule = predicate or DEFAULT_PREDICATE
    claims: Dict[str, List[str]] = {}
    for record in records:
        owners = [activity.id for activity in activities if rule.matches(activity, record)]
        if len(owners) > 1:
            claims[record.id] = owners
    return claims


__all__ = [
    "MatchPredicate",
    "FuzzyMatchPredicate",
    "ExactMatchPredicate",
    "DEFAULT_PREDICATE",
    "match",
    "match_all",
    "ambiguous_claims",
]
