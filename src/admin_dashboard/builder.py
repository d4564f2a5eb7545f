"""Build the totals and chart model the admin view displays."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from admin_dashboard.errors import MalformedPayload
from admin_dashboard.models import AggregateTotals, ChartModel, ViewState
from admin_dashboard.sanitize import coerce_count, reconcile, sanitize_labels, validate_counts

# Key as spelled by the backend.
DETAILS_KEY = "dashboarDetails"


def build_totals(chart: ChartModel, raw_users_count: Any) -> AggregateTotals:
    return AggregateTotals(
        users=coerce_count(raw_users_count) or 0,
        contests=len(chart.categories),
        submissions=sum(chart.series),
    )


def extract_dashboard_details(body: Any) -> Mapping[str, Any]:
    """Return the ``dashboarDetails`` mapping from a decoded response body."""
    if not isinstance(body, Mapping):
        raise MalformedPayload(f"Expected a JSON object, got {type(body).__name__}")
    details = body.get(DETAILS_KEY)
    if not isinstance(details, Mapping):
        raise MalformedPayload(f"Response is missing '{DETAILS_KEY}'")
    return details


def _sequence_field(container: Mapping[str, Any], key: str) -> Sequence[Any]:
    value = container.get(key)
    if isinstance(value, (str, bytes)) or not isinstance(value, Sequence):
        raise MalformedPayload(f"'{key}' should be a list, got {type(value).__name__}")
    return value


def build_view_state(details: Mapping[str, Any]) -> ViewState:
    """Sanitize one ``dashboarDetails`` payload into a complete view state.

    Raises DataShapeMismatch when the contest and count lists differ in length,
    and MalformedPayload when either list is missing.
    """
    submissions = details.get("contestSubmissions")
    if not isinstance(submissions, Mapping):
        raise MalformedPayload("Payload is missing 'contestSubmissions'")

    labels = sanitize_labels(_sequence_field(submissions, "contests"))
    counts = validate_counts(_sequence_field(submissions, "submissionsCount"))
    chart = reconcile(labels, counts)
    return ViewState(totals=build_totals(chart, details.get("usersCount")), chart=chart)
