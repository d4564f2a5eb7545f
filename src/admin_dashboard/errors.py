"""Failures the dashboard pipeline can raise or contain."""

from __future__ import annotations


class DashboardError(Exception):
    """Base class for admin dashboard failures."""


class NetworkFailure(DashboardError):
    """The aggregation endpoint could not be reached or did not answer 200."""

    def __init__(self, message: str, status: int | None = None) -> None:
        super().__init__(message)
        self.status = status


class MalformedPayload(DashboardError):
    """The response envelope is missing keys or holds the wrong container types."""


class DataShapeMismatch(DashboardError):
    """Contest labels and submission counts differ in length after sanitization."""

    def __init__(self, labels_count: int, counts_count: int) -> None:
        super().__init__(
            f"Data length mismatch between contests ({labels_count}) and submissions ({counts_count})"
        )
        self.labels_count = labels_count
        self.counts_count = counts_count


class RenderFailure(DashboardError):
    """The chart renderer raised while presenting the chart model."""

    def __init__(self, cause: BaseException) -> None:
        super().__init__(f"Chart rendering failed: {cause}")
        self.cause = cause
