"""Containment boundary around the chart subtree of the admin view."""

from __future__ import annotations

import enum
import logging
import traceback
from typing import Any, Callable, Optional

from admin_dashboard.errors import RenderFailure
from admin_dashboard.models import ChartModel

logger = logging.getLogger(__name__)

LOADING_PLACEHOLDER = "Preparing visualization..."

ChartRenderer = Callable[[ChartModel], Any]


class GuardState(enum.Enum):
    NORMAL = "normal"
    DEGRADED = "degraded"


class RenderGuard:
    """
    Renders the chart while NORMAL. The first renderer exception moves the guard to
    DEGRADED, after which it renders nothing until reset() is called.
    """

    def __init__(self) -> None:
        self.state = GuardState.NORMAL
        self.error_info: Optional[str] = None
        self.failure: Optional[RenderFailure] = None

    @property
    def degraded(self) -> bool:
        return self.state is GuardState.DEGRADED

    def render(self, chart: ChartModel, renderer: ChartRenderer) -> Any:
        if self.degraded:
            return None
        if chart.is_empty:
            return LOADING_PLACEHOLDER
        try:
            return renderer(chart)
        except Exception as err:
            self._degrade(err)
            return None

    def _degrade(self, err: Exception) -> None:
        self.state = GuardState.DEGRADED
        self.failure = RenderFailure(err)
        self.error_info = "".join(traceback.format_exception(type(err), err, err.__traceback__))
        logger.error("Chart Error: %s", err, exc_info=err)

    def reset(self) -> None:
        """Return to NORMAL so the next render() tries the renderer again."""
        self.state = GuardState.NORMAL
        self.error_info = None
        self.failure = None
