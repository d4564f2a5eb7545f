"""The admin summary view: three metric cards and the guarded submissions chart."""

from __future__ import annotations

import logging
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass
from typing import Any, Callable, Optional

from admin_dashboard.chart import PlotlyChartRenderer
from admin_dashboard.loader import DashboardLoader
from admin_dashboard.models import Count, ViewState
from admin_dashboard.render_guard import ChartRenderer, RenderGuard

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MetricCard:
    title: str
    value: Count


class AdminDashboardView:
    """
    One mount issues exactly one fetch. Results that arrive after unmount() are not
    published.
    """

    def __init__(
        self,
        loader: DashboardLoader,
        *,
        renderer: Optional[ChartRenderer] = None,
        guard: Optional[RenderGuard] = None,
    ) -> None:
        self.loader = loader
        self.renderer = renderer or PlotlyChartRenderer()
        self.guard = guard or RenderGuard()
        self._active = False
        self._generation = 0
        self._executor: Optional[ThreadPoolExecutor] = None

    @property
    def is_active(self) -> bool:
        return self._active

    @property
    def state(self) -> ViewState:
        return self.loader.container.current()

    def _activate(self) -> Callable[[], bool]:
        """Start a new mount; the returned check is true only while this mount lasts."""
        if self._active:
            raise RuntimeError("AdminDashboardView is already mounted")
        self._active = True
        self._generation += 1
        generation = self._generation
        return lambda: self._active and self._generation == generation

    def mount(self, token: Optional[str]) -> bool:
        """Activate the view and load the dashboard inline."""
        is_current = self._activate()
        return self.loader.load_dashboard(token, is_active=is_current)

    def mount_in_background(self, token: Optional[str]) -> "Future[bool]":
        """Activate the view and load the dashboard on a worker thread."""
        is_current = self._activate()
        self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="admin-dashboard")
        return self._executor.submit(self.loader.load_dashboard, token, is_current)

    def unmount(self) -> None:
        self._active = False
        if self._executor is not None:
            self._executor.shutdown(wait=False)
            self._executor = None

    def metric_cards(self) -> list[MetricCard]:
        totals = self.state.totals
        return [
            MetricCard("Total Users", totals.users),
            MetricCard("Total Contests", totals.contests),
            MetricCard("Total Submissions", totals.submissions),
        ]

    def render_chart(self) -> Any:
        """Chart output, the loading placeholder, or None once the guard has degraded."""
        return self.guard.render(self.state.chart, self.renderer)
