"""Fetch the admin aggregation payload once and publish the sanitized view state."""

from __future__ import annotations

import logging
from typing import Callable, Optional

from admin_dashboard.bot.notifier import Notifier
from admin_dashboard.builder import build_view_state, extract_dashboard_details
from admin_dashboard.client import AdminClient
from admin_dashboard.errors import NetworkFailure
from admin_dashboard.models import ViewState
from admin_dashboard.state import ViewStateContainer

logger = logging.getLogger(__name__)


def _always_active() -> bool:
    return True


class DashboardLoader:
    def __init__(self, client: AdminClient, container: ViewStateContainer, notifier: Notifier) -> None:
        self.client = client
        self.container = container
        self.notifier = notifier

    def fetch_view_state(self, token: Optional[str]) -> ViewState:
        """Request the payload and build a ViewState; raises on any failure."""
        status, body = self.client.get_admin_dashboard(token)
        if status != 200:
            raise NetworkFailure(f"Admin dashboard request failed with status {status}", status=status)
        return build_view_state(extract_dashboard_details(body))

    def _report(self, err: Exception) -> None:
        try:
            self.notifier.notify_error(err)
        except Exception:
            logger.exception("Notifier %s failed to report: %s", type(self.notifier).__name__, err)

    def load_dashboard(
        self,
        token: Optional[str],
        is_active: Callable[[], bool] = _always_active,
    ) -> bool:
        """
        Run one fetch-validate-publish cycle. Failures are logged and sent to the
        notifier instead of raised; the container is only written on success while
        is_active() still holds. Returns True when a new state was published.
        """
        try:
            new_state = self.fetch_view_state(token)
        except Exception as err:
            logger.exception("Dashboard Error: %s", err)
            self._report(err)
            return False

        if not is_active():
            logger.debug("view deactivated before the dashboard fetch completed; dropping result")
            return False

        self.container.replace(new_state)
        logger.info(
            "dashboard loaded: %d users, %d contests, %s submissions",
            new_state.totals.users,
            new_state.totals.contests,
            new_state.totals.submissions,
        )
        return True
