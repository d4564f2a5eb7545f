from __future__ import annotations

import logging
from typing import Any, Optional

import requests

from admin_dashboard.errors import NetworkFailure

logger = logging.getLogger(__name__)

DEFAULT_DASHBOARD_PATH = "/admin/dashboard"


class AdminClient:
    """
    Thin HTTP client for the admin aggregation endpoint. Owns a requests.Session
    unless one is provided.
    """

    def __init__(
        self,
        base_url: str,
        *,
        dashboard_path: str = DEFAULT_DASHBOARD_PATH,
        timeout_sec: int = 15,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.dashboard_path = "/" + dashboard_path.lstrip("/")
        self.timeout_sec = timeout_sec
        self.session = session or requests.Session()

    @property
    def dashboard_url(self) -> str:
        return f"{self.base_url}{self.dashboard_path}"

    def get_admin_dashboard(self, token: Optional[str], timeout: Optional[int] = None) -> tuple[int, Any]:
        """
        Fetch the aggregation payload. Returns (status, body); body is the decoded
        JSON on 200 and None for any other status.
        """
        to = timeout or self.timeout_sec
        headers = {}
        if token:
            headers["Authorization"] = token
        else:
            logger.warning("No credential token supplied for %s", self.dashboard_url)

        try:
            r = self.session.get(self.dashboard_url, headers=headers, timeout=to)
        except requests.RequestException as err:
            raise NetworkFailure(f"Could not reach admin dashboard endpoint: {err}") from err

        if r.status_code != 200:
            return r.status_code, None

        try:
            return r.status_code, r.json()
        except ValueError as err:
            raise NetworkFailure("Admin dashboard response was not valid JSON", status=r.status_code) from err
