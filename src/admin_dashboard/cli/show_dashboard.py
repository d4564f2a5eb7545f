"""Load the admin dashboard once and print its summary."""

import argparse
import logging
from os import getenv
from pathlib import Path
from typing import Optional, Sequence

from dotenv import load_dotenv

from admin_dashboard.bot import DiscordWebhookNotifier, LoggingNotifier, Notifier
from admin_dashboard.client import AdminClient
from admin_dashboard.config import DashboardSettings, load_settings
from admin_dashboard.loader import DashboardLoader
from admin_dashboard.logging import configure_logging
from admin_dashboard.render_guard import LOADING_PLACEHOLDER
from admin_dashboard.state import ViewStateContainer
from admin_dashboard.view import AdminDashboardView

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Show the admin dashboard summary")
    parser.add_argument("-t", "--token", default=None, help="Credential token (defaults to $ADMIN_TOKEN)")
    parser.add_argument("--html", type=Path, default=None, help="Write the chart HTML fragment to this file")
    parser.add_argument("-q", "--quiet", action="store_true", help="Decrease verbosity")
    return parser.parse_args(argv)


def build_notifier(settings: DashboardSettings) -> Notifier:
    if settings.notifications_enabled and settings.discord_webhook_url:
        return DiscordWebhookNotifier(settings.discord_webhook_url)
    if settings.notifications_enabled:
        logger.warning("DISCORD_WEBHOOK_URL is not set. Notifications go to the log only.")
    return LoggingNotifier()


def build_view(settings: DashboardSettings) -> AdminDashboardView:
    client = AdminClient(
        settings.api_base_url,
        dashboard_path=settings.dashboard_path,
        timeout_sec=settings.timeout_sec,
    )
    loader = DashboardLoader(client, ViewStateContainer(), build_notifier(settings))
    return AdminDashboardView(loader)


def _init_runtime(quiet: bool = False) -> None:
    """Initialize runtime-only side effects for CLI execution."""
    load_dotenv()
    configure_logging(quiet=quiet)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    _init_runtime(quiet=args.quiet)

    view = build_view(load_settings())
    try:
        loaded = view.mount(args.token or getenv("ADMIN_TOKEN"))
        for card in view.metric_cards():
            print(f"{card.title}: {card.value}")

        chart = view.render_chart()
        if chart == LOADING_PLACEHOLDER:
            print(chart)
        elif chart is not None and args.html is not None:
            args.html.write_text(chart, encoding="utf-8")
            print(f"Wrote chart to {args.html}")
    finally:
        view.unmount()
    return 0 if loaded else 1


if __name__ == "__main__":
    raise SystemExit(main())
