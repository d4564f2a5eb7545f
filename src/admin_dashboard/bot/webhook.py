import logging

import requests

from .notifier import Notifier

logger = logging.getLogger(__name__)


class DiscordWebhookNotifier(Notifier):
    def __init__(self, webhook: str, timeout_sec: int = 10) -> None:
        self.webhook = webhook
        self.timeout_sec = timeout_sec

    def notify(self, message: str, severity: str = "error") -> None:
        payload = {"content": f"[{severity.upper()}] {message}"}
        try:
            requests.post(self.webhook, json=payload, timeout=self.timeout_sec)
        except requests.RequestException as err:
            logger.warning("Discord webhook delivery failed: %s", err)
