from admin_dashboard.bot.notifier import LoggingNotifier, Notifier
from admin_dashboard.bot.webhook import DiscordWebhookNotifier

__all__ = ["DiscordWebhookNotifier", "LoggingNotifier", "Notifier"]
