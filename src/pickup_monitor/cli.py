"""CLI entry point for pickup monitor."""

from pathlib import Path
from typing import Optional

import typer

from pickup_monitor.adapters.messages import YAMLInboxSource
from pickup_monitor.adapters.notifications import ConsoleNotifier, SlackNotifier
from pickup_monitor.adapters.reminders import LocalReminderList, MacOSReminders
from pickup_monitor.adapters.storage import YAMLKeyValueStore
from pickup_monitor.config import Settings, get_settings
from pickup_monitor.core import NotificationService, ReminderService
from pickup_monitor.use_cases import PickupCodeService


def build_reminder_service(settings: Settings) -> ReminderService:
    if settings.reminder_backend == "macos":
        return MacOSReminders()
    return LocalReminderList(settings.reminders_file)


def build_notifier(settings: Settings, no_slack: bool) -> NotificationService:
    if settings.slack_webhook_url and not no_slack:
        return SlackNotifier(settings.slack_webhook_url)
    return ConsoleNotifier()


def main(
    inbox: Optional[Path] = typer.Option(None, "--inbox", help="SMS inbox YAML file"),
    config: Path = typer.Option(Path("config.yaml"), "--config", help="Config file"),
    no_slack: bool = typer.Option(False, "--no-slack", help="Disable Slack notifications"),
) -> None:
    """Extract courier pickup codes from recent SMS and remind about new ones."""
    settings = get_settings(config)

    print("\n" + "=" * 70)
    print("📦 PICKUP MONITOR - 快递取件码")
    print("=" * 70)

    if no_slack:
        print("  ⚠️  SLACK_WEBHOOK_URL - 已通过 --no-slack 禁用")
    elif settings.slack_webhook_url:
        print("  ✓ SLACK_WEBHOOK_URL - 通过 Slack 发送通知")
    else:
        print("  ⚠️  SLACK_WEBHOOK_URL - 未配置 (通知输出到控制台)")
    print(f"  • 提醒后端: {settings.reminder_backend}")

    service = PickupCodeService(
        message_source=YAMLInboxSource(inbox or settings.inbox_file),
        reminder_service=build_reminder_service(settings),
        notification_service=build_notifier(settings, no_slack),
        store=YAMLKeyValueStore(settings.state_file),
    )

    summary = service.run()

    print("=" * 70)
    print(
        f"📊 短信: {summary.messages_read} | 新增: {summary.processed} | "
        f"已缓存: {summary.skipped_cached} | 已有提醒: {summary.skipped_reminder} | "
        f"未匹配: {summary.unmatched}"
    )


def app() -> None:
    """CLI entry point."""
    typer.run(main)


if __name__ == "__main__":
    app()
