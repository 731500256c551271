"""Slack notification adapter."""

from typing import Optional

import httpx

from pickup_monitor.core.interfaces import NotificationService


class SlackNotifier(NotificationService):
    """Send notifications to Slack via webhook."""
    
    def __init__(self, webhook_url: str, timeout: float = 30.0) -> None:
        """Initialize Slack notifier.
        
        Args:
            webhook_url: Slack incoming webhook URL.
            timeout: Request timeout in seconds.
        """
        if not webhook_url:
            raise ValueError("Webhook URL cannot be empty")
        self.webhook_url = webhook_url
        self.timeout = timeout
    
    def _escape_mrkdwn(self, text: str) -> str:
        """Escape characters Slack treats as control sequences."""
        return text.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")
    
    def send(self, title: str, body: str, options: Optional[dict] = None) -> None:
        """Post notification to Slack.
        
        HTTP errors are raised to the caller.
        
        Args:
            title: Notification title, rendered bold
            body: Notification text
            options: Extra payload fields merged into the request
        """
        message = f"📦 *{self._escape_mrkdwn(title)}*\n{self._escape_mrkdwn(body)}"
        
        payload = {
            "text": message,
            "mrkdwn": True,
        }
        if options:
            payload.update(options)
        
        with httpx.Client(timeout=self.timeout) as client:
            response = client.post(self.webhook_url, json=payload)
            response.raise_for_status()
