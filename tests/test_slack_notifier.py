"""Tests for Slack notifier adapter."""

from unittest.mock import Mock, patch

import httpx
import pytest

from pickup_monitor.adapters.notifications import ConsoleNotifier, SlackNotifier


def test_send_success() -> None:
    """Test successful Slack notification."""
    notifier = SlackNotifier("https://hooks.slack.com/services/test")
    
    with patch("httpx.Client") as mock_client:
        mock_response = Mock()
        mock_response.raise_for_status = Mock()
        
        mock_post = Mock(return_value=mock_response)
        mock_client.return_value.__enter__.return_value.post = mock_post
        
        notifier.send("快递取件提醒", "凭取件码 1234 至 南门驿站 取件", {})
        
        # Verify API call
        assert mock_post.called
        call_args = mock_post.call_args
        assert call_args.args[0] == "https://hooks.slack.com/services/test"
        
        payload = call_args.kwargs["json"]
        assert payload["text"] == "📦 *快递取件提醒*\n凭取件码 1234 至 南门驿站 取件"
        assert payload["mrkdwn"] is True
        mock_response.raise_for_status.assert_called_once()


def test_send_merges_options() -> None:
    """Test extra options are merged into the payload."""
    notifier = SlackNotifier("https://hooks.slack.com/services/test")
    
    with patch("httpx.Client") as mock_client:
        mock_post = Mock(return_value=Mock())
        mock_client.return_value.__enter__.return_value.post = mock_post
        
        notifier.send("快递取件提醒", "body", {"username": "pickup-bot"})
        
        assert mock_post.call_args.kwargs["json"]["username"] == "pickup-bot"


def test_send_api_error_propagates() -> None:
    """Test Slack API errors reach the caller."""
    notifier = SlackNotifier("https://hooks.slack.com/services/test")
    
    with patch("httpx.Client") as mock_client:
        mock_response = Mock()
        mock_response.raise_for_status = Mock(side_effect=httpx.HTTPError("API Error"))
        
        mock_post = Mock(return_value=mock_response)
        mock_client.return_value.__enter__.return_value.post = mock_post
        
        with pytest.raises(httpx.HTTPError, match="API Error"):
            notifier.send("快递取件提醒", "body", {})


def test_requires_webhook() -> None:
    """Test notifier cannot be built without a webhook URL."""
    with pytest.raises(ValueError, match="Webhook URL cannot be empty"):
        SlackNotifier("")


def test_escape_mrkdwn() -> None:
    """Test Slack control characters are escaped."""
    notifier = SlackNotifier("https://hooks.slack.com/services/test")
    
    assert notifier._escape_mrkdwn("A<B>&C") == "A&lt;B&gt;&amp;C"


def test_console_notifier(capsys) -> None:
    """Test console notifier prints title and body."""
    ConsoleNotifier().send("快递取件提醒", "凭取件码 1234 至 南门驿站 取件", {})
    
    out = capsys.readouterr().out
    assert "快递取件提醒" in out
    assert "凭取件码 1234 至 南门驿站 取件" in out
