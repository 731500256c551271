"""Tests for the macOS Reminders adapter."""

from datetime import datetime, timezone
from unittest.mock import Mock, patch

import pytest

from pickup_monitor.adapters.reminders import MacOSReminders
from pickup_monitor.adapters.reminders.macos_reminders import CREATE_SCRIPT


def test_get_upcoming_parses_records() -> None:
    """Test osascript output is parsed into reminders."""
    stdout = (
        "取件码: 1234\x1f位置: 南门驿站\x1f2026-10-19T01:00:00Z\x1e"
        "买菜\x1f\x1f\x1e\n"
    )
    
    with patch("pickup_monitor.adapters.reminders.macos_reminders.subprocess.run") as mock_run:
        mock_run.return_value = Mock(returncode=0, stdout=stdout, stderr="")
        
        upcoming = MacOSReminders().get_upcoming(7)
        
        assert mock_run.call_args.args[0] == ["osascript", "-", "7"]
    
    assert [r.title for r in upcoming] == ["取件码: 1234", "买菜"]
    assert upcoming[0].notes == "位置: 南门驿站"
    assert upcoming[0].due_at == datetime(2026, 10, 19, 1, 0, tzinfo=timezone.utc)
    assert upcoming[1].due_at is None


def test_create_reminder_arguments() -> None:
    """Test reminder fields are passed as script arguments."""
    with patch("pickup_monitor.adapters.reminders.macos_reminders.subprocess.run") as mock_run:
        mock_run.return_value = Mock(returncode=0, stdout="created\n", stderr="")
        
        MacOSReminders().create_reminder("取件码: 1234", notes="位置: 南门驿站", priority=5, list_title="取件码")
        
        args = mock_run.call_args.args[0]
        assert args == ["osascript", "-", "取件码: 1234", "位置: 南门驿站", "5", "取件码"]
        assert mock_run.call_args.kwargs["input"] == CREATE_SCRIPT


def test_osascript_failure_raises() -> None:
    """Test non-zero exit is raised as RuntimeError."""
    with patch("pickup_monitor.adapters.reminders.macos_reminders.subprocess.run") as mock_run:
        mock_run.return_value = Mock(returncode=1, stdout="", stderr="Reminders got an error")
        
        with pytest.raises(RuntimeError, match="Reminders got an error"):
            MacOSReminders().get_upcoming(7)
