"""Message source adapters."""

from pickup_monitor.adapters.messages.yaml_inbox_source import YAMLInboxSource

__all__ = ["YAMLInboxSource"]
