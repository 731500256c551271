"""Persistent state adapters."""

from pickup_monitor.adapters.storage.yaml_store import YAMLKeyValueStore

__all__ = ["YAMLKeyValueStore"]
