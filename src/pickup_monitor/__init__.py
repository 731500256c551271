"""Courier pickup-code extraction from SMS."""

__version__ = "0.1.0"
