"""Concrete collaborators for the core pipeline."""
