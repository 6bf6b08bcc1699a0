"""Adapters talking to external services."""
