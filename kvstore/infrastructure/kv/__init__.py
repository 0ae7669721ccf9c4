"""Adapters for the key-value bounded context."""
