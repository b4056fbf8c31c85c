"""Shared utilities: observability instances and service error types."""
