"""Observability – leveled console logging with webhook notifications."""
