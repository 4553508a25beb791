"""Adapters – thin wrappers around third-party transports."""
