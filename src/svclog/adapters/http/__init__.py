"""HTTP adapter – webhook transport over httpx."""
from svclog.adapters.http.client import HttpxWebhookTransport, WebhookTransport

__all__ = ["HttpxWebhookTransport", "WebhookTransport"]
