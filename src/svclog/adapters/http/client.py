"""HTTP adapter – HttpxWebhookTransport."""
from __future__ import annotations

from typing import Any, Protocol

import httpx

from svclog.kernel.errors import ConnectionError as AppConnectionError
from svclog.kernel.errors import ExternalServiceError, InfrastructureTimeoutError


class WebhookTransport(Protocol):
    """Port: deliver one JSON body with a single POST.

    Returns only when the endpoint answered ``200``; anything else raises an
    :class:`~svclog.kernel.errors.InfrastructureError`.
    """

    def post_json(self, url: str, body: bytes) -> None: ...


class HttpxWebhookTransport:
    """Thin synchronous httpx wrapper with structured error mapping.

    One pooled :class:`httpx.Client` is reused across calls; httpx clients
    are safe to share between threads.  Timeouts are the httpx defaults
    unless *client_kwargs* says otherwise.  Response bodies are never read.
    """

    def __init__(self, client: httpx.Client | None = None, **client_kwargs: Any) -> None:
        self._client = client if client is not None else httpx.Client(**client_kwargs)

    def __enter__(self) -> "HttpxWebhookTransport":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def post_json(self, url: str, body: bytes) -> None:
        try:
            with self._client.stream(
                "POST",
                url,
                content=body,
                headers={"Content-Type": "application/json"},
            ) as response:
                status_code = response.status_code
                reason = response.reason_phrase
        except httpx.TimeoutException as exc:
            raise InfrastructureTimeoutError(f"HTTP request timed out: POST {url}", cause=exc) from exc
        except httpx.ConnectError as exc:
            raise AppConnectionError(url, f"Could not connect to '{url}': {exc}", cause=exc) from exc
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise ExternalServiceError(service=url, message=f"POST {url} failed: {exc}", cause=exc) from exc
        except UnicodeError as exc:
            # Host names the idna codec refuses (empty or oversized labels).
            raise ExternalServiceError(service=url, message=f"POST {url} failed: {exc}", cause=exc) from exc

        if status_code != 200:
            raise ExternalServiceError(
                service=url,
                message=f"{status_code} {reason}",
                status_code=status_code,
            )

    def close(self) -> None:
        self._client.close()


__all__ = ["HttpxWebhookTransport", "WebhookTransport"]
