from __future__ import annotations

import httpx


def default_timeout(seconds: float | None) -> httpx.Timeout:
    return httpx.Timeout(seconds)


def default_limits() -> httpx.Limits:
    return httpx.Limits(max_connections=10, max_keepalive_connections=5)


class HttpClientFactory:
    """Creates the shared httpx client used against the pod server.

    Keep one client per run; do not create per-request.
    """

    @staticmethod
    def client(
        base_url: str | None = None,
        headers: dict | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=base_url or "",
            headers=headers,
            timeout=default_timeout(timeout),
            limits=default_limits(),
            follow_redirects=True,
            transport=transport,
        )
