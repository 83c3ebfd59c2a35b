from __future__ import annotations

import logging

import httpx

from .errors import RegistrationError
from .http import HttpClientFactory
from .settings import PopulateSettings

logger = logging.getLogger(__name__)


class PodRegistrar:
    """Registers accounts (and their pod and WebID) on a Community Solid Server.

    Usage::

        async with PodRegistrar(settings) as registrar:
            await registrar.register("user0")
    """

    def __init__(self, settings: PopulateSettings, transport: httpx.AsyncBaseTransport | None = None):
        self.settings = settings
        self._client = HttpClientFactory.client(
            headers={"content-type": "application/json", "Accept": "application/json"},
            timeout=settings.http_timeout,
            transport=transport,
        )

    async def __aenter__(self) -> PodRegistrar:
        return self

    async def __aexit__(self, *exc) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    def registration_body(self, account: str) -> dict:
        return {
            "podName": account,
            "email": f"{account}@{self.settings.email_domain}",
            "password": self.settings.password,
            "confirmPassword": self.settings.password,
            "register": True,
            "createPod": True,
            "createWebId": True,
        }

    async def register_or_raise(self, account: str) -> None:
        try:
            r = await self._client.post(
                self.settings.register_url(), json=self.registration_body(account)
            )
        except httpx.HTTPError as e:
            raise RegistrationError(f"Creating pod for {account} failed: {e}") from e

        try:
            payload = r.json()
        except ValueError as e:
            raise RegistrationError(
                f"Creating pod for {account} failed: HTTP {r.status_code}, non-JSON reply"
            ) from e

        name = payload.get("name") if isinstance(payload, dict) else None
        if name and "Error" in name:
            raise RegistrationError(
                f"{name} - Creating pod for {account} failed: {payload.get('message')}"
            )

    async def register(self, account: str) -> bool:
        """Best effort: failures are logged and reported as False."""
        try:
            await self.register_or_raise(account)
        except RegistrationError as e:
            logger.error(str(e))
            return False
        return True
