from typing import Any

import httpx

from tailor_configurator.core.application.ports import CatalogPort
from tailor_configurator.core.application.ports.common.exceptions import ProviderError
from tailor_configurator.infrastructure.common.retry.retry_policy import RetryPolicy
from tailor_configurator.infrastructure.tools.common.storefront_http_client import (
    StorefrontHttpClient,
)


class CatalogHttpClient(StorefrontHttpClient, CatalogPort):
    PROVIDER = "catalog"

    def __init__(
        self,
        base_url: str,
        timeout_seconds: float = 10.0,
        retry_policy: RetryPolicy | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        super().__init__(base_url, timeout_seconds, transport)
        self._retry_policy = retry_policy or RetryPolicy()

    async def get(self, product_id: str) -> dict[str, Any]:
        data = await self._retry_policy.run(
            lambda: self._request("GET", f"/api/products/{product_id}")
        )
        if not isinstance(data, dict):
            raise ProviderError(self.PROVIDER, f"Product '{product_id}' payload is not an object")
        return data
