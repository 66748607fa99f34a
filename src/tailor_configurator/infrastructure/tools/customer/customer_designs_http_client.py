from __future__ import annotations

from typing import Any

import structlog
from pydantic import ValidationError

from tailor_configurator.core.application.persistence.contracts.saved_design_dto import (
    SavedDesignDTO,
)
from tailor_configurator.core.application.ports import RemoteDesignStorePort
from tailor_configurator.core.application.ports.common.exceptions import ProviderError
from tailor_configurator.core.domain.design import DesignOrigin, SavedDesign
from tailor_configurator.infrastructure.tools.common.storefront_http_client import (
    StorefrontHttpClient,
)

logger = structlog.get_logger()


class CustomerDesignsHttpClient(StorefrontHttpClient, RemoteDesignStorePort):
    """Saved designs of the signed-in customer account."""

    PROVIDER = "customer-designs"

    async def list(self, product_id: str | None, session_token: str) -> list[SavedDesign]:
        data = await self._request("GET", "/api/customers/me", session_token=session_token)
        records = data.get("savedDesigns", []) if isinstance(data, dict) else []
        designs = self._to_designs(records)
        if product_id is None:
            return designs
        return [d for d in designs if d.product_id == product_id]

    async def create(self, design: SavedDesign, session_token: str) -> SavedDesign:
        payload = SavedDesignDTO.from_domain(design).to_wire(include_id=False)
        data = await self._request(
            "POST", "/api/customers/designs", session_token=session_token, json_data=payload
        )
        # The service answers with the whole list; the new design is appended last
        if not isinstance(data, list) or not data:
            raise ProviderError(self.PROVIDER, "Save response did not include the new design")
        try:
            return SavedDesignDTO.model_validate(data[-1]).to_domain(DesignOrigin.REMOTE)
        except ValueError as e:
            raise ProviderError(
                self.PROVIDER, f"Save response carried a malformed design: {e}"
            ) from e

    async def delete(self, design_id: str, session_token: str) -> None:
        await self._request(
            "DELETE", f"/api/customers/designs/{design_id}", session_token=session_token
        )

    @staticmethod
    def _to_designs(records: list[Any]) -> list[SavedDesign]:
        designs = []
        for record in records:
            try:
                designs.append(SavedDesignDTO.model_validate(record).to_domain(DesignOrigin.REMOTE))
            except (ValidationError, ValueError) as e:
                logger.warning(
                    "Skipping malformed account design",
                    error_type=type(e).__name__,
                    error_details=str(e),
                )
        return designs
