"""Saved designs across the device-local cache and the signed-in account.

Reads merge both stores by design id, with the account copy winning. Writes go
to the account when a session token is present and fall back to the local
cache when the account write fails. Failures come back as outcomes; nothing
here raises across the boundary for a persistence or restore problem.
"""

from collections.abc import Callable, Iterable
from datetime import UTC, datetime
from uuid import uuid4

import structlog

from tailor_configurator.core.application.exceptions import (
    InvalidSelection,
    PersistenceWriteError,
)
from tailor_configurator.core.application.persistence.local_design_store import LocalDesignStore
from tailor_configurator.core.application.persistence.persistence_outcomes import (
    DeleteOutcome,
    SaveOutcome,
)
from tailor_configurator.core.application.ports import RemoteDesignStorePort
from tailor_configurator.core.application.ports.common.exceptions import ProviderError
from tailor_configurator.core.application.store import ConfigurationStore
from tailor_configurator.core.application.workflows.restore import (
    RestoreDesignWorkflow,
    RestoreOutcome,
    RestoreRequest,
)
from tailor_configurator.core.domain.catalog import Product
from tailor_configurator.core.domain.design import DesignOrigin, SavedDesign
from tailor_configurator.infrastructure.observability.metrics_service import DESIGN_SAVES_TOTAL
from tailor_configurator.infrastructure.observability.tracing_setup import trace_operation

logger = structlog.get_logger()


def merge_designs(local: Iterable[SavedDesign], remote: Iterable[SavedDesign]) -> list[SavedDesign]:
    """Union by id, remote copy wins, newest first. Different ids are never merged."""
    merged = {design.id: design for design in local}
    merged.update({design.id: design.with_origin(DesignOrigin.REMOTE) for design in remote})
    return sorted(merged.values(), key=lambda d: d.saved_at, reverse=True)


def local_design_id(product_id: str, now: datetime) -> str:
    return f"{product_id}-{int(now.timestamp() * 1000)}-{uuid4().hex[:6]}"


class DesignPersistenceCoordinator:
    def __init__(
        self,
        local: LocalDesignStore,
        remote: RemoteDesignStorePort | None,
        restore_workflow: RestoreDesignWorkflow,
        *,
        purge_local_on_remote_save: bool = False,
        clock: Callable[[], datetime] = lambda: datetime.now(UTC),
    ) -> None:
        self._local = local
        self._remote = remote
        self._restore_workflow = restore_workflow
        self._purge_local_on_remote_save = purge_local_on_remote_save
        self._clock = clock

    # ── Reads ──

    @trace_operation("coordinator.list_saved_designs")
    async def list_saved_designs(
        self, product_id: str, session_token: str | None = None
    ) -> list[SavedDesign]:
        local = self._local.list(product_id)
        remote = await self._remote_list(product_id, session_token)
        remote = [d for d in remote if d.product_id == product_id]
        return merge_designs(local, remote)

    async def count_saved_designs(self, session_token: str | None = None) -> int:
        """Badge count across every product, de-duplicated the same way as the listing."""
        local = self._local.list()
        remote = await self._remote_list(None, session_token)
        return len(merge_designs(local, remote))

    # ── Writes ──

    @trace_operation("coordinator.save_design")
    async def save_design(
        self, store: ConfigurationStore, session_token: str | None = None
    ) -> SaveOutcome:
        product = store.product
        if product is None:
            raise InvalidSelection("Cannot save a design before a product is loaded")
        design = self._build_design(store, product)

        if session_token and self._remote is not None:
            try:
                stored = await self._remote.create(design, session_token)
            except ProviderError as e:
                error = PersistenceWriteError(
                    f"Account save failed: {e}",
                    context={"product_id": product.id, "status_code": e.status_code},
                )
                DESIGN_SAVES_TOTAL.labels(store="remote", outcome="error").inc()
                logger.warning(
                    "Account save failed, keeping design locally",
                    product_id=product.id,
                    error_type=type(e).__name__,
                    error_details=str(e),
                    error_retryable=e.retryable,
                )
                return self._save_local(design, error)

            DESIGN_SAVES_TOTAL.labels(store="remote", outcome="success").inc()
            self._purge_local_drafts(product.id)
            logger.info("Design saved to account", design_id=stored.id, product_id=product.id)
            return SaveOutcome(stored.with_origin(DesignOrigin.REMOTE), DesignOrigin.REMOTE)

        return self._save_local(design)

    @trace_operation("coordinator.delete_design")
    async def delete_design(
        self, design: SavedDesign, session_token: str | None = None
    ) -> DeleteOutcome:
        deleted_remote, error = False, None
        if design.origin is DesignOrigin.REMOTE:
            deleted_remote, error = await self._delete_remote(design, session_token)
        deleted_local = self._local.delete(design.id)
        logger.info(
            "Design deleted",
            design_id=design.id,
            deleted_remote=deleted_remote,
            deleted_local=deleted_local,
        )
        return DeleteOutcome(design.id, deleted_remote, deleted_local, error)

    # ── Restore ──

    @trace_operation("coordinator.restore_design")
    async def restore_design(
        self,
        design_id: str,
        product_id: str,
        store: ConfigurationStore,
        session_token: str | None = None,
    ) -> RestoreOutcome:
        request = RestoreRequest(design_id, product_id, store, session_token)
        return await self._restore_workflow.execute(request)

    # ── Private Helpers ──

    async def _remote_list(
        self, product_id: str | None, session_token: str | None
    ) -> list[SavedDesign]:
        if not session_token or self._remote is None:
            return []
        try:
            return await self._remote.list(product_id, session_token)
        except ProviderError as e:
            logger.warning(
                "Account designs unavailable, listing local designs only",
                error_type=type(e).__name__,
                error_details=str(e),
                error_retryable=e.retryable,
            )
            return []

    def _build_design(self, store: ConfigurationStore, product: Product) -> SavedDesign:
        now = self._clock()
        configuration = store.configuration
        fabric_image = configuration.fabric.front_image if configuration.fabric else None
        return SavedDesign(
            id=local_design_id(product.id, now),
            product_id=product.id,
            product_name=product.name,
            product_category=product.category,
            base_image=fabric_image or product.base_images.front,
            snapshot=store.snapshot(),
            computed_price=store.price(),
            saved_at=now,
            origin=DesignOrigin.LOCAL,
        )

    def _save_local(
        self, design: SavedDesign, remote_error: PersistenceWriteError | None = None
    ) -> SaveOutcome:
        try:
            stored = self._local.save(design)
        except OSError as e:
            DESIGN_SAVES_TOTAL.labels(store="local", outcome="error").inc()
            logger.error(
                "Local design save failed",
                design_id=design.id,
                error_type=type(e).__name__,
                error_details=str(e),
            )
            error = PersistenceWriteError(
                f"Local save failed: {e}", context={"design_id": design.id}
            )
            return SaveOutcome(design, DesignOrigin.LOCAL, error, persisted=False)

        DESIGN_SAVES_TOTAL.labels(store="local", outcome="success").inc()
        logger.info("Design saved locally", design_id=stored.id, product_id=stored.product_id)
        return SaveOutcome(stored, DesignOrigin.LOCAL, remote_error)

    def _purge_local_drafts(self, product_id: str) -> None:
        if not self._purge_local_on_remote_save:
            return
        removed = self._local.delete_for_product(product_id)
        if removed:
            logger.info(
                "Purged local drafts after account save", product_id=product_id, removed=removed
            )

    async def _delete_remote(
        self, design: SavedDesign, session_token: str | None
    ) -> tuple[bool, PersistenceWriteError | None]:
        if not session_token or self._remote is None:
            return False, PersistenceWriteError(
                "Deleting an account design requires a session",
                context={"design_id": design.id},
            )
        try:
            await self._remote.delete(design.id, session_token)
        except ProviderError as e:
            logger.warning(
                "Account delete failed",
                design_id=design.id,
                error_type=type(e).__name__,
                error_details=str(e),
                error_retryable=e.retryable,
            )
            return False, PersistenceWriteError(
                f"Account delete failed: {e}",
                context={"design_id": design.id, "status_code": e.status_code},
            )
        return True, None
