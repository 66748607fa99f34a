"""Replays a saved design into a ConfigurationStore.

Locate -> Hydrate -> Apply, any of the first two may fail. Nothing is written to
the store before Applying, and Applying runs without suspending, so a store
discarded while the attempt waits never receives a mutation.
"""

import time
from dataclasses import dataclass, field
from uuid import uuid4

import structlog
from structlog.contextvars import bound_contextvars

from tailor_configurator.core.application.exceptions import ConfigurationDiscarded
from tailor_configurator.core.application.persistence.local_design_store import LocalDesignStore
from tailor_configurator.core.application.ports import RemoteDesignStorePort
from tailor_configurator.core.application.ports.common.exceptions import ProviderError
from tailor_configurator.core.application.store import ConfigurationStore
from tailor_configurator.core.application.workflows.base_workflow import BaseWorkflow
from tailor_configurator.core.application.workflows.restore.restore_state import (
    RestoreFailureReason,
    RestoreHalted,
    RestoreState,
    RestoreStateMachine,
)
from tailor_configurator.core.domain.catalog import Product
from tailor_configurator.core.domain.design import SavedDesign
from tailor_configurator.infrastructure.observability.metrics_service import (
    RESTORE_ATTEMPTS_TOTAL,
    RESTORE_DURATION_SECONDS,
)
from tailor_configurator.infrastructure.observability.tracing_setup import trace_operation

logger = structlog.get_logger()

FABRIC_SLOT = "fabric"


@dataclass(frozen=True)
class RestoreRequest:
    design_id: str
    product_id: str
    store: ConfigurationStore
    session_token: str | None = None


@dataclass(frozen=True)
class RestoreOutcome:
    design_id: str
    product_id: str
    state: RestoreState
    failure: RestoreFailureReason | None = None
    history: tuple[RestoreState, ...] = ()
    unresolved_slots: tuple[str, ...] = ()
    skipped_categories: tuple[str, ...] = ()
    already_applied: bool = False
    design: SavedDesign | None = field(default=None, repr=False)

    @property
    def succeeded(self) -> bool:
        return self.state is RestoreState.DONE


@dataclass
class _AppliedSlots:
    unresolved: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)


class RestoreDesignWorkflow(BaseWorkflow[RestoreRequest, RestoreOutcome]):
    """Deterministic restore pipeline: Idempotency -> Locate -> Hydrate -> Apply."""

    def __init__(
        self,
        local: LocalDesignStore,
        remote: RemoteDesignStorePort | None,
        hydration_timeout_seconds: float = 10.0,
    ) -> None:
        self._local = local
        self._remote = remote
        self._hydration_timeout = hydration_timeout_seconds

    @trace_operation("workflow.restore_design")
    async def execute(self, request: RestoreRequest) -> RestoreOutcome:
        started = time.perf_counter()
        with bound_contextvars(
            design_id=request.design_id,
            product_id=request.product_id,
            attempt_id=uuid4().hex[:12],
        ):
            outcome = await self._run(request)
            duration_ms = (time.perf_counter() - started) * 1000
            RESTORE_DURATION_SECONDS.observe(duration_ms / 1000)
            RESTORE_ATTEMPTS_TOTAL.labels(outcome=self._metric_outcome(outcome)).inc()
            logger.info(
                "Restore finished",
                restore_state=outcome.state.value,
                failure=outcome.failure.value if outcome.failure else None,
                processing_status="success" if outcome.succeeded else "failed",
                processing_duration_ms=duration_ms,
            )
            return outcome

    async def _run(self, request: RestoreRequest) -> RestoreOutcome:
        machine = RestoreStateMachine()
        if self._step_0_already_applied(request, machine):
            return self._outcome(request, machine, already_applied=True)

        store, design = request.store, None
        applied: _AppliedSlots | None = None
        claimed = not store.is_discarded
        if claimed:
            store.begin_restore(request.design_id)
        try:
            design = await self._step_1_locate(request, machine)
            product = await self._step_2_hydrate(request, machine, design)
            applied = self._step_3_apply(request, machine, design, product)
        except RestoreHalted as halt:
            logger.warning("Restore halted", reason=halt.reason.value, **halt.context)
            machine.fail(halt.reason)
            return self._outcome(request, machine, design=design)
        finally:
            if claimed:
                store.end_restore(request.design_id, applied=applied is not None)

        machine.transition(RestoreState.DONE)
        return self._outcome(
            request,
            machine,
            design=design,
            unresolved=tuple(applied.unresolved),
            skipped=tuple(applied.skipped),
        )

    # ── Step Methods ─────────────────────────────────────────────────

    @staticmethod
    def _step_0_already_applied(request: RestoreRequest, machine: RestoreStateMachine) -> bool:
        store = request.store
        if store.is_discarded:
            return False
        if store.has_restored(request.design_id):
            logger.info("Design already restored on this configuration, skipping")
        elif store.is_restoring(request.design_id):
            logger.info("Design restore already in progress on this configuration, skipping")
        else:
            return False
        machine.transition(RestoreState.DONE)
        return True

    async def _step_1_locate(
        self, request: RestoreRequest, machine: RestoreStateMachine
    ) -> SavedDesign:
        """Remote first when signed in, then the local cache. Both scoped to the product."""
        machine.transition(RestoreState.LOCATING)
        self._ensure_live(request.store)
        design = await self._find_remote(request)
        if design is None:
            design = self._local.get(request.design_id, request.product_id)
        self._ensure_live(request.store)
        if design is None:
            raise RestoreHalted(RestoreFailureReason.NOT_FOUND, "Design not found in any store")
        logger.info("Design located", origin=design.origin.value)
        return design

    async def _step_2_hydrate(
        self, request: RestoreRequest, machine: RestoreStateMachine, design: SavedDesign
    ) -> Product:
        machine.transition(RestoreState.HYDRATING)
        try:
            product = await request.store.wait_for_catalog(self._hydration_timeout)
        except TimeoutError as e:
            raise RestoreHalted(
                RestoreFailureReason.CATALOG_TIMEOUT,
                "Catalog was not loaded in time",
                timeout_seconds=self._hydration_timeout,
            ) from e
        except ConfigurationDiscarded as e:
            raise RestoreHalted(RestoreFailureReason.DISCARDED, "Configuration discarded") from e
        if product.id != design.product_id:
            raise RestoreHalted(
                RestoreFailureReason.PRODUCT_MISMATCH,
                "Configuration holds a different product",
                loaded_product_id=product.id,
            )
        return product

    @staticmethod
    def _step_3_apply(
        request: RestoreRequest,
        machine: RestoreStateMachine,
        design: SavedDesign,
        product: Product,
    ) -> _AppliedSlots:
        """Fabric, then each category slot, then measurements. Missing options empty the slot."""
        machine.transition(RestoreState.APPLYING)
        store, snapshot, applied = request.store, design.snapshot, _AppliedSlots()

        fabric = product.fabric(snapshot.fabric.id) if snapshot.fabric else None
        if snapshot.fabric and fabric is None:
            applied.unresolved.append(FABRIC_SLOT)
        store.set_fabric(fabric)

        for category_key, item in snapshot.selections:
            if not product.has_category(category_key):
                applied.skipped.append(category_key)
                continue
            option = product.option(category_key, item.id) if item else None
            if item and option is None:
                applied.unresolved.append(category_key)
            store.set_selection(category_key, option)

        store.update_measurements(snapshot.measurement_map())
        logger.info(
            "Design applied",
            unresolved_slots=applied.unresolved,
            skipped_categories=applied.skipped,
        )
        return applied

    # ── Private Helpers ──────────────────────────────────────────────

    async def _find_remote(self, request: RestoreRequest) -> SavedDesign | None:
        if self._remote is None or not request.session_token:
            return None
        try:
            designs = await self._remote.list(request.product_id, request.session_token)
        except ProviderError as e:
            logger.warning(
                "Remote design lookup failed, falling back to local",
                error_type=type(e).__name__,
                error_details=str(e),
                error_retryable=e.retryable,
            )
            return None
        return next(
            (
                d
                for d in designs
                if d.id == request.design_id and d.product_id == request.product_id
            ),
            None,
        )

    @staticmethod
    def _ensure_live(store: ConfigurationStore) -> None:
        if store.is_discarded:
            raise RestoreHalted(RestoreFailureReason.DISCARDED, "Configuration discarded")

    @staticmethod
    def _outcome(
        request: RestoreRequest,
        machine: RestoreStateMachine,
        *,
        design: SavedDesign | None = None,
        unresolved: tuple[str, ...] = (),
        skipped: tuple[str, ...] = (),
        already_applied: bool = False,
    ) -> RestoreOutcome:
        return RestoreOutcome(
            design_id=request.design_id,
            product_id=request.product_id,
            state=machine.state,
            failure=machine.failure,
            history=machine.history,
            unresolved_slots=unresolved,
            skipped_categories=skipped,
            already_applied=already_applied,
            design=design,
        )

    @staticmethod
    def _metric_outcome(outcome: RestoreOutcome) -> str:
        if outcome.already_applied:
            return "noop"
        return outcome.failure.value if outcome.failure else "done"
