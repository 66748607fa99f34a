"""Prometheus metrics declarations for the configurator.

All metrics are declared statically at module level.
Labels use ONLY static enumerations, never product or design ids.
"""

from prometheus_client import Counter, Histogram

# ── Catalog ───────────────────────────────────────────────────────

CATALOG_LOADS_TOTAL = Counter(
    "configurator_catalog_loads_total",
    "Catalog loads by outcome",
    ["outcome"],
)

# ── Saved designs ─────────────────────────────────────────────────

DESIGN_SAVES_TOTAL = Counter(
    "configurator_design_saves_total",
    "Design saves by target store and outcome",
    ["store", "outcome"],
)

RESTORE_ATTEMPTS_TOTAL = Counter(
    "configurator_restore_attempts_total",
    "Restore attempts by terminal outcome",
    ["outcome"],
)

RESTORE_DURATION_SECONDS = Histogram(
    "configurator_restore_duration_seconds",
    "Wall time of a restore attempt, including catalog hydration",
)

# ── Orders ────────────────────────────────────────────────────────

ORDER_SUBMISSIONS_TOTAL = Counter(
    "configurator_order_submissions_total",
    "Order submissions by outcome",
    ["outcome"],
)
