"""Unit tests for ConfigurationStore."""

import asyncio

import pytest

from tailor_configurator.core.application.exceptions import (
    ConfigurationDiscarded,
    InvalidSelection,
)
from tailor_configurator.core.application.rendering import ConventionPathTable
from tailor_configurator.core.application.store import ConfigurationStore, configuration_store
from tailor_configurator.core.domain.catalog import CustomizationOption, FabricOption, Product
from tailor_configurator.core.domain.shared import Money, ViewMode

# ═══════════════════════════════════════════════════════════════════════
# Seeding
# ═══════════════════════════════════════════════════════════════════════


class TestSeeding:
    def test_defaults_are_first_flagged_or_first_option(
        self, shirt_store: ConfigurationStore
    ) -> None:
        configuration = shirt_store.configuration

        assert configuration.fabric.id == "fabric-white"
        assert {key: option.id for key, option in configuration.selections.items()} == {
            "collar": "collar-classic",
            "cuff": "cuff-single",
            "sleeve": "sleeve-full",
            "pocket": "pocket-none",
            "button": "button-pearl",
        }
        assert configuration.view_mode is ViewMode.FRONT

    def test_seeded_price(self, shirt_store: ConfigurationStore) -> None:
        # 8500 base + 250 collar + 50 buttons
        assert shirt_store.price() == Money(8800)

    def test_unloaded_store_is_empty(self) -> None:
        store = ConfigurationStore()

        assert not store.is_catalog_loaded
        assert store.price() == Money(0)
        assert store.layers() == []
        assert store.configuration.selections == {}


# ═══════════════════════════════════════════════════════════════════════
# Mutations
# ═══════════════════════════════════════════════════════════════════════


class TestMutations:
    def test_select_option_by_id_updates_price(self, shirt_store: ConfigurationStore) -> None:
        shirt_store.select_fabric_by_id("fabric-champagne")
        shirt_store.select_option_by_id("sleeve", "sleeve-half")

        # 8800 + 200 champagne - 500 half sleeve
        assert shirt_store.price() == Money(8500)

    def test_clearing_a_slot(self, shirt_store: ConfigurationStore) -> None:
        shirt_store.select_option_by_id("collar", None)

        assert shirt_store.configuration.selections["collar"] is None
        assert shirt_store.price() == Money(8550)

    def test_option_from_another_category_is_rejected_and_state_kept(
        self, shirt_store: ConfigurationStore, shirt_product: Product
    ) -> None:
        before = shirt_store.configuration
        revision = shirt_store.revision
        cuff = shirt_product.option("cuff", "cuff-french")

        with pytest.raises(InvalidSelection) as exc_info:
            shirt_store.set_selection("collar", cuff)

        assert exc_info.value.context["option_id"] == "cuff-french"
        assert shirt_store.configuration == before
        assert shirt_store.revision == revision

    def test_lookalike_option_not_from_the_catalog_is_rejected(
        self, shirt_store: ConfigurationStore
    ) -> None:
        forged = CustomizationOption(
            id="collar-classic", category_key="collar", price_modifier=-8000
        )

        with pytest.raises(InvalidSelection):
            shirt_store.set_selection("collar", forged)

    def test_unknown_category_is_rejected(self, shirt_store: ConfigurationStore) -> None:
        with pytest.raises(InvalidSelection, match="Unknown category"):
            shirt_store.select_option_by_id("lapel", "lapel-peak")

    def test_unknown_option_id_is_rejected(self, shirt_store: ConfigurationStore) -> None:
        with pytest.raises(InvalidSelection, match="Unknown option"):
            shirt_store.select_option_by_id("collar", "collar-mandarin")

    def test_fabric_from_another_product_is_rejected(
        self, shirt_store: ConfigurationStore
    ) -> None:
        with pytest.raises(InvalidSelection):
            shirt_store.set_fabric(FabricOption(id="tweed"))
        with pytest.raises(InvalidSelection):
            shirt_store.select_fabric_by_id("tweed")

        assert shirt_store.configuration.fabric.id == "fabric-white"

    def test_selection_before_catalog_load_is_rejected(self) -> None:
        with pytest.raises(InvalidSelection, match="before a product is loaded"):
            ConfigurationStore().select_option_by_id("collar", "collar-classic")

    def test_measurements_are_stored_as_strings(self, shirt_store: ConfigurationStore) -> None:
        shirt_store.set_measurement("chest", 40)  # type: ignore[arg-type]
        shirt_store.update_measurements({"neck": "15.5", "sleeve": "25"})

        assert shirt_store.configuration.measurements == {
            "chest": "40",
            "neck": "15.5",
            "sleeve": "25",
        }

    def test_view_mode_accepts_strings_and_rejects_unknown(
        self, shirt_store: ConfigurationStore
    ) -> None:
        shirt_store.set_view_mode("back")
        assert shirt_store.configuration.view_mode is ViewMode.BACK

        with pytest.raises(InvalidSelection):
            shirt_store.set_view_mode("side")
        assert shirt_store.configuration.view_mode is ViewMode.BACK

    def test_configuration_read_is_a_copy(self, shirt_store: ConfigurationStore) -> None:
        shirt_store.configuration.selections["collar"] = None

        assert shirt_store.configuration.selections["collar"] is not None

    def test_snapshot_is_independent_of_later_mutations(
        self, shirt_store: ConfigurationStore
    ) -> None:
        snapshot = shirt_store.snapshot()

        shirt_store.select_option_by_id("collar", "collar-button-down")
        shirt_store.set_measurement("chest", "42")

        assert snapshot.selected_option_id("collar") == "collar-classic"
        assert "chest" not in snapshot.measurement_map()


# ═══════════════════════════════════════════════════════════════════════
# Derived views
# ═══════════════════════════════════════════════════════════════════════


class TestDerivedViews:
    def test_price_is_memoized_per_revision(
        self, shirt_store: ConfigurationStore, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        calls: list[int] = []
        real_price = configuration_store.price

        def counting_price(*args, **kwargs):
            calls.append(1)
            return real_price(*args, **kwargs)

        monkeypatch.setattr(configuration_store, "price", counting_price)

        shirt_store.price()
        shirt_store.price()
        assert len(calls) == 1

        shirt_store.select_option_by_id("cuff", "cuff-french")
        assert shirt_store.price() == Money(8950)
        assert len(calls) == 2

    def test_layers_follow_view_mode(self, shirt_store: ConfigurationStore) -> None:
        front = shirt_store.layers()
        shirt_store.set_view_mode(ViewMode.BACK)
        back = shirt_store.layers()

        assert "button" in {layer.category_key for layer in front}
        assert "button" not in {layer.category_key for layer in back}
        assert back[0].image_ref.endswith("/Back/back-white.png")


# ═══════════════════════════════════════════════════════════════════════
# Lifecycle
# ═══════════════════════════════════════════════════════════════════════


class TestLifecycle:
    def test_discarded_store_rejects_every_mutation(
        self, shirt_store: ConfigurationStore
    ) -> None:
        shirt_store.discard()

        assert shirt_store.is_discarded
        with pytest.raises(ConfigurationDiscarded):
            shirt_store.select_option_by_id("collar", "collar-button-down")
        with pytest.raises(ConfigurationDiscarded):
            shirt_store.set_measurement("chest", "40")
        with pytest.raises(ConfigurationDiscarded):
            shirt_store.set_view_mode(ViewMode.BACK)

    def test_reset_reseeds_and_clears_restore_bookkeeping(
        self, shirt_store: ConfigurationStore
    ) -> None:
        shirt_store.select_option_by_id("collar", "collar-button-down")
        shirt_store.begin_restore("design-1")
        shirt_store.end_restore("design-1", applied=True)

        shirt_store.reset()

        assert shirt_store.configuration.selections["collar"].id == "collar-classic"
        assert not shirt_store.has_restored("design-1")

    def test_reattaching_a_product_clears_restore_bookkeeping(
        self,
        shirt_store: ConfigurationStore,
        shirt_product: Product,
        shirt_conventions: ConventionPathTable,
    ) -> None:
        shirt_store.begin_restore("design-1")
        shirt_store.end_restore("design-1", applied=True)

        shirt_store.attach_product(shirt_product, conventions=shirt_conventions)

        assert not shirt_store.has_restored("design-1")

    def test_only_an_applied_restore_is_recorded(self, shirt_store: ConfigurationStore) -> None:
        shirt_store.begin_restore("design-1")
        assert shirt_store.is_restoring("design-1")

        shirt_store.end_restore("design-1", applied=False)

        assert not shirt_store.is_restoring("design-1")
        assert not shirt_store.has_restored("design-1")

    @pytest.mark.asyncio
    async def test_wait_for_catalog_returns_once_attached(
        self, shirt_product: Product, shirt_conventions: ConventionPathTable
    ) -> None:
        store = ConfigurationStore()

        async def attach_later() -> None:
            await asyncio.sleep(0)
            store.attach_product(shirt_product, conventions=shirt_conventions)

        waiter = asyncio.create_task(store.wait_for_catalog(timeout=1.0))
        await attach_later()

        assert await waiter is shirt_product

    @pytest.mark.asyncio
    async def test_wait_for_catalog_times_out(self) -> None:
        with pytest.raises(TimeoutError):
            await ConfigurationStore().wait_for_catalog(timeout=0.01)

    @pytest.mark.asyncio
    async def test_discard_releases_catalog_waiters(self) -> None:
        store = ConfigurationStore()
        waiter = asyncio.create_task(store.wait_for_catalog(timeout=1.0))
        await asyncio.sleep(0)

        store.discard()

        with pytest.raises(ConfigurationDiscarded):
            await waiter
