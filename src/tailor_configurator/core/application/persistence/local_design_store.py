from __future__ import annotations

from typing import Any

import structlog

from tailor_configurator.core.application.persistence.contracts.saved_design_dto import (
    SavedDesignDTO,
)
from tailor_configurator.core.application.persistence.stored_records import (
    DecodedRecords,
    decode_records,
    write_records,
)
from tailor_configurator.core.application.ports import KeyValueStorePort
from tailor_configurator.core.domain.design import DesignOrigin, SavedDesign

logger = structlog.get_logger()

DEFAULT_CAPACITY = 20
DEFAULT_KEY = "saved_designs"


class LocalDesignStore:
    """Device-local saved designs: newest first, at most ``capacity`` entries, keyed by id.

    Saving past capacity evicts the oldest entries. Re-saving an existing id
    replaces the entry and moves it to the front. Entries that no longer parse are
    kept aside rather than lost when the list is rewritten.
    """

    def __init__(
        self, kv: KeyValueStorePort, capacity: int = DEFAULT_CAPACITY, key: str = DEFAULT_KEY
    ) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be >= 1, got {capacity}")
        self._kv = kv
        self._capacity = capacity
        self._key = key

    @property
    def capacity(self) -> int:
        return self._capacity

    def list(self, product_id: str | None = None) -> list[SavedDesign]:
        designs = self._load().records
        if product_id is None:
            return designs
        return [d for d in designs if d.product_id == product_id]

    def get(self, design_id: str, product_id: str | None = None) -> SavedDesign | None:
        return next((d for d in self.list(product_id) if d.id == design_id), None)

    def save(self, design: SavedDesign) -> SavedDesign:
        stored = design.with_origin(DesignOrigin.LOCAL)
        loaded = self._load()
        others = [d for d in loaded.records if d.id != stored.id]
        kept = [stored, *others][: self._capacity]
        evicted = len(others) + 1 - len(kept)
        if evicted:
            logger.info("Evicted oldest local designs", evicted=evicted, capacity=self._capacity)
        self._write(kept, loaded.rejected)
        return stored

    def delete(self, design_id: str) -> bool:
        loaded = self._load()
        remaining = [d for d in loaded.records if d.id != design_id]
        if len(remaining) == len(loaded.records):
            return False
        self._write(remaining, loaded.rejected)
        return True

    def delete_for_product(self, product_id: str) -> int:
        loaded = self._load()
        remaining = [d for d in loaded.records if d.product_id != product_id]
        removed = len(loaded.records) - len(remaining)
        if removed:
            self._write(remaining, loaded.rejected)
        return removed

    def _load(self) -> DecodedRecords[SavedDesign]:
        return decode_records(self._kv.get(self._key), _parse_design, key=self._key)

    def _write(self, designs: list[SavedDesign], rejected: list[Any]) -> None:
        records = [SavedDesignDTO.from_domain(d).to_wire() for d in designs]
        write_records(self._kv, self._key, records, rejected)


def _parse_design(entry: Any) -> SavedDesign:
    return SavedDesignDTO.model_validate(entry).to_domain(DesignOrigin.LOCAL)
