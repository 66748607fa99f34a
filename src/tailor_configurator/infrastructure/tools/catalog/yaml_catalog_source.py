from pathlib import Path
from typing import Any

import structlog
import yaml

from tailor_configurator.core.application.ports import CatalogPort
from tailor_configurator.core.application.ports.common.exceptions import ProviderError

logger = structlog.get_logger()


class YamlCatalogSource(CatalogPort):
    """Serves product descriptors from a YAML document.

    The document is either a list of descriptors or a mapping with a ``products`` list.
    Descriptors are matched on ``_id`` or ``id``.
    """

    PROVIDER = "yaml-catalog"

    def __init__(self, path: Path | str) -> None:
        self._path = Path(path)
        self._products: dict[str, dict[str, Any]] | None = None

    async def get(self, product_id: str) -> dict[str, Any]:
        products = self._load()
        if product_id not in products:
            raise ProviderError(self.PROVIDER, f"Unknown product '{product_id}'", status_code=404)
        return products[product_id]

    def _load(self) -> dict[str, dict[str, Any]]:
        if self._products is not None:
            return self._products
        try:
            document = yaml.safe_load(self._path.read_text(encoding="utf-8")) or []
        except (OSError, yaml.YAMLError) as e:
            raise ProviderError(self.PROVIDER, f"Cannot read {self._path}: {e}") from e

        entries = document.get("products", []) if isinstance(document, dict) else document
        self._products = {
            str(entry.get("_id") or entry.get("id")): entry
            for entry in entries
            if isinstance(entry, dict) and (entry.get("_id") or entry.get("id"))
        }
        logger.info("Seed catalog loaded", path=str(self._path), products=len(self._products))
        return self._products
