from abc import ABC, abstractmethod
from collections.abc import Sequence

from storefront_state.core.domain.catalog import CatalogProduct


class CatalogPort(ABC):
    @abstractmethod
    async def fetch_by_ids(self, ids: Sequence[str]) -> list[CatalogProduct]:
        """Reads the live catalog rows for ``ids``.

        Result order is unspecified and unknown ids are simply absent; callers
        re-associate by ``CatalogProduct.id``. Raises ``CatalogFetchError``.
        """
