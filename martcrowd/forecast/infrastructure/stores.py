"""
Store catalogue offered by the form.
"""
from dataclasses import dataclass
from typing import Dict, Iterator, FrozenSet


@dataclass(frozen=True)
class Store:
    key: str
    name: str
    warehouse: bool = False


class StoreCatalog:
    def __init__(self, stores: Dict[str, Store]):
        self._stores = dict(stores)

    @classmethod
    def from_config(cls, stores_cfg) -> "StoreCatalog":
        return cls({
            key: Store(key=key, name=cfg.name or key, warehouse=bool(cfg.warehouse))
            for key, cfg in stores_cfg.items()
        })

    def display_name(self, key: str) -> str:
        store = self._stores.get(key)
        return store.name if store else key

    @property
    def warehouse_keys(self) -> FrozenSet[str]:
        return frozenset(key for key, store in self._stores.items() if store.warehouse)

    def __contains__(self, key: str) -> bool:
        return key in self._stores

    def __iter__(self) -> Iterator[Store]:
        return iter(self._stores.values())
