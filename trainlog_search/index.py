from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import List, Mapping, NamedTuple, Optional, Sequence, Tuple

from loguru import logger

from .catalog import CatalogItem, load_catalog_json
from .normalize import normalize

# score multiplier per source field
PRIMARY_NAME_WEIGHT = 8
SECONDARY_NAME_WEIGHT = 6
ALIAS_WEIGHT = 5


class IndexEntry(NamedTuple):
    key: str
    item_id: str
    weight: int


@dataclass(frozen=True)
class CatalogIndex:
    """
    Weighted multi-key lookup over a catalog snapshot.
    Built once by build_index(); never mutated, so it can be shared by
    concurrent searches.
    """

    entries: Tuple[IndexEntry, ...]
    items: Tuple[CatalogItem, ...]
    by_id: Mapping[str, CatalogItem]
    # item id -> position of the winning record in `items`
    positions: Mapping[str, int]

    def all(self) -> List[CatalogItem]:
        return list(self.items)

    def get(self, item_id: str) -> Optional[CatalogItem]:
        return self.by_id.get(item_id)

    def position(self, item_id: str) -> int:
        return self.positions.get(item_id, len(self.items))

    def __len__(self) -> int:
        return len(self.items)


def build_index(items: Sequence[CatalogItem]) -> CatalogIndex:
    entries: List[IndexEntry] = []
    by_id = {}
    positions = {}

    for pos, it in enumerate(items):
        # duplicate ids: last write wins
        by_id[it.id] = it
        positions[it.id] = pos

        # primary name is always indexed, even when it folds to ""
        entries.append(IndexEntry(normalize(it.name), it.id, PRIMARY_NAME_WEIGHT))

        k = normalize(it.name_en)
        if k:
            entries.append(IndexEntry(k, it.id, SECONDARY_NAME_WEIGHT))

        for alias in it.aliases:
            k = normalize(alias)
            if k:
                entries.append(IndexEntry(k, it.id, ALIAS_WEIGHT))

    logger.debug("Built catalog index: {} items, {} keys", len(items), len(entries))
    return CatalogIndex(
        entries=tuple(entries),
        items=tuple(items),
        by_id=MappingProxyType(by_id),
        positions=MappingProxyType(positions),
    )


def build_index_from_path(catalog_path: str) -> CatalogIndex:
    items = load_catalog_json(Path(catalog_path))
    return build_index(items)
