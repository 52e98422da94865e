"""Ranked lookup over a CatalogIndex.

Each index entry contributes at most once, through the first tier it hits:

    exact      100 * weight
    prefix      60 * weight
    substring   30 * weight
    fuzzy       20 * weight (distance 1) / 10 * weight (distance 2)

The fuzzy tier only runs for queries of at most `fuzzy_max_len` characters.
Contributions from every matching entry of an item add up.
"""

from collections import defaultdict
from dataclasses import dataclass, field
from typing import AbstractSet, Dict, FrozenSet, List, Optional

from loguru import logger

from .catalog import CatalogItem
from .config import DEFAULT_LIMIT, FUZZY_MAX_QUERY_LEN
from .edit_distance import levenshtein
from .index import CatalogIndex
from .normalize import normalize

EXACT_MULTIPLIER = 100
PREFIX_MULTIPLIER = 60
SUBSTRING_MULTIPLIER = 30
FUZZY_MULTIPLIERS = {1: 20, 2: 10}


@dataclass(frozen=True)
class SearchFilters:
    muscle_group: FrozenSet[str] = field(default_factory=frozenset)
    equipment: FrozenSet[str] = field(default_factory=frozenset)
    pattern: FrozenSet[str] = field(default_factory=frozenset)

    def __post_init__(self):
        # accept any iterable of values (lists from JSON, CLI args, ...)
        for name in ("muscle_group", "equipment", "pattern"):
            values = getattr(self, name) or ()
            if isinstance(values, str):
                values = (values,)
            object.__setattr__(self, name, frozenset(values))

    def is_empty(self) -> bool:
        return not (self.muscle_group or self.equipment or self.pattern)

    def matches(self, item: CatalogItem) -> bool:
        return (
            _allowed(self.muscle_group, item.muscle_group)
            and _allowed(self.equipment, item.equipment)
            and _allowed(self.pattern, item.pattern)
        )


def _allowed(values: AbstractSet[str], value: str) -> bool:
    return not values or value in values


@dataclass(frozen=True)
class SearchResult:
    item: CatalogItem
    score: int


def score_key(key: str, query: str, weight: int, fuzzy_max_len: int = FUZZY_MAX_QUERY_LEN) -> int:
    """Contribution of one index key for an already-normalized, non-empty query."""
    if key == query:
        return EXACT_MULTIPLIER * weight
    if key.startswith(query):
        return PREFIX_MULTIPLIER * weight
    if query in key:
        return SUBSTRING_MULTIPLIER * weight
    if len(query) <= fuzzy_max_len:
        d = levenshtein(key, query)
        return FUZZY_MULTIPLIERS.get(d, 0) * weight
    return 0


def _browse(index: CatalogIndex, filters: SearchFilters, limit: int) -> List[SearchResult]:
    if filters.is_empty():
        return [SearchResult(item=it, score=0) for it in index.items[:limit]]

    out: List[SearchResult] = []
    for it in index.items:
        if len(out) >= limit:
            break
        if filters.matches(it):
            out.append(SearchResult(item=it, score=0))
    return out


def search(
    index: CatalogIndex,
    query: str,
    filters: Optional[SearchFilters] = None,
    limit: int = DEFAULT_LIMIT,
    fuzzy_max_len: int = FUZZY_MAX_QUERY_LEN,
) -> List[SearchResult]:
    filters = filters or SearchFilters()
    limit = max(limit, 0)
    if limit == 0:
        return []

    qn = normalize(query)
    if not qn:
        return _browse(index, filters, limit)

    scores: Dict[str, int] = defaultdict(int)
    for key, item_id, weight in index.entries:
        contribution = score_key(key, qn, weight, fuzzy_max_len)
        if contribution:
            scores[item_id] += contribution

    results: List[SearchResult] = []
    for item_id, score in scores.items():
        item = index.get(item_id)
        if item is None or not filters.matches(item):
            continue
        results.append(SearchResult(item=item, score=score))

    # equal scores keep catalog order
    results.sort(key=lambda r: (-r.score, index.position(r.item.id)))
    logger.debug("search {!r} -> {!r}: {} matches", query, qn, len(results))
    return results[:limit]
