"""In-memory exercise name search for the TrainLog catalog."""

from .catalog import CatalogItem, load_catalog_json
from .engine import SearchFilters, SearchResult, search
from .index import CatalogIndex, build_index
from .normalize import normalize, tokens

__all__ = [
    "CatalogItem",
    "CatalogIndex",
    "SearchFilters",
    "SearchResult",
    "build_index",
    "load_catalog_json",
    "normalize",
    "search",
    "tokens",
]
