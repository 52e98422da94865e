#FastAPI backend
from functools import lru_cache
from typing import Any, Dict, List

from fastapi import FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger
from pydantic import BaseModel, Field

from .catalog import FACETS, CatalogLoadError, facet_values, muscle_group_label
from .config import CATALOG_PATH, DEFAULT_LIMIT
from .engine import SearchFilters, SearchResult, search
from .index import CatalogIndex, build_index_from_path
from .logging_config import configure_logging
from .normalize import normalize

MAX_LIMIT = 200

configure_logging()

app = FastAPI(title="TrainLog Exercise Search")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class SearchIn(BaseModel):
    query: str = ""
    limit: int = Field(default=DEFAULT_LIMIT, ge=0, le=MAX_LIMIT)
    muscle_group: List[str] = Field(default_factory=list)
    equipment: List[str] = Field(default_factory=list)
    pattern: List[str] = Field(default_factory=list)

    def filters(self) -> SearchFilters:
        return SearchFilters(
            muscle_group=self.muscle_group,
            equipment=self.equipment,
            pattern=self.pattern,
        )


@lru_cache(maxsize=1)
def get_index() -> CatalogIndex:
    logger.info("Loading exercise catalog from {}", CATALOG_PATH)
    return build_index_from_path(CATALOG_PATH)


def _index_or_503() -> CatalogIndex:
    try:
        return get_index()
    except (FileNotFoundError, CatalogLoadError) as e:
        logger.error("Catalog unavailable: {}", e)
        raise HTTPException(status_code=503, detail=str(e)) from e


def _result_row(r: SearchResult) -> Dict[str, Any]:
    row = r.item.to_record()
    row["score"] = r.score
    return row


@app.post("/search")
def search_exercises(q: SearchIn):
    index = _index_or_503()
    results = search(index, q.query, filters=q.filters(), limit=q.limit)
    return {
        "query": q.query,
        "normalized": normalize(q.query),
        "results": [_result_row(r) for r in results],
    }


@app.get("/exercises")
def list_exercises(
    muscle_group: List[str] = Query(default=[]),
    equipment: List[str] = Query(default=[]),
    pattern: List[str] = Query(default=[]),
):
    index = _index_or_503()
    filters = SearchFilters(muscle_group=muscle_group, equipment=equipment, pattern=pattern)
    return {"exercises": [it.to_record() for it in index.all() if filters.matches(it)]}


@app.get("/facets")
def list_facets():
    index = _index_or_503()
    items = index.all()
    out: Dict[str, List[Dict[str, str]]] = {}
    for facet in FACETS:
        values = facet_values(items, facet)
        if facet == "muscle_group":
            out[facet] = [{"value": v, "label": muscle_group_label(v)} for v in values]
        else:
            out[facet] = [{"value": v, "label": v} for v in values]
    return out


@app.get("/health")
def health():
    index = _index_or_503()
    return {"status": "ok", "items": len(index)}
