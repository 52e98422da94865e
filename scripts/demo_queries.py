import sys
from pathlib import Path
from typing import List

# Add project root to PYTHONPATH
ROOT = Path(__file__).resolve().parents[1]
sys.path.append(str(ROOT))

from trainlog_search.catalog import bundled_catalog_path
from trainlog_search.engine import SearchFilters, SearchResult, search
from trainlog_search.index import build_index_from_path
from trainlog_search.normalize import normalize, tokens


# --- queries covering each scoring tier and the normalizer ---
QUERIES = [
    "ベンチ",             # alias exact + name prefix
    "べんちぷれす",        # hiragana spelling of a katakana name
    "ﾃﾞｯﾄﾞﾘﾌﾄ",          # half-width katakana
    "BENCH-press",         # case + separator
    "プレス",              # substring across many items
    "sqat",                # fuzzy, distance 1
    "",                    # browse
]

FILTERED = [
    ("プレス", SearchFilters(muscle_group={"shoulders"})),
    ("", SearchFilters(equipment={"bodyweight"}, pattern={"core"})),
]


def print_results(results: List[SearchResult], top_k: int):
    for i, r in enumerate(results[:top_k], start=1):
        print(f"{i}. score={r.score:<5} {r.item.id:<22} {r.item.name} / {r.item.name_en}")


def main():
    k = 5
    index = build_index_from_path(str(bundled_catalog_path()))

    for q in QUERIES:
        print("\n" + "-" * 72)
        print(f"QUERY: {q!r}  key={normalize(q)!r}  tokens={tokens(q)}")
        print_results(search(index, q, limit=k), top_k=k)

    for q, flt in FILTERED:
        print("\n" + "-" * 72)
        print(f"QUERY: {q!r}  filters={flt}")
        print_results(search(index, q, filters=flt, limit=k), top_k=k)


if __name__ == "__main__":
    main()
