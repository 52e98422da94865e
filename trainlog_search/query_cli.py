import argparse
import sys
from typing import List

from loguru import logger

from .catalog import CatalogLoadError, muscle_group_label
from .config import CATALOG_PATH, DEFAULT_LIMIT, LOG_LEVEL
from .engine import SearchFilters, SearchResult, search
from .index import CatalogIndex, build_index_from_path
from .logging_config import configure_logging
from .normalize import normalize


def print_results(q: str, results: List[SearchResult]):
    print(f"\nQ: {q}  (key: {normalize(q) or '-'})")
    if not results:
        print("  no matches")
        return
    for i, r in enumerate(results, start=1):
        it = r.item
        group = muscle_group_label(it.muscle_group)
        print(f"{i:>2}. score={r.score:<5} {it.name} / {it.name_en or '-'}  [{group} | {it.equipment} | {it.pattern}]  ({it.id})")


def run_query(index: CatalogIndex, q: str, filters: SearchFilters, k: int):
    results = search(index, q, filters=filters, limit=k)
    logger.debug("requested k={} returned={}", k, len(results))
    print_results(q, results)


# Argument Parsing
def main(argv=None):
    parser = argparse.ArgumentParser(description="Search the exercise catalog")
    parser.add_argument("--catalog", default=CATALOG_PATH)
    parser.add_argument("--k", type=int, default=DEFAULT_LIMIT)
    parser.add_argument("--query", type=str, default=None, help="Run a single query and exit")
    parser.add_argument("--muscle-group", action="append", default=[])
    parser.add_argument("--equipment", action="append", default=[])
    parser.add_argument("--pattern", action="append", default=[])
    parser.add_argument("--log-level", default=None)
    args = parser.parse_args(argv)

    configure_logging(args.log_level or LOG_LEVEL)

    try:
        index = build_index_from_path(args.catalog)
    except (FileNotFoundError, CatalogLoadError) as e:
        logger.error("Could not load catalog: {}", e)
        return 1

    filters = SearchFilters(
        muscle_group=args.muscle_group,
        equipment=args.equipment,
        pattern=args.pattern,
    )

    if args.query is not None:
        run_query(index, args.query.strip(), filters, args.k)
        return 0

    print(f"Exercise search ready ({len(index)} exercises). Type 'exit' to quit.\n")
    while True:
        try:
            q = input("Q> ").strip()
        except EOFError:
            print("\n(EOF) No interactive input available. Tip: use --query \"...\"")
            break

        if q.lower() in {"exit", "quit"}:
            break

        run_query(index, q, filters, args.k)
    return 0


if __name__ == "__main__":
    sys.exit(main())
