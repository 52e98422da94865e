import argparse
import csv
import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Tuple

from loguru import logger

from .config import BUNDLED_EVAL_PATH, CATALOG_PATH, LOG_LEVEL
from .engine import SearchFilters, search
from .index import build_index_from_path
from .logging_config import configure_logging


@dataclass
class EvalItem:
    qid: str
    query: str
    gold_ids: List[str]
    filters: SearchFilters = field(default_factory=SearchFilters)


def load_eval_jsonl(path: Path) -> List[EvalItem]:
    items: List[EvalItem] = []
    with open(path, "r", encoding="utf-8") as f:
        for line_num, line in enumerate(f, start=1):
            line = line.strip()
            if not line:
                continue
            obj = json.loads(line)
            qid = str(obj.get("qid", f"line_{line_num}"))
            q = str(obj["query"])
            gold = obj.get("gold_ids", [])
            if not isinstance(gold, list):
                raise ValueError(f"gold_ids must be a list on line {line_num}")
            flt = obj.get("filters") or {}
            items.append(
                EvalItem(
                    qid=qid,
                    query=q,
                    gold_ids=[str(x) for x in gold],
                    filters=SearchFilters(
                        muscle_group=flt.get("muscle_group", []),
                        equipment=flt.get("equipment", []),
                        pattern=flt.get("pattern", []),
                    ),
                )
            )
    if not items:
        raise RuntimeError("No eval items loaded.")
    return items


def hit_at_k(retrieved: List[str], gold: List[str], k: int) -> int:
    topk = retrieved[:k]
    gold_set = set(gold)
    return 1 if any(rid in gold_set for rid in topk) else 0


def reciprocal_rank(retrieved: List[str], gold: List[str]) -> float:
    gold_set = set(gold)
    for rank, rid in enumerate(retrieved, start=1):
        if rid in gold_set:
            return 1.0 / rank
    return 0.0


def classify_failure(retrieved: List[str], gold: List[str], k: int = 5) -> Tuple[str, List[str]]:
    """
    Failure taxonomy based on ranking only.
    """
    if not gold:
        return ("NO_GOLD_LABELS", ["Add gold_ids for this query."])

    if not retrieved:
        return (
            "NO_RESULTS",
            [
                "Check how the query normalizes; kanji and symbols are dropped.",
                "Add a kana or latin alias to the catalog entry.",
            ],
        )

    if not hit_at_k(retrieved, gold, k):
        return (
            "MISSED_TOP_K",
            [
                "Add an alias matching the query wording.",
                "Queries longer than the fuzzy limit only match by prefix/substring.",
            ],
        )

    if retrieved[0] not in set(gold):
        return ("RANKED_LOW", ["An alias or name of another item outscores the gold item."])

    return ("OK", [])


def evaluate(index, items: List[EvalItem], k: int = 5) -> Tuple[List[Dict[str, Any]], List[Dict[str, Any]]]:
    report_rows: List[Dict[str, Any]] = []
    failure_rows: List[Dict[str, Any]] = []

    for item in items:
        results = search(index, item.query, filters=item.filters, limit=max(k, 10))
        retrieved_ids = [r.item.id for r in results]

        h = hit_at_k(retrieved_ids, item.gold_ids, k)
        rr = reciprocal_rank(retrieved_ids, item.gold_ids)

        report_rows.append(
            {
                "qid": item.qid,
                "query": item.query,
                f"hit@{k}": str(h),
                "rr": f"{rr:.4f}",
                "gold_ids": "|".join(item.gold_ids),
                f"top{k}_ids": "|".join(retrieved_ids[:k]),
            }
        )

        failure_type, suggested_fixes = classify_failure(retrieved_ids, item.gold_ids, k)
        if failure_type != "OK":
            failure_rows.append(
                {
                    "qid": item.qid,
                    "failure_type": failure_type,
                    "query": item.query,
                    "gold_ids": item.gold_ids,
                    f"top{k}_ids": retrieved_ids[:k],
                    "suggested_fixes": suggested_fixes,
                }
            )

    return report_rows, failure_rows


def main(argv=None):
    parser = argparse.ArgumentParser(description="Ranking report over labeled queries")
    parser.add_argument("--catalog", default=CATALOG_PATH)
    parser.add_argument("--queries", default=str(BUNDLED_EVAL_PATH))
    parser.add_argument("--k", type=int, default=5)
    parser.add_argument("--out-dir", default="eval")
    args = parser.parse_args(argv)

    configure_logging(LOG_LEVEL)

    index = build_index_from_path(args.catalog)
    items = load_eval_jsonl(Path(args.queries))

    out_dir = Path(args.out_dir)
    report_csv = out_dir / "report.csv"
    failures_jsonl = out_dir / "failures.jsonl"

    report_rows, failure_rows = evaluate(index, items, k=args.k)

    # write report.csv
    out_dir.mkdir(parents=True, exist_ok=True)
    with open(report_csv, "w", encoding="utf-8", newline="") as f:
        w = csv.DictWriter(f, fieldnames=list(report_rows[0].keys()))
        w.writeheader()
        w.writerows(report_rows)

    # write failures.jsonl
    with open(failures_jsonl, "w", encoding="utf-8") as f:
        for row in failure_rows:
            f.write(json.dumps(row, ensure_ascii=False) + "\n")

    # summary
    hit_rate = sum(int(r[f"hit@{args.k}"]) for r in report_rows) / len(report_rows)
    mrr = sum(float(r["rr"]) for r in report_rows) / len(report_rows)

    logger.info("Wrote {}", report_csv)
    logger.info("Wrote {}", failures_jsonl)
    print(f"Hit@{args.k} rate = {hit_rate:.4f}")
    print(f"MRR        = {mrr:.4f}")
    print(f"Failures   = {len(failure_rows)}")
    return 0


if __name__ == "__main__":
    main()
