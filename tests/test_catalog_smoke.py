import pytest

from trainlog_search.catalog import bundled_catalog_path, load_catalog_json
from trainlog_search.engine import SearchFilters, search
from trainlog_search.index import build_index_from_path


@pytest.mark.slow
def test_bundled_catalog_loads():
    items = load_catalog_json(bundled_catalog_path())
    assert len(items) > 0
    assert len({it.id for it in items}) == len(items)


@pytest.mark.slow
@pytest.mark.parametrize(
    "query,expected",
    [
        ("ベンチ", "bench_press"),
        ("ﾃﾞｯﾄﾞﾘﾌﾄ", "deadlift"),
        ("けんすい", "pull_up"),
        ("sqat", "squat"),
        ("OHP", "overhead_press"),
    ],
)
def test_bundled_catalog_top_hit(query, expected):
    index = build_index_from_path(str(bundled_catalog_path()))
    assert search(index, query, limit=5)[0].item.id == expected


@pytest.mark.slow
def test_bundled_catalog_facet_filter():
    index = build_index_from_path(str(bundled_catalog_path()))
    results = search(index, "プレス", SearchFilters(muscle_group={"shoulders"}))
    assert results
    assert all(r.item.muscle_group == "shoulders" for r in results)
