import pytest

from trainlog_search.catalog import CatalogItem
from trainlog_search.index import build_index


def make_item(id, name, name_en="", aliases=(), muscle_group="chest", equipment="barbell", pattern="push"):
    return CatalogItem(
        id=id,
        name=name,
        name_en=name_en,
        muscle_group=muscle_group,
        equipment=equipment,
        pattern=pattern,
        aliases=tuple(aliases),
    )


SAMPLE_ITEMS = [
    make_item("bench_press", "ベンチプレス", "Bench Press", ["ベンチ"], "chest", "barbell", "push"),
    make_item("incline_bench_press", "インクラインベンチプレス", "Incline Bench Press", ["インクライン"], "chest", "barbell", "push"),
    make_item("squat", "スクワット", "Squat", ["バックスクワット"], "legs", "barbell", "squat"),
    make_item("leg_press", "レッグプレス", "Leg Press", [], "legs", "machine", "squat"),
    make_item("deadlift", "デッドリフト", "Deadlift", ["デッド"], "back", "barbell", "hinge"),
    make_item("pull_up", "懸垂", "Pull-up", ["けんすい", "チンニング"], "back", "bodyweight", "pull"),
    make_item("plank", "プランク", "Plank", [], "abs", "bodyweight", "core"),
]


@pytest.fixture
def sample_items():
    return list(SAMPLE_ITEMS)


@pytest.fixture
def sample_index():
    return build_index(SAMPLE_ITEMS)
