import json

import pytest

from trainlog_search.catalog import (
    CatalogLoadError,
    facet_values,
    load_catalog_from_records,
    load_catalog_json,
    muscle_group_label,
)

from conftest import make_item

BENCH = {
    "id": "bench_press",
    "name": "ベンチプレス",
    "nameEn": "Bench Press",
    "muscleGroup": "chest",
    "aliases": ["ベンチ"],
    "equipment": "barbell",
    "pattern": "push",
}


def _write(tmp_path, data):
    p = tmp_path / "exercises.json"
    p.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")
    return p


def test_load_catalog_json(tmp_path):
    items = load_catalog_json(_write(tmp_path, [BENCH]))
    assert len(items) == 1
    it = items[0]
    assert (it.id, it.name, it.name_en, it.muscle_group) == ("bench_press", "ベンチプレス", "Bench Press", "chest")
    assert it.aliases == ("ベンチ",)
    assert it.to_record() == BENCH


def test_optional_fields_default(tmp_path):
    rec = {k: v for k, v in BENCH.items() if k not in ("nameEn", "aliases")}
    it = load_catalog_json(_write(tmp_path, [rec]))[0]
    assert it.name_en == ""
    assert it.aliases == ()


def test_empty_catalog_is_allowed(tmp_path):
    assert load_catalog_json(_write(tmp_path, [])) == []


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_catalog_json(tmp_path / "nope.json")


def test_invalid_json(tmp_path):
    p = tmp_path / "exercises.json"
    p.write_text("[{", encoding="utf-8")
    with pytest.raises(CatalogLoadError):
        load_catalog_json(p)


def test_document_must_be_a_list(tmp_path):
    with pytest.raises(CatalogLoadError):
        load_catalog_json(_write(tmp_path, {"exercises": [BENCH]}))


def test_missing_required_field():
    rec = dict(BENCH)
    del rec["muscleGroup"]
    with pytest.raises(CatalogLoadError, match="muscleGroup"):
        load_catalog_from_records([rec])


def test_aliases_must_be_a_list():
    with pytest.raises(CatalogLoadError):
        load_catalog_from_records([dict(BENCH, aliases="ベンチ")])


def test_duplicates_are_kept_for_the_index():
    items = load_catalog_from_records([BENCH, dict(BENCH, name="ベンチプレス2")])
    assert [it.name for it in items] == ["ベンチプレス", "ベンチプレス2"]


def test_muscle_group_label():
    assert muscle_group_label("chest") == "胸"
    assert muscle_group_label("abs") == "体幹"
    assert muscle_group_label("neck") == "neck"


def test_facet_values_ordering():
    items = [
        make_item("a", "a", muscle_group="legs", equipment="machine"),
        make_item("b", "b", muscle_group="neck", equipment="barbell"),
        make_item("c", "c", muscle_group="chest", equipment="cable"),
        make_item("d", "d", muscle_group="cardio", equipment="barbell"),
    ]
    assert facet_values(items, "muscle_group") == ["chest", "legs", "cardio", "neck"]
    assert facet_values(items, "equipment") == ["barbell", "cable", "machine"]
    assert facet_values(items, "pattern") == ["push"]


def test_unknown_facet():
    with pytest.raises(ValueError):
        facet_values([], "color")
    with pytest.raises(ValueError):
        make_item("a", "a").facet("color")
