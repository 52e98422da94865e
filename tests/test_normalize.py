import pytest

from trainlog_search.normalize import normalize, tokens


def test_katakana_and_hiragana_fold_together():
    assert normalize("ベンチプレス") == normalize("べんちぷれす") == "へんちふれす"


def test_half_width_katakana_matches_full_width():
    assert normalize("ﾍﾞﾝﾁﾌﾟﾚｽ") == normalize("ベンチプレス")


def test_full_width_latin_and_digits():
    assert normalize("ＢＥＮＣＨ　ＰＲＥＳＳ") == "benchpress"
    assert normalize("２１ｓ") == "21s"


def test_separators_are_dropped():
    assert normalize("Bench-Press") == normalize("bench press") == normalize("BenchPress") == "benchpress"
    assert normalize("bench_press") == "benchpress"
    assert normalize("bench\tpress") == "benchpress"


def test_long_vowel_mark_is_dropped():
    assert normalize("ローイング") == "ろいんく"
    assert normalize("ｶｰﾙ") == "かる"


def test_latin_diacritics_are_folded():
    assert normalize("Café Crème") == "cafecreme"


def test_kana_voicing_marks_are_folded():
    assert normalize("ベンチ") == normalize("ヘンチ") == "へんち"
    assert normalize("プレス") == normalize("フレス")
    assert normalize("ﾀﾞﾝﾍﾞﾙ") == normalize("ダンベル") == "たんへる"


def test_allow_list_stops_at_n():
    assert normalize("ヴ") == "う"
    assert normalize("ゔぁ") == "うぁ"
    assert normalize("ヵヶ") == ""
    assert normalize("ゕゖ") == ""
    assert normalize("ん") == "ん"


def test_unlisted_characters_are_dropped():
    assert normalize("懸垂") == ""
    assert normalize("ベンチ!?（重）") == "へんち"
    assert normalize("💪") == ""


def test_none_and_empty():
    assert normalize("") == ""
    assert normalize(None) == ""


@pytest.mark.parametrize(
    "s",
    ["ベンチプレス", "ﾍﾞﾝﾁﾌﾟﾚｽ", "Bench-Press", "Café", "İstanbul", "ヴ", "ゔぁ", "懸垂 けんすい", "  ", "ｰ"],
)
def test_normalize_is_idempotent(s):
    once = normalize(s)
    assert normalize(once) == once


def test_tokens_split_on_spaces():
    assert tokens("Bench Press") == ["bench", "press"]
    assert tokens("ダンベル　プレス") == ["たんへる", "ふれす"]


def test_tokens_drop_empty_pieces():
    assert tokens("懸垂 チンニング") == ["ちんにんく"]
    assert tokens("bench  press") == ["bench", "press"]


def test_tokens_single_word():
    assert tokens("ベンチプレス") == ["へんちふれす"]


def test_tokens_without_space_keep_one_key_even_if_empty():
    assert tokens("懸垂") == [""]
    assert tokens("") == [""]
    # tabs are not word separators
    assert tokens("bench\tpress") == ["benchpress"]
