"""Canonical comparison keys for exercise names.

Folds width, case, diacritics and kana script so that a query typed as
"ﾍﾞﾝﾁ", "ベンチ" or "べんち" ends up as the same key. Everything that is
not hiragana, a-z or 0-9 is dropped, so the function never fails.
"""

from __future__ import annotations

import unicodedata
from typing import List


# tokens() splits on these only
_SPACES = (" ", "\u3000")

_LONG_VOWEL_MARK = "ー"
_SEPARATORS = {"_", "-"}

# katakana ァ..ヶ sit exactly 0x60 above hiragana ぁ..ゖ; ゕ and ゖ fall outside the allow-list
_KATAKANA_FIRST = 0x30A1
_KATAKANA_LAST = 0x30F6
_KANA_OFFSET = 0x60

_HIRAGANA_FIRST = 0x3041
_HIRAGANA_LAST = 0x3093  # ん


def _fold(text: str) -> str:
    s = unicodedata.normalize("NFKD", text).casefold()
    # casefold can emit precomposed letters (e.g. "İ")
    s = unicodedata.normalize("NFKD", s)
    s = "".join(ch for ch in s if not unicodedata.combining(ch))
    return unicodedata.normalize("NFC", s)


def _katakana_to_hiragana(text: str) -> str:
    chars: List[str] = []
    for ch in text:
        code = ord(ch)
        if _KATAKANA_FIRST <= code <= _KATAKANA_LAST:
            chars.append(chr(code - _KANA_OFFSET))
        else:
            chars.append(ch)
    return "".join(chars)


def _is_allowed(ch: str) -> bool:
    if "a" <= ch <= "z" or "0" <= ch <= "9":
        return True
    return _HIRAGANA_FIRST <= ord(ch) <= _HIRAGANA_LAST


def normalize(text: str) -> str:
    """Return the canonical key for `text`.

    Steps: compatibility decomposition, case + diacritic folding,
    katakana -> hiragana, then drop "ー", whitespace, "_" and "-" and keep
    only hiragana / latin letters / digits.

    >>> normalize("Bench-Press") == normalize("bench press") == "benchpress"
    True
    """
    s = _katakana_to_hiragana(_fold(text or ""))

    buf: List[str] = []
    for ch in s:
        if ch == _LONG_VOWEL_MARK or ch in _SEPARATORS or ch.isspace():
            continue
        if _is_allowed(ch):
            buf.append(ch)
    return "".join(buf)


def tokens(text: str) -> List[str]:
    """Word-by-word keys when the raw input has a space, else the full key.

    Pieces that normalize to nothing are dropped; the single-key form is
    returned as is, even when empty.
    """
    text = text or ""
    if any(sp in text for sp in _SPACES):
        pieces = text.replace("\u3000", " ").split(" ")
        return [k for k in (normalize(piece) for piece in pieces) if k]

    return [normalize(text)]
