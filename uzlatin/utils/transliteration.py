"""
Uzbek Cyrillic to Latin transliteration.

Translation models asked for Uzbek frequently answer in Cyrillic, or mix
both scripts in one reply. Every candidate is forced through this module
so the service only ever hands out the Latin alphabet (Lotin alifbosi).
"""
import base64
import re
from typing import List, Tuple

from uzlatin.utils.apostrophe import CANONICAL_APOSTROPHE, normalize_apostrophe

A = CANONICAL_APOSTROPHE

# Letters that expand to two Latin characters. Applied before the
# single-character table so that Щ and Ц never reach it.
DIGRAPHS: List[Tuple[str, str]] = [
    ("Ч", "Ch"), ("ч", "ch"),
    ("Ш", "Sh"), ("ш", "sh"),
    ("Щ", "Sh"), ("щ", "sh"),
    ("Ю", "Yu"), ("ю", "yu"),
    ("Я", "Ya"), ("я", "ya"),
    ("Ё", "Yo"), ("ё", "yo"),
    ("Ц", "Ts"), ("ц", "ts"),
]

SINGLE_LETTERS = {
    # Uzbek-specific
    "Қ": "Q", "қ": "q",
    "Ғ": "G" + A, "ғ": "g" + A,
    "Ў": "O" + A, "ў": "o" + A,
    "Ҳ": "H", "ҳ": "h",
    "Й": "Y", "й": "y",
    "Э": "E", "э": "e",
    "Ъ": A, "ъ": A,
    "Ь": "", "ь": "",
    "Ж": "J", "ж": "j",
    # Shared with Russian
    "А": "A", "а": "a", "Б": "B", "б": "b", "В": "V", "в": "v",
    "Г": "G", "г": "g", "Д": "D", "д": "d", "Е": "E", "е": "e",
    "З": "Z", "з": "z", "И": "I", "и": "i", "Ы": "I", "ы": "i",
    "К": "K", "к": "k", "Л": "L", "л": "l", "М": "M", "м": "m",
    "Н": "N", "н": "n", "О": "O", "о": "o", "П": "P", "п": "p",
    "Р": "R", "р": "r", "С": "S", "с": "s", "Т": "T", "т": "t",
    "У": "U", "у": "u", "Ф": "F", "ф": "f", "Х": "X", "х": "x",
}

_SINGLE_TABLE = str.maketrans(SINGLE_LETTERS)

# o/g followed by any apostrophe-like mark
_MODIFIER_PAIR_RE = re.compile(r"([og])[‘’ʻʼ]", re.IGNORECASE)

# Extended Latin letters folded for ASCII-only consumers
ASCII_FOLDS: List[Tuple[str, str]] = [
    ("ç", "ch"), ("Ç", "Ch"),
    ("ş", "sh"), ("Ş", "Sh"),
    ("ğ", "g"), ("Ğ", "G"),
    ("ı", "i"), ("İ", "I"),
    ("á", "a"), ("Á", "A"),
    ("é", "e"), ("É", "E"),
    ("í", "i"), ("Í", "I"),
    ("ó", "o"), ("Ó", "O"),
    ("ú", "u"), ("Ú", "U"),
]

_NON_PRINTABLE_ASCII_RE = re.compile(r"[^\x20-\x7E]")


def cyr_to_latin(text: str) -> str:
    """
    Transliterate Uzbek Cyrillic into canonical Uzbek Latin.

    Latin input comes back unchanged, so the function can be applied to
    any model output regardless of the script it arrived in.

    Args:
        text: Raw text, possibly mixing Cyrillic and Latin

    Returns:
        Canonical Latin text with normalized apostrophes
    """
    if not text:
        return text

    for cyrillic, latin in DIGRAPHS:
        text = text.replace(cyrillic, latin)

    text = text.translate(_SINGLE_TABLE)
    text = _MODIFIER_PAIR_RE.sub(r"\1" + A, text)
    return normalize_apostrophe(text)


def to_ascii_uzbek(text: str) -> str:
    """
    Project canonical Latin text onto printable ASCII (lossy).

    oʻ/gʻ become o'/g', a few Turkish and Romance letters are folded,
    and anything else outside 0x20-0x7E is replaced with '?'.
    """
    if not text:
        return text

    text = normalize_apostrophe(text).replace(A, "'")
    for extended, plain in ASCII_FOLDS:
        text = text.replace(extended, plain)

    text = _MODIFIER_PAIR_RE.sub(r"\1'", text)
    return _NON_PRINTABLE_ASCII_RE.sub("?", text)


def to_base64_utf8(text: str) -> str:
    """Base64 of the UTF-8 bytes of text (binary-safe transport)."""
    return base64.b64encode((text or "").encode("utf-8")).decode("ascii")
