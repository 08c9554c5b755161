"""
Unit tests for Cyrillic to Latin transliteration and ASCII projection
"""
import re

import pytest

from uzlatin.utils.transliteration import cyr_to_latin, to_ascii_uzbek, to_base64_utf8

PRINTABLE_ASCII = re.compile(r"^[\x20-\x7E]*$")

SAMPLES = [
    "",
    "Salom, doʻstim!",
    "Чўл",
    "Ғўза, Қўқон, Ҳаёт, Шаҳар",
    "Привет, дустим!",
    "Щука и цирк. Объект, мебель.",
    "Mixed: Тошкент and Samarqand",
    "ЯНГИ ЙИЛ",
    "o’gʼli",
    "Çalışkan öğrenci — ñandú 日本語 😀",
    "line one\nline two\ttab",
]


class TestCyrToLatin:
    """Transliteration into canonical Uzbek Latin"""

    def test_digraph_before_single_letters(self):
        assert cyr_to_latin("Чўл") == "Choʻl"

    def test_latin_is_fixpoint(self):
        assert cyr_to_latin("Salom, doʻstim!") == "Salom, doʻstim!"

    def test_russian_letters(self):
        assert cyr_to_latin("Привет, дустим!") == "Privet, dustim!"

    def test_uzbek_specific_letters(self):
        assert cyr_to_latin("Ғўза") == "Gʻoʻza"
        assert cyr_to_latin("Қўқон") == "Qoʻqon"
        assert cyr_to_latin("Ҳаёт") == "Hayot"
        assert cyr_to_latin("Жаҳон") == "Jahon"

    def test_digraph_letters_case_preserved(self):
        assert cyr_to_latin("Шаҳар шаҳар") == "Shahar shahar"
        assert cyr_to_latin("Юлдуз юлдуз") == "Yulduz yulduz"
        assert cyr_to_latin("Ёз ёз") == "Yoz yoz"

    def test_shcha_and_tse_are_digraphs(self):
        assert cyr_to_latin("Щ щ Ц ц") == "Sh sh Ts ts"

    def test_hard_sign_and_soft_sign(self):
        assert cyr_to_latin("объект") == "obʻekt"
        assert cyr_to_latin("мебель") == "mebel"

    def test_apostrophe_variants_normalized(self):
        assert cyr_to_latin("o’gʼli") == "oʻgʻli"
        assert cyr_to_latin("Oʼzbek") == "Oʻzbek"

    def test_non_cyrillic_untouched(self):
        assert cyr_to_latin("Hello 123 {name} %s") == "Hello 123 {name} %s"

    def test_empty_and_none(self):
        assert cyr_to_latin("") == ""
        assert cyr_to_latin(None) is None

    @pytest.mark.parametrize("text", SAMPLES)
    def test_idempotent(self, text):
        once = cyr_to_latin(text)
        assert cyr_to_latin(once) == once


class TestToAsciiUzbek:
    """Lossy projection onto printable ASCII"""

    def test_modifier_letters_become_quotes(self):
        assert to_ascii_uzbek("Salom, doʻstim!") == "Salom, do'stim!"
        assert to_ascii_uzbek("Gʻoʻza") == "G'o'za"

    def test_extended_latin_folded(self):
        assert to_ascii_uzbek("Çalış") == "Chalish"
        assert to_ascii_uzbek("ğ İ é Ó") == "g I e O"

    def test_unknown_code_points_replaced(self):
        assert to_ascii_uzbek("日本") == "??"
        assert to_ascii_uzbek("a\nb") == "a?b"

    @pytest.mark.parametrize("text", SAMPLES)
    def test_output_is_printable_ascii(self, text):
        assert PRINTABLE_ASCII.match(to_ascii_uzbek(cyr_to_latin(text)))
        assert PRINTABLE_ASCII.match(to_ascii_uzbek(text))

    @pytest.mark.parametrize("text", SAMPLES)
    def test_idempotent(self, text):
        once = to_ascii_uzbek(text)
        assert to_ascii_uzbek(once) == once


class TestToBase64Utf8:

    def test_encodes_utf8_bytes(self):
        assert to_base64_utf8("Salom, doʻstim!") == "U2Fsb20sIGRvyrtzdGltIQ=="

    def test_empty(self):
        assert to_base64_utf8("") == ""
        assert to_base64_utf8(None) == ""
