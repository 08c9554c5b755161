"""
Unit tests for output validation
"""
import pytest

from uzlatin.utils.output_validator import (
    ValidationVerdict,
    is_apology_or_meta,
    is_charset_valid,
    validate_output,
)


class TestCharsetCheck:
    """Whitelist of ASCII plus the Uzbek modifier letters"""

    def test_uzbek_latin_is_valid(self):
        assert is_charset_valid("Salom, doʻstim!")
        assert is_charset_valid("Oʼzbekiston: 2024-yil (rasmiy) {name} %s")

    def test_multiline_is_valid(self):
        assert is_charset_valid("Birinchi qator.\nIkkinchi qator.")

    def test_cyrillic_is_invalid(self):
        assert not is_charset_valid("Привет")

    def test_other_scripts_invalid(self):
        assert not is_charset_valid("안녕하세요")
        assert not is_charset_valid("Salom — doʻstim")

    def test_empty_is_invalid(self):
        assert not is_charset_valid("")
        assert not is_charset_valid(None)

    @pytest.mark.parametrize("space", ["\u00a0", "\u2028", "\u3000", "\u2009"])
    def test_non_ascii_whitespace_is_invalid(self, space):
        assert not is_charset_valid(f"Salom{space}dunyo")

    def test_ascii_whitespace_is_valid(self):
        assert is_charset_valid("Salom\tdunyo\r\nYana bir qator")


class TestApologyCheck:
    """Refusal and meta openers, matched at the start only"""

    @pytest.mark.parametrize("text", [
        "Kechirasiz, tushunmadim",
        "  Sorry, I can't translate this.",
        "I'm sorry, but that is not possible.",
        "I cannot help with that.",
        "As an AI language model, I do not...",
        "Afsuski, bu matnni tarjima qila olmayman.",
        "Uzr, xatolik yuz berdi.",
        "Izvinite, ya ne ponyal.",
        "죄송합니다, 번역할 수 없습니다.",
        "Translation: Salom",
    ])
    def test_detects_openers(self, text):
        assert is_apology_or_meta(text)

    @pytest.mark.parametrize("text", [
        "Salom dunyo",
        "U menga sorry dedi.",
        "Kitobni oʻqib chiqdim, kechirasiz demadim.",
        "Uzra oʻtdi.",
        "",
    ])
    def test_ordinary_text_passes(self, text):
        assert not is_apology_or_meta(text)


class TestValidationVerdict:

    def test_needs_retry_combinations(self):
        assert not ValidationVerdict(charset_valid=True, is_apology_or_meta=False).needs_retry
        assert ValidationVerdict(charset_valid=False, is_apology_or_meta=False).needs_retry
        assert ValidationVerdict(charset_valid=True, is_apology_or_meta=True).needs_retry

    def test_validate_output(self):
        assert validate_output("Salom dunyo") == ValidationVerdict(True, False)
        assert validate_output("Kechirasiz, tushunmadim.").needs_retry
        assert validate_output("Привет").needs_retry
