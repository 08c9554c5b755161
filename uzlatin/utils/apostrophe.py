"""Apostrophe normalization for Uzbek Latin text"""
import re

# Canonical Uzbek modifier letter (oʻ, gʻ, tutuq belgisi)
CANONICAL_APOSTROPHE = "ʻ"

# Variant code points that LLMs and keyboards emit for the same sign
APOSTROPHE_VARIANTS = "‘’ʻʼ"

_VARIANT_RE = re.compile(f"[{APOSTROPHE_VARIANTS}]")


def normalize_apostrophe(text: str) -> str:
    """Collapse every apostrophe variant to the canonical modifier letter."""
    if not text:
        return text
    return _VARIANT_RE.sub(CANONICAL_APOSTROPHE, text)
