"""
Validation of transliterated model output.

Models sometimes answer with an apology, a refusal or a remark about
themselves instead of a translation, and sometimes leave characters from
another script behind. Both cases are detected here so the caller can
ask the model again.
"""
import logging
import re
import string
from dataclasses import dataclass
from typing import List, Pattern

logger = logging.getLogger(__name__)

# Uzbek modifier letters allowed on top of plain ASCII
UZBEK_MODIFIERS = "ʻʼ"

_CHARSET_RE = re.compile(
    r"^[A-Za-z0-9 \t\r\n\f\v" + re.escape(string.punctuation) + UZBEK_MODIFIERS + r"]+$"
)

# Openers of refusals, apologies and meta commentary. Matched against the
# start of the trimmed, case-folded text only.
APOLOGY_PATTERNS: List[Pattern] = [re.compile(p) for p in (
    # English
    r"sorry\b",
    r"i(?:'|ʻ)?m sorry\b",
    r"i am sorry\b",
    r"i apologi[sz]e\b",
    r"(?:my )?apologies\b",
    r"unfortunately\b",
    r"i (?:cannot|can(?:'|ʻ)?t|am unable|am not able)\b",
    r"i(?:'|ʻ)?m (?:unable|not able)\b",
    r"as an ai\b",
    r"as a(?:n ai)? language model\b",
    r"here(?:'|ʻ)?s the translation\b",
    r"here is (?:the|your) translation\b",
    r"translation\s*:",
    # Uzbek
    r"kechirasiz\b",
    r"kechirasan\b",
    r"uzr\b",
    r"afsuski\b",
    r"men\b.{0,60}\b(?:qila olmayman|tarjima qilolmayman)",
    r"sun(?:'|ʻ)?iy intellekt sifatida\b",
    r"tarjima\s*:",
    # Russian, as it reads after transliteration
    r"izvinite\b",
    r"prostite\b",
    r"k sojaleniyu\b",
    r"ya ne mogu\b",
    # Korean
    r"죄송",
    r"미안",
    r"저는 ai",
    r"ai로서",
    r"번역할 수 없",
)]


@dataclass(frozen=True)
class ValidationVerdict:
    """Outcome of validating one candidate."""
    charset_valid: bool
    is_apology_or_meta: bool

    @property
    def needs_retry(self) -> bool:
        """A candidate is retried if it apologises or leaves the charset."""
        return self.is_apology_or_meta or not self.charset_valid


def is_charset_valid(text: str) -> bool:
    """Check text only uses ASCII letters, digits, whitespace, punctuation and oʻ/gʻ marks."""
    if not text:
        return False
    return _CHARSET_RE.match(text) is not None


def is_apology_or_meta(text: str) -> bool:
    """
    Detect refusals, apologies and self-referential openers.

    Args:
        text: Transliterated candidate

    Returns:
        True if the text starts like a refusal instead of a translation
    """
    if not text:
        return False

    folded = text.strip().casefold()
    return any(pattern.match(folded) for pattern in APOLOGY_PATTERNS)


def validate_output(text: str) -> ValidationVerdict:
    """Run both checks over a transliterated candidate."""
    verdict = ValidationVerdict(
        charset_valid=is_charset_valid(text),
        is_apology_or_meta=is_apology_or_meta(text),
    )
    if verdict.needs_retry:
        logger.warning(
            f"Candidate rejected (charset_valid={verdict.charset_valid}, "
            f"apology_or_meta={verdict.is_apology_or_meta}): '{(text or '')[:50]}'"
        )
    return verdict
