"""Target language alias resolution"""
import logging
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NormalizedTarget:
    """Canonical translation target."""
    code: str
    label: str


UZBEK_LATIN = NormalizedTarget(code="uz-Latn", label="Uzbek (Latin)")

# Known spellings per target, compared lower-cased and trimmed
TARGET_ALIASES = {
    UZBEK_LATIN: (
        "uzbek (latin)",
        "uzbek latin",
        "uzbek",
        "uz",
        "uz-latn",
        "uz_latn",
        "o'zbek",
        "o'zbek lotin",
        "oʻzbek",
        "oʻzbek lotin",
        "o‘zbek lotin",
        "o’zbek lotin",
        "ozbek lotin",
        "lotin",
        "ўзбек",
        "ўзбек лотин",
        "узбекский",
        "узбекский (латиница)",
        "우즈베크어",
        "우즈베크어 (라틴)",
    ),
}

DEFAULT_TARGET = UZBEK_LATIN


def resolve_target(label: str) -> NormalizedTarget:
    """
    Resolve a free-form target language label.

    Unknown labels fall back to DEFAULT_TARGET; this service only
    produces Uzbek Latin output.

    Args:
        label: Label as supplied by the client (any case, any spacing)

    Returns:
        NormalizedTarget for the label
    """
    key = str(label or "").strip().lower()
    for target, aliases in TARGET_ALIASES.items():
        if key in aliases:
            return target

    logger.debug(f"Unknown target label '{label}', using {DEFAULT_TARGET.code}")
    return DEFAULT_TARGET
