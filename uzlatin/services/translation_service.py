"""Translation into Uzbek Latin with one validated retry"""
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from uzlatin.services.provider import OpenAIChatProvider, ProviderTransportError
from uzlatin.utils.output_validator import is_apology_or_meta, validate_output
from uzlatin.utils.target_alias import NormalizedTarget
from uzlatin.utils.transliteration import cyr_to_latin, to_ascii_uzbek, to_base64_utf8

logger = logging.getLogger(__name__)

# Both attempts run deterministically
TRANSLATION_TEMPERATURE = 0.0

FIRST_ATTEMPT_PROMPT = """You are a professional translator into {target_label}.
- Output MUST be in Uzbek Latin alphabet (Lotin alifbosi), NOT Cyrillic.
- Translate literally. Preserve meaning, tone, punctuation, and line breaks.
- Keep code/JSON/placeholders ({{name}}, {{{{var}}}}, %s) exactly as-is.
- Return ONLY the translated text (no explanations)."""

RETRY_PROMPT = """Translate the user's text into Uzbek using ONLY the Latin alphabet.
Allowed characters: A-Z, a-z, digits, basic punctuation, and the letters oʻ gʻ.
No Cyrillic. No apologies, comments, notes or questions. Output the translation only."""


class InvalidInputError(ValueError):
    """Raised when the source text is missing or not a string."""


class CandidateStage(str, Enum):
    """Processing stage of a candidate translation."""
    RAW = "raw"
    TRANSLITERATED = "transliterated"


@dataclass(frozen=True)
class TranslationCandidate:
    """Text produced by one provider call."""
    text: str
    stage: CandidateStage


@dataclass(frozen=True)
class TranslationResult:
    """Final output of one translation request."""
    latin_text: str
    ascii_text: str
    base64_latin: str
    target_code: str
    target_label: str
    was_retried: bool


class AttemptState(Enum):
    """States of the translate/validate/retry cycle."""
    INIT = "init"
    FIRST_ATTEMPT = "first_attempt"
    VALIDATE_FIRST = "validate_first"
    ACCEPTED = "accepted"
    RETRY_ATTEMPT = "retry_attempt"
    VALIDATE_RETRY = "validate_retry"
    FINAL = "final"


def next_state(state: AttemptState, needs_retry: bool = False) -> AttemptState:
    """
    Transition function of the attempt cycle.

    Only VALIDATE_FIRST branches; every other state has one successor,
    so a request can never reach RETRY_ATTEMPT twice.
    """
    if state is AttemptState.INIT:
        return AttemptState.FIRST_ATTEMPT
    if state is AttemptState.FIRST_ATTEMPT:
        return AttemptState.VALIDATE_FIRST
    if state is AttemptState.VALIDATE_FIRST:
        return AttemptState.RETRY_ATTEMPT if needs_retry else AttemptState.ACCEPTED
    if state is AttemptState.RETRY_ATTEMPT:
        return AttemptState.VALIDATE_RETRY
    return AttemptState.FINAL


def choose_final(
    first: TranslationCandidate,
    retry: Optional[TranslationCandidate]
) -> TranslationCandidate:
    """
    Pick between the first attempt and the retry.

    The retry wins when it is non-empty and not an apology. Otherwise the
    first attempt is returned even though it failed validation.
    """
    if retry is not None and retry.text and not is_apology_or_meta(retry.text):
        return retry
    return first


class TranslationService:
    """Translates text into Uzbek Latin through the chat completions provider"""

    def __init__(self, provider: OpenAIChatProvider, default_model: str):
        self.provider = provider
        self.default_model = default_model

    async def _attempt(self, system_prompt: str, text: str, model: str) -> TranslationCandidate:
        """One provider call, transliterated and trimmed."""
        raw = TranslationCandidate(
            text=await self.provider.complete(system_prompt, text, model, TRANSLATION_TEMPERATURE),
            stage=CandidateStage.RAW,
        )
        return TranslationCandidate(
            text=(cyr_to_latin(raw.text) or "").strip(),
            stage=CandidateStage.TRANSLITERATED,
        )

    async def translate(
        self,
        text: str,
        target: NormalizedTarget,
        model: Optional[str] = None
    ) -> TranslationResult:
        """
        Translate text, retrying once with a stricter prompt if the first
        answer is not clean Uzbek Latin.

        Args:
            text: Source text
            target: Resolved translation target
            model: Optional model override

        Returns:
            TranslationResult with Latin, ASCII and base64 renditions

        Raises:
            InvalidInputError: text is missing or not a string
            ProviderTransportError: the first provider call failed
        """
        if not isinstance(text, str) or not text.strip():
            raise InvalidInputError("text must be a non-empty string")

        model = model or self.default_model
        first: Optional[TranslationCandidate] = None
        retry: Optional[TranslationCandidate] = None
        final: Optional[TranslationCandidate] = None
        needs_retry = False

        state = AttemptState.INIT
        while state is not AttemptState.FINAL:
            logger.debug(f"Attempt state: {state.value}")

            if state is AttemptState.FIRST_ATTEMPT:
                prompt = FIRST_ATTEMPT_PROMPT.format(target_label=target.label)
                first = await self._attempt(prompt, text, model)

            elif state is AttemptState.VALIDATE_FIRST:
                needs_retry = validate_output(first.text).needs_retry

            elif state is AttemptState.ACCEPTED:
                final = first

            elif state is AttemptState.RETRY_ATTEMPT:
                logger.info(f"Retrying translation with strict prompt (model: {model})")
                try:
                    retry = await self._attempt(RETRY_PROMPT, text, model)
                except ProviderTransportError as e:
                    logger.warning(f"Retry call failed, keeping first attempt: {e}")

            elif state is AttemptState.VALIDATE_RETRY:
                final = choose_final(first, retry)

            state = next_state(state, needs_retry)

        was_retried = final is retry
        logger.info(f"Translation finished ({len(final.text)} chars, retried: {was_retried})")

        return TranslationResult(
            latin_text=final.text,
            ascii_text=to_ascii_uzbek(final.text),
            base64_latin=to_base64_utf8(final.text),
            target_code=target.code,
            target_label=target.label,
            was_retried=was_retried,
        )
