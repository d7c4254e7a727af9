from legalitea.document.models import TextInputResult

DEFAULT_MIN_TEXT_LENGTH = 50
DEFAULT_MAX_TEXT_LENGTH = 50_000


def normalize_text(
    raw: str,
    min_length: int = DEFAULT_MIN_TEXT_LENGTH,
    max_length: int = DEFAULT_MAX_TEXT_LENGTH,
) -> TextInputResult:
    """Validate pasted text and return it trimmed.

    The upper bound applies to the raw input, the lower bound to the
    trimmed text.
    """
    if len(raw) > max_length:
        return TextInputResult(
            valid=False,
            error=f"Text too long. Maximum {max_length:,} characters allowed.",
        )
    trimmed = raw.strip()
    if len(trimmed) < min_length:
        return TextInputResult(
            valid=False,
            error=f"Text too short. Please provide at least {min_length} characters.",
        )
    return TextInputResult(valid=True, text=trimmed)
