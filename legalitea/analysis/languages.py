DEFAULT_LANGUAGE = "en"

LANGUAGE_NAMES: dict[str, str] = {
    "en": "English",
    "hi": "Hindi",
    "kn": "Kannada",
    "gu": "Gujarati",
    "es": "Spanish",
    "fr": "French",
    "de": "German",
    "zh": "Chinese",
    "ja": "Japanese",
    "ar": "Arabic",
}


def language_name(code: str | None) -> str:
    """Display name for an ISO language code; unknown or missing codes map to English."""
    if not code:
        return LANGUAGE_NAMES[DEFAULT_LANGUAGE]
    return LANGUAGE_NAMES.get(code.strip().lower(), LANGUAGE_NAMES[DEFAULT_LANGUAGE])
