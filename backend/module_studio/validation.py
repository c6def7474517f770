"""
Field rules for module payloads.

Shared by the service layer and the HTTP client so a bad request fails with
the same message whether it is caught locally or by the server. Content is
checked in a fixed order (prompt, English name, Kannada name) and the first
failure wins.
"""
from typing import Any, Optional
from .exceptions import ValidationError

MODULE_DATA_REQUIRED = "Module data is required"
PROMPT_REQUIRED = "Module prompt is required"
ENGLISH_NAME_REQUIRED = "English name is required"
KANNADA_NAME_REQUIRED = "Kannada name is required"
MODULE_ID_REQUIRED = "Valid module ID is required"

# Largest rowid SQLite can hold; no stored module has a larger ID
MAX_MODULE_ID = 2 ** 63 - 1


def _get(source: Any, key: str) -> Any:
    if source is None:
        return None
    if isinstance(source, dict):
        return source.get(key)
    return getattr(source, key, None)


def _is_blank(value: Any) -> bool:
    return not isinstance(value, str) or value.strip() == ""


def validate_module_id(module_id: Any) -> int:
    """
    Return ``module_id`` as a positive int or raise ValidationError.

    Accepts ints and strings of decimal digits; bools, floats and anything
    else are rejected.
    """
    if isinstance(module_id, bool):
        raise ValidationError(MODULE_ID_REQUIRED, field="id")

    if isinstance(module_id, str):
        candidate = module_id.strip()
        if not (candidate.isascii() and candidate.isdigit()):
            raise ValidationError(MODULE_ID_REQUIRED, field="id")
        module_id = int(candidate)

    if not isinstance(module_id, int) or module_id <= 0:
        raise ValidationError(MODULE_ID_REQUIRED, field="id")

    return module_id


def is_storable_id(module_id: int) -> bool:
    """True when ``module_id`` fits in a SQLite integer column"""
    return module_id <= MAX_MODULE_ID


def validate_module_data(data: Any) -> None:
    """Check the required content fields of a create or update payload"""
    if data is None:
        raise ValidationError(MODULE_DATA_REQUIRED, field="data")

    if _is_blank(_get(data, "prompt")):
        raise ValidationError(PROMPT_REQUIRED, field="prompt")

    if _is_blank(_get(_get(data, "en"), "name")):
        raise ValidationError(ENGLISH_NAME_REQUIRED, field="en.name")

    if _is_blank(_get(_get(data, "kn"), "name")):
        raise ValidationError(KANNADA_NAME_REQUIRED, field="kn.name")


def optional_text(value: Optional[str]) -> Optional[str]:
    """Empty optional text is stored as NULL"""
    return value or None
