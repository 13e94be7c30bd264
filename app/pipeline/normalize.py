from typing import Mapping, Optional

QUOTE = '"'

_TRUE_FLAGS = {'yes', 'y', 'true', 't', '1'}
_FALSE_FLAGS = {'no', 'n', 'false', 'f', '0'}

# Range of a 32-bit INTEGER column
INTEGER_MIN = -2147483648
INTEGER_MAX = 2147483647


def normalize_field(raw: Optional[str]) -> Optional[str]:
    '''
    Clean a raw export field value.
    1. None, empty or whitespace-only -> None (absent)
    2. Trim whitespace
    3. Strip one layer of surrounding double quotes
    4. Un-escape doubled quotes ("" -> ")
    5. Trim again; a value left empty is absent too

    Only one quote layer is removed per call, so nested quoting such as
    '"""a"""' is not idempotent: it yields '"a"', which normalizes to 'a'.
    '''
    if raw is None:
        return None
    if not isinstance(raw, str):
        raw = str(raw)

    value = raw.strip()
    if not value:
        return None

    if len(value) >= 2 and value.startswith(QUOTE) and value.endswith(QUOTE):
        value = value[1:-1]

    value = value.replace(QUOTE * 2, QUOTE)
    value = value.strip()

    return value or None


def normalize_record(raw_record: Mapping[str, Optional[str]]) -> dict:
    """Apply normalize_field to every value, keeping the field order."""
    return {name: normalize_field(value) for name, value in raw_record.items()}


def safe_int(value: Optional[str]) -> Optional[int]:
    """Integer coercion that yields None instead of raising, or when out of INTEGER range."""
    if value is None:
        return None
    try:
        number = int(value.strip())
    except ValueError:
        return None
    if not INTEGER_MIN <= number <= INTEGER_MAX:
        return None
    return number


def parse_flag(value: Optional[str]) -> Optional[bool]:
    """Yes/No style flag coercion; unrecognized text is absent."""
    if value is None:
        return None
    flag = value.strip().lower()
    if flag in _TRUE_FLAGS:
        return True
    if flag in _FALSE_FLAGS:
        return False
    return None
