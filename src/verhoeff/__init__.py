"""
Verhoeff — контрольная цифра на основе диэдральной группы D5

Обнаруживает все одиночные замены цифр и все перестановки соседних цифр.
Используется для проверки идентификаторов (например, Aadhaar).

Strict API бросает VerhoeffError; permissive API возвращает значение по
умолчанию (0 / False / вход без изменений).
"""

# Tables
from verhoeff.tables import (
    D_TABLE,
    DIGIT_BASE,
    INV_TABLE,
    P_TABLE,
    PERMUTATION_PERIOD,
)

# Errors
from verhoeff.errors import (
    EmptyInputError,
    InvalidCharacterError,
    InvalidLengthError,
    VerhoeffError,
)

# Digit parser
from verhoeff.digits import is_ascii_digit, parse_digits

# Checksum engine
from verhoeff.checksum import (
    append_checksum,
    compute_checksum,
    compute_checksum_strict,
    validate,
    validate_strict,
)

# Fixed-length identifiers
from verhoeff.identifiers import (
    AADHAAR_FORMAT,
    DEFAULT_ID_LENGTH,
    IdFormat,
    format_id,
    generate_id,
    mask_id,
    validate_aadhaar,
    validate_fixed_length_id,
    validate_id,
)

__version__ = "1.0.0"

__all__ = [
    # Tables
    "D_TABLE",
    "DIGIT_BASE",
    "INV_TABLE",
    "P_TABLE",
    "PERMUTATION_PERIOD",
    # Errors
    "VerhoeffError",
    "InvalidCharacterError",
    "EmptyInputError",
    "InvalidLengthError",
    # Digit parser
    "is_ascii_digit",
    "parse_digits",
    # Checksum engine — strict
    "compute_checksum_strict",
    "validate_strict",
    # Checksum engine — permissive
    "compute_checksum",
    "validate",
    "append_checksum",
    # Fixed-length identifiers
    "AADHAAR_FORMAT",
    "DEFAULT_ID_LENGTH",
    "IdFormat",
    "format_id",
    "generate_id",
    "mask_id",
    "validate_aadhaar",
    "validate_fixed_length_id",
    "validate_id",
]
