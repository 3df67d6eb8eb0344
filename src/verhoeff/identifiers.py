"""
Fixed-length ID — валидация идентификаторов фиксированной длины

Идентификатор = payload (length - 1 цифр) + контрольная цифра Verhoeff.
Эталонный формат — Aadhaar (12 цифр, отображение XXXX XXXX XXXX).

Порядок проверок validate_fixed_length_id / validate_id:
1. Длина (InvalidLengthError) — до любого разбора
2. Символы (InvalidCharacterError / EmptyInputError)
3. Сравнение контрольной цифры → True / False

Строка неверной длины никогда не доходит до сравнения контрольной цифры.
"""

from typing import Final

from pydantic import BaseModel, Field, field_validator

from verhoeff.checksum import compute_checksum_strict
from verhoeff.digits import parse_digits
from verhoeff.errors import InvalidLengthError

# =============================================================================
# ПАРАМЕТРЫ
# =============================================================================

# Длина Aadhaar (11 цифр payload + 1 контрольная)
DEFAULT_ID_LENGTH: Final[int] = 12

# Размер группы при отображении (XXXX XXXX XXXX)
DEFAULT_GROUP_SIZE: Final[int] = 4

# Сколько последних цифр оставлять открытыми при маскировании
DEFAULT_SHOW_LAST: Final[int] = 4

MASK_CHAR: Final[str] = "X"
GROUP_SEPARATOR: Final[str] = " "

# Минимальная длина: хотя бы одна цифра payload + контрольная цифра
MIN_ID_LENGTH: Final[int] = 2


# =============================================================================
# ФОРМАТ ИДЕНТИФИКАТОРА
# =============================================================================


class IdFormat(BaseModel):
    """
    Описание схемы идентификатора фиксированной длины.

    Immutable: один экземпляр разделяется всеми вызовами.
    """

    name: str = Field(..., min_length=1, description="Название схемы")
    length: int = Field(
        DEFAULT_ID_LENGTH, ge=MIN_ID_LENGTH, description="Полная длина вместе с контрольной цифрой"
    )
    group_size: int = Field(DEFAULT_GROUP_SIZE, ge=1, description="Размер группы при отображении")

    model_config = {"frozen": True}

    @field_validator("group_size")
    @classmethod
    def validate_group_size(cls, v: int, info) -> int:
        """Группа не может быть длиннее самого идентификатора"""
        if "length" in info.data and v > info.data["length"]:
            raise ValueError("group_size must not exceed length")
        return v

    @property
    def payload_length(self) -> int:
        """Длина payload без контрольной цифры"""
        return self.length - 1


AADHAAR_FORMAT: Final[IdFormat] = IdFormat(
    name="aadhaar", length=DEFAULT_ID_LENGTH, group_size=DEFAULT_GROUP_SIZE
)


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_fixed_length_id(text: str, required_length: int = DEFAULT_ID_LENGTH) -> bool:
    """
    Проверка идентификатора фиксированной длины.

    Args:
        text: Идентификатор вместе с контрольной цифрой
        required_length: Требуемая длина в символах (default: 12, Aadhaar)

    Returns:
        True если контрольная цифра совпадает с вычисленной по payload

    Raises:
        ValueError: Если required_length < 2
        InvalidLengthError: Если len(text) != required_length
        InvalidCharacterError: Если text содержит не-цифру
    """
    if required_length < MIN_ID_LENGTH:
        raise ValueError(
            f"required_length must be >= {MIN_ID_LENGTH}, got {required_length}"
        )

    if len(text) != required_length:
        raise InvalidLengthError(len(text), required_length)

    digits = parse_digits(text)
    expected = compute_checksum_strict(text[:-1])
    return expected == digits[-1]


def validate_id(text: str, id_format: IdFormat) -> bool:
    """Проверка идентификатора по схеме id_format (см. validate_fixed_length_id)."""
    return validate_fixed_length_id(text, required_length=id_format.length)


def validate_aadhaar(text: str) -> bool:
    """
    Проверка номера Aadhaar (12 цифр, без пробелов).

    Raises:
        InvalidLengthError, InvalidCharacterError
    """
    return validate_id(text, AADHAAR_FORMAT)


def generate_id(payload: str, id_format: IdFormat = AADHAAR_FORMAT) -> str:
    """
    Собрать полный идентификатор из payload.

    Args:
        payload: Ровно id_format.length - 1 цифр
        id_format: Схема идентификатора

    Returns:
        payload + контрольная цифра

    Raises:
        InvalidLengthError: Если длина payload не равна payload_length
        InvalidCharacterError: Если payload содержит не-цифру
    """
    if len(payload) != id_format.payload_length:
        raise InvalidLengthError(len(payload), id_format.payload_length)

    return f"{payload}{compute_checksum_strict(payload)}"


# =============================================================================
# ОТОБРАЖЕНИЕ
# =============================================================================


def _group(text: str, group_size: int) -> str:
    return GROUP_SEPARATOR.join(
        text[start:start + group_size] for start in range(0, len(text), group_size)
    )


def format_id(text: str, id_format: IdFormat = AADHAAR_FORMAT) -> str:
    """
    Отображение идентификатора группами (1234 5678 9012).

    Строка неверной длины возвращается без изменений. Символы не
    проверяются: форматирование не является валидацией.

    Examples:
        >>> format_id("123456789012")
        '1234 5678 9012'
        >>> format_id("12345")
        '12345'
    """
    if len(text) != id_format.length:
        return text
    return _group(text, id_format.group_size)


def mask_id(
    text: str,
    id_format: IdFormat = AADHAAR_FORMAT,
    show_last: int = DEFAULT_SHOW_LAST,
) -> str:
    """
    Маскирование идентификатора для вывода (XXXX XXXX 9012).

    Args:
        text: Идентификатор полной длины
        id_format: Схема идентификатора
        show_last: Сколько последних символов оставить открытыми

    Returns:
        Замаскированная и сгруппированная строка; для строки неверной
        длины — полностью замаскированная строка длины id_format.length

    Raises:
        ValueError: Если show_last вне [0, id_format.length]
    """
    if not 0 <= show_last <= id_format.length:
        raise ValueError(
            f"show_last must be in [0, {id_format.length}], got {show_last}"
        )

    if len(text) != id_format.length:
        return _group(MASK_CHAR * id_format.length, id_format.group_size)

    hidden = id_format.length - show_last
    return _group(MASK_CHAR * hidden + text[hidden:], id_format.group_size)
