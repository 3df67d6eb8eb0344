"""
Checksum Engine — вычисление и проверка контрольной цифры Verhoeff.

Обе операции — одна и та же свёртка справа налево:

    c = 0
    for i, digit in enumerate(reversed(digits)):
        c = D[c][P[(i + offset) % 8][digit]]

- compute: offset = 1, результат INV[c]. Свёртка идёт только по payload,
  а контрольная цифра займёт позицию 0, поэтому payload сдвинут на 1.
- validate: offset = 0, свёртка по всей строке (включая контрольную
  цифру), строка валидна iff c == 0.

Объединять две операции без сдвига нельзя: это ломает корректность.

Два уровня API:
- strict (compute_checksum_strict, validate_strict): бросают VerhoeffError
- permissive (compute_checksum, validate, append_checksum): возвращают
  фиксированное значение по умолчанию (0 / False / вход без изменений)

ВАЖНО: compute_checksum возвращает 0 при ошибке разбора, и это
неотличимо от настоящей контрольной цифры 0. Если ошибка важна —
используйте compute_checksum_strict.
"""

from typing import Final, Sequence

from verhoeff.digits import parse_digits
from verhoeff.errors import VerhoeffError
from verhoeff.tables import inverse, multiply, permute

# Сдвиг позиции перестановки при вычислении контрольной цифры
COMPUTE_POSITION_OFFSET: Final[int] = 1

# Сдвиг позиции перестановки при проверке (контрольная цифра на позиции 0)
VALIDATE_POSITION_OFFSET: Final[int] = 0

# Значения permissive API при ошибке разбора
FALLBACK_CHECK_DIGIT: Final[int] = 0
FALLBACK_IS_VALID: Final[bool] = False


# =============================================================================
# СВЁРТКА
# =============================================================================


def _fold(digits: Sequence[int], offset: int) -> int:
    """Свёртка цифр справа налево через P и D, результат в [0, 9]."""
    c = 0
    for i, digit in enumerate(reversed(digits)):
        c = multiply(c, permute(i + offset, digit))
    return c


# =============================================================================
# STRICT API
# =============================================================================


def compute_checksum_strict(text: str) -> int:
    """
    Контрольная цифра Verhoeff для строки цифр.

    Args:
        text: Payload из ASCII-цифр (без контрольной цифры)

    Returns:
        Контрольная цифра 0..9; text + str(result) проходит validate

    Raises:
        EmptyInputError: Если text пустая
        InvalidCharacterError: Если text содержит не-цифру

    Examples:
        >>> compute_checksum_strict("236")
        3
        >>> compute_checksum_strict("12345")
        1
    """
    digits = parse_digits(text)
    return inverse(_fold(digits, COMPUTE_POSITION_OFFSET))


def validate_strict(text: str) -> bool:
    """
    Проверка строки, оканчивающейся контрольной цифрой.

    Args:
        text: Цифры вместе с контрольной цифрой в конце

    Returns:
        True если контрольная цифра верна, False иначе

    Raises:
        EmptyInputError: Если text пустая
        InvalidCharacterError: Если text содержит не-цифру

    Examples:
        >>> validate_strict("2363")
        True
        >>> validate_strict("2364")
        False
    """
    digits = parse_digits(text)
    return _fold(digits, VALIDATE_POSITION_OFFSET) == 0


# =============================================================================
# PERMISSIVE API
# =============================================================================


def compute_checksum(text: str) -> int:
    """
    Контрольная цифра Verhoeff; 0 при любой ошибке разбора.

    ВНИМАНИЕ: 0 при ошибке неотличим от настоящей контрольной цифры 0.
    Для обнаружения ошибок используйте compute_checksum_strict.
    """
    try:
        return compute_checksum_strict(text)
    except VerhoeffError:
        return FALLBACK_CHECK_DIGIT


def validate(text: str) -> bool:
    """
    Проверка контрольной цифры; False при пустой строке или не-цифрах.

    Для различения "неверная контрольная цифра" и "некорректный ввод"
    используйте validate_strict.
    """
    try:
        return validate_strict(text)
    except VerhoeffError:
        return FALLBACK_IS_VALID


def append_checksum(text: str) -> str:
    """
    Дописать контрольную цифру к строке.

    При ошибке разбора возвращает text без изменений (ошибка не
    сигнализируется).

    Examples:
        >>> append_checksum("236")
        '2363'
        >>> append_checksum("12a")
        '12a'
    """
    try:
        check_digit = compute_checksum_strict(text)
    except VerhoeffError:
        return text
    return f"{text}{check_digit}"
