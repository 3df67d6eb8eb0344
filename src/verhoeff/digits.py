"""
Digit Parser — разбор строки в последовательность цифр.

Принимаются только ASCII-цифры '0'..'9'. Цифры других письменностей
(деванагари, арабо-индийские, тамильские, полноширинные и т.д.)
отклоняются, а не нормализуются. Пробелы не обрезаются, знак не
обрабатывается, ведущие нули сохраняются.
"""

from typing import Tuple

from verhoeff.errors import EmptyInputError, InvalidCharacterError


def is_ascii_digit(character: str) -> bool:
    """
    Проверка, что символ — ASCII-цифра.

    str.isdigit() не подходит: он принимает '١', '५', '²' и т.п.
    """
    return len(character) == 1 and "0" <= character <= "9"


def parse_digits(text: str) -> Tuple[int, ...]:
    """
    Разбор строки в кортеж цифр той же длины и порядка.

    Args:
        text: Строка из ASCII-цифр

    Returns:
        Кортеж значений 0..9

    Raises:
        EmptyInputError: Если text пустая
        InvalidCharacterError: На первом символе вне '0'..'9'

    Examples:
        >>> parse_digits("0123")
        (0, 1, 2, 3)
    """
    if len(text) == 0:
        raise EmptyInputError()

    digits = []
    for position, character in enumerate(text):
        if not is_ascii_digit(character):
            raise InvalidCharacterError(character, position)
        digits.append(ord(character) - ord("0"))

    return tuple(digits)
